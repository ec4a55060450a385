"""엔진 생성 옵션 테스트."""

from querypractice.database import build_engine


class TestBuildEngine:
    async def test_sqlite_engine(self, tmp_path):
        engine = build_engine(f"sqlite+aiosqlite:///{tmp_path / 'x.db'}")
        assert engine.dialect.name == "sqlite"
        await engine.dispose()

    async def test_postgres_engine_pool_options(self):
        """asyncpg 엔진은 풀 크기를 설정 (연결은 하지 않음)."""
        engine = build_engine("postgresql+asyncpg://user:pw@localhost:5432/db")
        assert engine.dialect.name == "postgresql"
        assert engine.pool.size() == 5
        await engine.dispose()
