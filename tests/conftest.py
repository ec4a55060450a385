"""테스트 인프라 - 임시 SQLite DB, 세션, httpx 클라이언트 픽스처.

Test infrastructure - Temporary SQLite database, session and httpx client fixtures.
Each test gets its own database file with the schema created from metadata.
The ``members`` fixture inserts the practice data set, flushes it, and
clears the session so queries read back from the database.
"""

from collections.abc import AsyncGenerator

import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from querypractice.database import Base, get_db
from querypractice.main import app
from querypractice.models import *  # noqa: F401,F403 - register all models with metadata
from querypractice.models import Member, Team


# ---------------------------------------------------------------------------
# Function-scoped: 엔진, 세션, 클라이언트
# ---------------------------------------------------------------------------
@pytest_asyncio.fixture
async def engine(tmp_path) -> AsyncGenerator[AsyncEngine, None]:
    """테스트용 async 엔진. 스키마를 생성합니다."""
    eng = create_async_engine(f"sqlite+aiosqlite:///{tmp_path / 'test.db'}", echo=False)

    async with eng.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield eng
    await eng.dispose()


@pytest_asyncio.fixture
async def db(engine: AsyncEngine) -> AsyncGenerator[AsyncSession, None]:
    """각 테스트에 격리된 DB 세션을 제공합니다."""
    factory = async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)

    async with factory() as session:
        yield session
        await session.rollback()


@pytest_asyncio.fixture
async def client(db: AsyncSession) -> AsyncGenerator[AsyncClient, None]:
    """FastAPI 테스트 클라이언트 - DB 세션을 오버라이드합니다."""
    async def _override_get_db() -> AsyncGenerator[AsyncSession, None]:
        yield db

    app.dependency_overrides[get_db] = _override_get_db

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac

    app.dependency_overrides.clear()


# ---------------------------------------------------------------------------
# 헬퍼 픽스처: 테스트용 데이터 생성
# ---------------------------------------------------------------------------
@pytest_asyncio.fixture
async def teams(db: AsyncSession) -> dict[str, Team]:
    """teamA, teamB를 생성합니다."""
    result = {"teamA": Team("teamA"), "teamB": Team("teamB")}
    db.add_all(result.values())
    await db.flush()
    return result


@pytest_asyncio.fixture
async def members(db: AsyncSession, teams: dict[str, Team]) -> list[Member]:
    """member1~4를 생성한 뒤 flush/clear 합니다.

    teamA: member1(10), member2(20) / teamB: member3(30), member4(40)
    """
    result = [
        Member("member1", 10, teams["teamA"]),
        Member("member2", 20, teams["teamA"]),
        Member("member3", 30, teams["teamB"]),
        Member("member4", 40, teams["teamB"]),
    ]
    db.add_all(result)
    await db.flush()
    db.expunge_all()
    return result
