"""데이터베이스 엔진 및 세션 설정 모듈.

Database engine and session configuration module.
Sets up the async SQLAlchemy engine, session factory, and ORM base class.
SQLite (aiosqlite) is the default; PostgreSQL (asyncpg) gets pool sizing.
"""

from collections.abc import AsyncGenerator
from typing import Any

from sqlalchemy.ext.asyncio import (
    AsyncAttrs,
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.orm import DeclarativeBase

from querypractice.config import settings


def build_engine(url: str, echo: bool = False) -> AsyncEngine:
    """드라이버에 맞는 옵션으로 비동기 엔진을 생성합니다.

    Create an async engine with driver-specific options.

    Args:
        url: 비동기 DB 연결 문자열 (Async database URL)
        echo: SQL 로그 출력 여부 (Whether to echo SQL statements)

    Returns:
        AsyncEngine: 생성된 엔진 (Configured async engine)
    """
    options: dict[str, Any] = {"echo": echo, "pool_pre_ping": True}
    if url.startswith("postgresql+asyncpg"):
        # 트랜잭션 모드 풀러에서 prepared statement 비활성화
        # Disable prepared statement caches for transaction-mode pooling
        options.update(
            pool_size=5,
            max_overflow=10,
            connect_args={"statement_cache_size": 0},
        )
    return create_async_engine(url, **options)


# 비동기 데이터베이스 엔진 - Async database engine
engine: AsyncEngine = build_engine(settings.DATABASE_URL, echo=settings.DEBUG)

# 비동기 세션 팩토리 - Async session factory
# expire_on_commit=False: 커밋 후에도 객체 속성 접근 가능 (Allows attribute access after commit)
async_session: async_sessionmaker[AsyncSession] = async_sessionmaker(
    engine,
    class_=AsyncSession,
    expire_on_commit=False,
)


class Base(AsyncAttrs, DeclarativeBase):
    """SQLAlchemy 선언적 베이스 클래스.

    Declarative base class for all ORM models.
    AsyncAttrs exposes ``awaitable_attrs`` so lazy relationships can be
    loaded explicitly under an async session.
    """

    pass


async def get_db() -> AsyncGenerator[AsyncSession, None]:
    """비동기 데이터베이스 세션을 생성하고 요청 종료 시 닫습니다.

    FastAPI dependency that yields an async database session.

    Yields:
        AsyncSession: SQLAlchemy 비동기 세션 인스턴스 (Async session instance)
    """
    async with async_session() as session:
        try:
            yield session
        finally:
            await session.close()
