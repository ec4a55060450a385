"""Alembic 마이그레이션 환경 - 비동기 엔진으로 실행.

Alembic migration environment running against the async engine.
The database URL comes from ``querypractice.config.settings``.
"""

import asyncio

from alembic import context
from sqlalchemy.engine import Connection

from querypractice.config import settings
from querypractice.database import Base, build_engine
from querypractice.models import *  # noqa: F401,F403 - register all models with metadata

config = context.config
target_metadata = Base.metadata


def run_migrations_offline() -> None:
    """DB 연결 없이 SQL 스크립트를 생성합니다."""
    context.configure(
        url=settings.DATABASE_URL,
        target_metadata=target_metadata,
        literal_binds=True,
        dialect_opts={"paramstyle": "named"},
    )
    with context.begin_transaction():
        context.run_migrations()


def do_run_migrations(connection: Connection) -> None:
    context.configure(connection=connection, target_metadata=target_metadata)
    with context.begin_transaction():
        context.run_migrations()


async def run_migrations_online() -> None:
    """비동기 엔진 연결 위에서 마이그레이션을 실행합니다."""
    engine = build_engine(settings.DATABASE_URL)
    async with engine.connect() as connection:
        await connection.run_sync(do_run_migrations)
    await engine.dispose()


if context.is_offline_mode():
    run_migrations_offline()
else:
    asyncio.run(run_migrations_online())
