from collections.abc import AsyncGenerator
from typing import Any

from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker, create_async_engine
from sqlmodel import SQLModel

from app.config import settings


def _create_engine(url: str, **pool: Any) -> AsyncEngine:
    return create_async_engine(url, echo=False, pool_pre_ping=True, **pool)


# Request handling: webhook ingestion and reporting queries
engine = _create_engine(
    settings.database_url,
    pool_size=10,
    max_overflow=20,
    pool_recycle=300,
    pool_timeout=30,
    connect_args={"command_timeout": 60},
)

# DDL only (create_all in debug mode); migrations read the same URL in alembic/env.py
direct_engine = _create_engine(settings.database_url_direct, pool_size=1, max_overflow=1)

async_session_maker = async_sessionmaker(
    engine,
    class_=AsyncSession,
    expire_on_commit=False,
    autoflush=False,
)


async def get_db() -> AsyncGenerator[AsyncSession, None]:
    """Dependency that yields a session wrapping the whole request in one transaction.

    Commits after the handler returns and rolls back if anything raises, so
    all commits of a push event are applied together or not at all. Teardown
    runs after the response is sent; handlers whose reply acknowledges a write
    commit themselves first.
    """
    async with async_session_maker() as session:
        try:
            yield session
            await session.commit()
        except Exception:
            await session.rollback()
            raise


async def init_db() -> None:
    """Create missing tables (development only; use Alembic in production)."""
    async with direct_engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.create_all)
