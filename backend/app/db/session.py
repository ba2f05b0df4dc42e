"""
Database Session Management
===========================

This module configures the SQLAlchemy async engine and session factory
backing durable storage.

Storage Shape:
--------------
The database holds a single key/value table (storage_entries). The
procedure history is written there as one JSON blob per key, so the
engine sees one small read at startup and one upsert per generation.

Drivers:
--------
- Default: local SQLite file via aiosqlite
- PostgreSQL: set DATABASE_URL, converted to postgresql+asyncpg://
"""

from typing import AsyncGenerator
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from app.config import settings
from app.db.base import Base


def build_engine(url: str, echo: bool = False) -> AsyncEngine:
    """
    Create an async engine for the given URL.

    asyncpg-only options (command_timeout, pool sizing) are applied
    to PostgreSQL URLs only; SQLite keeps SQLAlchemy's defaults.
    """
    options: dict = {"echo": echo, "future": True}
    if url.startswith("postgresql"):
        options.update(
            pool_pre_ping=True,  # Test connections before using (catches stale)
            pool_recycle=3600,
            pool_size=5 if settings.is_production else 2,
            max_overflow=10 if settings.is_production else 5,
            connect_args={"command_timeout": 60},
        )
    return create_async_engine(url, **options)


engine = build_engine(settings.database_url, echo=settings.debug)

async_session_maker = async_sessionmaker(
    engine,
    class_=AsyncSession,
    expire_on_commit=False,
    autocommit=False,
    autoflush=False,
)


async def get_db() -> AsyncGenerator[AsyncSession, None]:
    """
    Provide a database session that commits on success and rolls back
    on any exception.
    """
    async with async_session_maker() as session:
        try:
            yield session
            await session.commit()
        except Exception:
            await session.rollback()
            raise


async def init_db() -> None:
    """
    Create the storage table if it does not exist.

    Called on application startup.
    """
    import app.models  # noqa: F401  registers tables on Base.metadata

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)


async def close_db() -> None:
    """Dispose of the connection pool on shutdown."""
    await engine.dispose()
