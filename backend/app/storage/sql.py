"""SQLAlchemy-backed key/value storage."""

import logging

from sqlalchemy import delete
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from app.models.storage_entry import StorageEntry

logger = logging.getLogger(__name__)


class SqlStorage:
    """
    Stores each key as one row of storage_entries.

    Every call runs in its own short transaction, so a set() either
    replaces the stored blob completely or raises.
    """

    def __init__(self, session_maker: async_sessionmaker[AsyncSession]) -> None:
        self._session_maker = session_maker

    async def get(self, key: str) -> str | None:
        async with self._session_maker() as session:
            entry = await session.get(StorageEntry, key)
            return entry.value if entry else None

    async def set(self, key: str, value: str) -> None:
        async with self._session_maker() as session:
            try:
                entry = await session.get(StorageEntry, key)
                if entry is None:
                    session.add(StorageEntry(key=key, value=value))
                else:
                    entry.value = value
                await session.commit()
            except Exception:
                await session.rollback()
                raise
        logger.debug(f"Stored {len(value)} chars under {key!r}")

    async def delete(self, key: str) -> None:
        async with self._session_maker() as session:
            await session.execute(delete(StorageEntry).where(StorageEntry.key == key))
            await session.commit()
