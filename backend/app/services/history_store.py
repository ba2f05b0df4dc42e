"""
History Store - Generated Procedure Archive
===========================================

Keeps every generated SopRecord, newest first, and persists the whole
list as one JSON array under a single storage key.

Write Model:
------------
append() builds the new list, rewrites the full blob, and only then
replaces the in-memory list. There is no incremental append in the
storage medium; the stored value is always a complete snapshot. A failed
write propagates and leaves the in-memory list untouched.

Key Versioning:
---------------
The key carries a schema suffix ("sop_history_v2"). A store opened with a
new key starts empty and never reads data written under an older key.
That cutoff is intentional: old history is abandoned, not migrated.

Corrupt State Policy:
---------------------
If the stored blob is not valid JSON, or its entries do not validate as
records, decoding raises CorruptStateError. By default load() logs the
error and continues with an empty history; the bad blob stays in storage
until the next append() overwrites it. With strict=True the error is
re-raised to the caller instead.
"""

from __future__ import annotations

import json
import logging

from pydantic import TypeAdapter
from pydantic import ValidationError as PydanticValidationError

from app.exceptions import CorruptStateError
from app.models.sop import SopRecord
from app.storage.base import StoragePort

logger = logging.getLogger(__name__)

DEFAULT_HISTORY_KEY = "sop_history_v2"

_records_adapter = TypeAdapter(list[SopRecord])


def encode_history(records: list[SopRecord]) -> str:
    return _records_adapter.dump_json(records, by_alias=True).decode("utf-8")


def decode_history(blob: str) -> list[SopRecord]:
    """
    Parse a stored history blob.

    Raises:
        CorruptStateError: blob is not JSON or not a list of valid records
    """
    try:
        data = json.loads(blob)
    except json.JSONDecodeError as e:
        raise CorruptStateError(f"Stored history is not valid JSON: {e}") from e
    if not isinstance(data, list):
        raise CorruptStateError(
            f"Stored history must be a JSON array, got {type(data).__name__}"
        )
    try:
        return _records_adapter.validate_python(data)
    except PydanticValidationError as e:
        raise CorruptStateError(f"Stored history has invalid records: {e}") from e


class HistoryStore:
    """
    Persisted, newest-first list of generated procedures.

    Usage:
        store = HistoryStore(SqlStorage(async_session_maker))
        await store.load()
        await store.append(record)
        store.filter_by_asset(asset.id)
    """

    def __init__(
        self,
        storage: StoragePort,
        key: str = DEFAULT_HISTORY_KEY,
        strict: bool = False,
    ) -> None:
        self.storage = storage
        self.key = key
        self.strict = strict
        self._records: list[SopRecord] = []

    @property
    def records(self) -> list[SopRecord]:
        return list(self._records)

    async def load(self) -> list[SopRecord]:
        """Replace the in-memory list with what storage holds."""
        blob = await self.storage.get(self.key)
        if blob is None:
            self._records = []
            return []

        try:
            self._records = decode_history(blob)
        except CorruptStateError as e:
            if self.strict:
                raise
            logger.error(f"Discarding unreadable history under {self.key!r}: {e}")
            self._records = []

        logger.info(f"Loaded {len(self._records)} records from {self.key!r}")
        return self.records

    async def append(self, record: SopRecord) -> None:
        await self._persist([record, *self._records])

    async def clear(self) -> None:
        await self._persist([])
        logger.info(f"Cleared history under {self.key!r}")

    def filter_by_asset(self, asset_id: str | None) -> list[SopRecord]:
        """Records linked to asset_id, newest first. Unknown ids give []."""
        if asset_id is None:
            return []
        return [r for r in self._records if r.asset_id == asset_id]

    def get(self, record_id: str) -> SopRecord | None:
        for record in self._records:
            if record.id == record_id:
                return record
        return None

    def __len__(self) -> int:
        return len(self._records)

    async def _persist(self, updated: list[SopRecord]) -> None:
        # In-memory list only changes once storage has accepted the snapshot
        await self.storage.set(self.key, encode_history(updated))
        self._records = updated
