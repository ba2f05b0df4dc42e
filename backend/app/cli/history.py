"""
Inspect or reset the stored procedure history.

Usage:
    python -m app.cli.history            list stored procedures
    python -m app.cli.history --asset ID list procedures of one asset
    python -m app.cli.history --clear    empty the history
"""

import argparse
import asyncio
import logging

from app.config import settings
from app.db import async_session_maker, close_db, init_db
from app.services.history_store import HistoryStore
from app.storage.sql import SqlStorage

logger = logging.getLogger(__name__)


async def run(asset_id: str | None, clear: bool) -> None:
    await init_db()
    store = HistoryStore(
        SqlStorage(async_session_maker),
        key=settings.history_storage_key,
        strict=settings.strict_history_load,
    )
    try:
        await store.load()
        if clear:
            await store.clear()
            return

        records = store.records if asset_id is None else store.filter_by_asset(asset_id)
        for record in records:
            print(
                f"{record.created_at:%Y-%m-%d %H:%M}  {record.type.badge:<6}  "
                f"{record.id[:6].upper()}  {record.asset_id or '-':<36}  {record.title}"
            )
        print(f"{len(records)} document(s)")
    finally:
        await close_db()


def main() -> None:
    logging.basicConfig(level=logging.INFO)

    parser = argparse.ArgumentParser(description="Stored SOP history")
    parser.add_argument("--asset", dest="asset_id", help="only documents of this asset id")
    parser.add_argument("--clear", action="store_true", help="delete the whole history")
    args = parser.parse_args()

    asyncio.run(run(args.asset_id, args.clear))


if __name__ == "__main__":
    main()
