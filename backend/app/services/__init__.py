from app.services.asset_registry import AssetRegistry
from app.services.history_store import HistoryStore
from app.services.record_builder import build_record, derive_title
from app.services.session import SopSession, create_session

__all__ = [
    "AssetRegistry",
    "HistoryStore",
    "build_record",
    "derive_title",
    "SopSession",
    "create_session",
]
