from app.models.sop import Asset, DocType, GenerationRequest, SopRecord
from app.models.storage_entry import StorageEntry


__all__ = [
    "Asset",
    "DocType",
    "GenerationRequest",
    "SopRecord",
    "StorageEntry",
]
