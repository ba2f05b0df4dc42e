from app.schemas.asset import AssetCreate, AssetResponse
from app.schemas.document import DocumentGenerateRequest, DocumentListItem, DocumentResponse

__all__ = [
    "AssetCreate",
    "AssetResponse",
    "DocumentGenerateRequest",
    "DocumentListItem",
    "DocumentResponse",
]
