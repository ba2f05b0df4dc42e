from .helper import get_asset_or_404, get_document_or_404, to_http_exception

__all__ = [
    "get_asset_or_404",
    "get_document_or_404",
    "to_http_exception",
]
