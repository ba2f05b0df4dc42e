from fastapi import HTTPException, status

from app.exceptions import (
    ConfigurationError,
    CorruptStateError,
    GenerationInProgressError,
    PreconditionError,
    SopEngineerError,
    UpstreamError,
    ValidationError,
)
from app.models.sop import Asset, SopRecord
from app.services.session import SopSession

ERROR_STATUS_CODES: dict[type[SopEngineerError], int] = {
    ValidationError: 422,
    PreconditionError: status.HTTP_400_BAD_REQUEST,
    GenerationInProgressError: status.HTTP_409_CONFLICT,
    ConfigurationError: status.HTTP_503_SERVICE_UNAVAILABLE,
    UpstreamError: status.HTTP_502_BAD_GATEWAY,
    CorruptStateError: status.HTTP_500_INTERNAL_SERVER_ERROR,
}


def to_http_exception(error: SopEngineerError) -> HTTPException:
    """Map a domain error to an HTTPException carrying its message."""
    for error_type, status_code in ERROR_STATUS_CODES.items():
        if isinstance(error, error_type):
            return HTTPException(status_code=status_code, detail=str(error))
    return HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=str(error))


def get_asset_or_404(session: SopSession, asset_id: str) -> Asset:
    asset = session.registry.get_asset(asset_id)
    if not asset:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Asset not found")
    return asset


def get_document_or_404(session: SopSession, document_id: str) -> SopRecord:
    record = session.history.get(document_id)
    if not record:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Document not found")
    return record
