"""API routes for the asset registry."""

from __future__ import annotations

import logging

from fastapi import APIRouter, HTTPException, Query, status

from app.api.deps import SessionDep
from app.api.utils import get_asset_or_404, to_http_exception
from app.exceptions import SopEngineerError
from app.models.sop import Asset
from app.schemas.asset import AssetCreate, AssetResponse
from app.schemas.document import DocumentListItem

logger = logging.getLogger(__name__)
router = APIRouter()


def _asset_response(session, asset: Asset) -> AssetResponse:
    return AssetResponse(
        id=asset.id,
        name=asset.name,
        brand=asset.brand,
        model=asset.model,
        document_count=len(session.documents_for_asset(asset.id)),
    )


@router.get("/", response_model=list[AssetResponse])
async def list_assets(
    session: SessionDep,
    search: str | None = Query(default=None, max_length=200),
) -> list[AssetResponse]:
    """List assets, newest first, optionally filtered by name/brand/model."""
    return [_asset_response(session, asset) for asset in session.list_assets(search)]


@router.post("/", response_model=AssetResponse, status_code=status.HTTP_201_CREATED)
async def create_asset(asset_in: AssetCreate, session: SessionDep) -> AssetResponse:
    """Add an asset and select it."""
    try:
        asset = session.add_asset(asset_in.name, asset_in.brand, asset_in.model)
    except SopEngineerError as e:
        raise to_http_exception(e) from e
    return _asset_response(session, asset)


@router.get("/selected", response_model=AssetResponse)
async def get_selected_asset(session: SessionDep) -> AssetResponse:
    if session.selected_asset is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="No asset selected")
    return _asset_response(session, session.selected_asset)


@router.get("/{asset_id}", response_model=AssetResponse)
async def get_asset(asset_id: str, session: SessionDep) -> AssetResponse:
    return _asset_response(session, get_asset_or_404(session, asset_id))


@router.post("/{asset_id}/select", response_model=AssetResponse)
async def select_asset(asset_id: str, session: SessionDep) -> AssetResponse:
    asset = get_asset_or_404(session, asset_id)
    session.select_asset(asset.id)
    return _asset_response(session, asset)


@router.get("/{asset_id}/documents", response_model=list[DocumentListItem])
async def list_asset_documents(asset_id: str, session: SessionDep) -> list[DocumentListItem]:
    """Archive for one asset, newest first."""
    get_asset_or_404(session, asset_id)
    return [DocumentListItem.from_record(r) for r in session.documents_for_asset(asset_id)]
