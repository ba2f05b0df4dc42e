"""API routes for generating, listing and exporting procedures."""

from __future__ import annotations

import logging
from pathlib import Path
from urllib.parse import quote

from fastapi import APIRouter, Query, Request, status
from fastapi.responses import HTMLResponse, PlainTextResponse
from fastapi.templating import Jinja2Templates

from app.api.deps import SessionDep
from app.api.utils import get_document_or_404, to_http_exception
from app.exceptions import SopEngineerError
from app.schemas.document import DocumentGenerateRequest, DocumentListItem, DocumentResponse
from app.services.export import markdown_filename, print_context

logger = logging.getLogger(__name__)
router = APIRouter()

templates = Jinja2Templates(directory=str(Path(__file__).resolve().parents[2] / "templates"))


@router.post("/generate", response_model=DocumentResponse, status_code=status.HTTP_201_CREATED)
async def generate_document(doc_in: DocumentGenerateRequest, session: SessionDep) -> DocumentResponse:
    """
    Generate a procedure for the given (or selected) asset and store it.

    Errors map to: 422 blank description, 400 no/unknown asset,
    409 generation already running, 503 missing API key, 502 upstream failure.
    """
    try:
        record = await session.generate_document(
            description=doc_in.description,
            specs=doc_in.specs,
            doc_type=doc_in.doc_type,
            asset_id=doc_in.asset_id,
        )
    except SopEngineerError as e:
        logger.warning(f"Generation rejected: {e}")
        raise to_http_exception(e) from e
    return DocumentResponse.from_record(record)


@router.get("/", response_model=list[DocumentListItem])
async def list_documents(
    session: SessionDep,
    asset_id: str | None = Query(default=None),
) -> list[DocumentListItem]:
    """Full history, newest first, or only the documents of asset_id."""
    records = session.history.records if asset_id is None else session.documents_for_asset(asset_id)
    return [DocumentListItem.from_record(r) for r in records]


@router.get("/{document_id}", response_model=DocumentResponse)
async def get_document(document_id: str, session: SessionDep) -> DocumentResponse:
    return DocumentResponse.from_record(get_document_or_404(session, document_id))


@router.get("/{document_id}/markdown", response_class=PlainTextResponse)
async def download_markdown(document_id: str, session: SessionDep) -> PlainTextResponse:
    """Content verbatim as a .md attachment."""
    record = get_document_or_404(session, document_id)
    return PlainTextResponse(
        content=record.content,
        media_type="text/markdown; charset=utf-8",
        headers={"Content-Disposition": f"attachment; filename*=UTF-8''{quote(markdown_filename(record))}"},
    )


@router.get("/{document_id}/print", response_class=HTMLResponse)
async def print_document(document_id: str, request: Request, session: SessionDep) -> HTMLResponse:
    """Printable page with the header table and the body without its H1."""
    record = get_document_or_404(session, document_id)
    return templates.TemplateResponse(request, "sop_print.html", print_context(record))
