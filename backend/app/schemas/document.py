"""Document schemas for API request/response validation."""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

from app.models.sop import DocType, SopRecord


class DocumentGenerateRequest(BaseModel):
    """
    Request schema for generating a procedure.

    asset_id is optional; without it the session's selected asset is used.
    """

    asset_id: str | None = None
    description: str = Field(..., max_length=5000)
    specs: str = Field(default="", max_length=5000)
    doc_type: DocType = DocType.STANDARD


class DocumentListItem(BaseModel):
    """Lightweight entry for the per-asset archive list."""

    id: str
    asset_id: str | None = None
    title: str
    type: DocType
    badge: str
    created_at: datetime

    @classmethod
    def from_record(cls, record: SopRecord) -> DocumentListItem:
        return cls(
            id=record.id,
            asset_id=record.asset_id,
            title=record.title,
            type=record.type,
            badge=record.type.badge,
            created_at=record.created_at,
        )


class DocumentResponse(BaseModel):

    model_config = ConfigDict(protected_namespaces=())

    id: str
    asset_id: str | None = None
    title: str
    content: str
    created_at: datetime
    description: str
    brand: str
    model: str
    specs: str
    type: DocType
    type_label: str

    @classmethod
    def from_record(cls, record: SopRecord) -> DocumentResponse:
        return cls(
            id=record.id,
            asset_id=record.asset_id,
            title=record.title,
            content=record.content,
            created_at=record.created_at,
            description=record.description,
            brand=record.brand,
            model=record.model,
            specs=record.specs,
            type=record.type,
            type_label=record.type.label,
        )
