"""Asset schemas for API request/response validation."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class AssetCreate(BaseModel):
    """Request schema for adding an asset. Name is validated by the registry."""

    model_config = ConfigDict(protected_namespaces=())

    name: str | None = None
    brand: str | None = Field(default=None, max_length=200)
    model: str | None = Field(default=None, max_length=200)


class AssetResponse(BaseModel):

    model_config = ConfigDict(from_attributes=True, protected_namespaces=())

    id: str
    name: str
    brand: str
    model: str
    document_count: int = Field(default=0, ge=0)
