"""
Domain Records - Assets and Generated Procedures
================================================

Assets are pieces of equipment the user manages procedures for.
SopRecords are generated Standard Operating Procedures, stored together
with the inputs that produced them.

Immutability:
-------------
Both records are frozen pydantic models. Once built, no field can be
reassigned; the history only ever gains or loses whole records.

Serialization:
--------------
Records serialize with camelCase keys (assetId, createdAt), the same
field names the browser client wrote. createdAt is written as an ISO-8601
UTC string; epoch-millisecond numbers from older blobs still decode.

Denormalized Inputs:
--------------------
brand/model/specs/description are copied onto each record at build time.
The asset may change or disappear later; the record keeps what was used.
"""

from __future__ import annotations

from datetime import datetime
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel


class DocType(str, Enum):
    """Kind of document requested from the generator."""

    STANDARD = "standard"
    TECHNICAL_SHEET = "technical_sheet"
    INSTRUCTION = "instruction"

    @property
    def label(self) -> str:
        return _DOC_TYPE_LABELS[self]

    @property
    def badge(self) -> str:
        return _DOC_TYPE_BADGES[self]


_DOC_TYPE_LABELS = {
    DocType.STANDARD: "Procedura Standard",
    DocType.TECHNICAL_SHEET: "Scheda Tecnica",
    DocType.INSTRUCTION: "Istruzione Operativa",
}

_DOC_TYPE_BADGES = {
    DocType.STANDARD: "SOP",
    DocType.TECHNICAL_SHEET: "Scheda",
    DocType.INSTRUCTION: "Istr.",
}


class _Record(BaseModel):
    model_config = ConfigDict(
        frozen=True,
        alias_generator=to_camel,
        populate_by_name=True,
        protected_namespaces=(),
    )


class Asset(_Record):
    """A piece of equipment. Identity is the id; names may repeat."""

    id: str
    name: str
    brand: str = ""
    model: str = ""


class SopRecord(_Record):
    """
    A generated procedure plus the inputs used to produce it.

    Attributes:
        id: Unique identifier assigned at build time
        asset_id: Weak reference to an Asset (None means unlinked)
        title: Derived from the first H1 of content, never empty
        content: Generated text, verbatim
        created_at: Build instant (UTC)
        description/brand/model/specs: Copies of the generation inputs
        type: Requested document kind
    """

    id: str
    asset_id: str | None = None
    title: str = Field(..., min_length=1)
    content: str
    created_at: datetime
    description: str = ""
    brand: str = ""
    model: str = ""
    specs: str = ""
    type: DocType = DocType.STANDARD

    @field_validator("type", mode="before")
    @classmethod
    def _default_type(cls, value: object) -> object:
        # Records written before doc types existed carry no type
        return DocType.STANDARD if value is None else value


class GenerationRequest(BaseModel):
    """Inputs for one generation call."""

    model_config = ConfigDict(protected_namespaces=())

    description: str
    brand: str = ""
    model: str = ""
    specs: str = ""
    doc_type: DocType = DocType.STANDARD

    @field_validator("brand", "model", "specs", mode="before")
    @classmethod
    def _none_to_empty(cls, value: object) -> object:
        return "" if value is None else value
