"""
Document Record Builder
=======================

Turns generated text plus the request that produced it into a SopRecord.

Title Derivation:
-----------------
Precedence is fixed:

1. The first line that is a level-1 Markdown heading ("# Title").
   "## Title" is not level 1 and never matches.
2. Otherwise "SOP: " + the first 30 characters of the description + "...".

The chosen candidate then has every "**" emphasis marker removed and is
trimmed. If that leaves nothing (e.g. "# ** **"), the fallback title from
step 2 is used instead; it always keeps the "SOP:" label, so a record
title is never empty.

Content is stored verbatim, heading included. Hiding the heading in the
rendered view is an export concern (see app.services.export).
"""

from __future__ import annotations

import re
import uuid
from datetime import datetime, timezone
from typing import Callable

from app.exceptions import PreconditionError
from app.models.sop import GenerationRequest, SopRecord

HEADING_PATTERN = re.compile(r"^#[ \t]+(.+)$", re.MULTILINE)
EMPHASIS_MARKER = "**"
FALLBACK_LABEL = "SOP: "
FALLBACK_DESCRIPTION_CHARS = 30


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


def _clean_title(candidate: str) -> str:
    return candidate.replace(EMPHASIS_MARKER, "").strip()


def fallback_title(description: str) -> str:
    return _clean_title(f"{FALLBACK_LABEL}{description[:FALLBACK_DESCRIPTION_CHARS]}...")


def derive_title(raw_text: str, description: str) -> str:
    match = HEADING_PATTERN.search(raw_text)
    if match:
        title = _clean_title(match.group(1))
        if title:
            return title
    return fallback_title(description)


def build_record(
    raw_text: str,
    request: GenerationRequest,
    asset_id: str | None,
    *,
    clock: Callable[[], datetime] = _utcnow,
) -> SopRecord:
    """
    Build an immutable record for a successful generation.

    Args:
        raw_text: Generated text, stored as-is
        request: Inputs used for the generation (copied onto the record)
        asset_id: Id of the selected asset
        clock: Source of the creation instant (overridable in tests)

    Raises:
        PreconditionError: raw_text is empty or asset_id is missing
    """
    if not raw_text or not raw_text.strip():
        raise PreconditionError("Cannot build a record from empty generated text")
    if not asset_id:
        raise PreconditionError("Cannot build a record without a selected asset")

    return SopRecord(
        id=str(uuid.uuid4()),
        asset_id=asset_id,
        title=derive_title(raw_text, request.description),
        content=raw_text,
        created_at=clock(),
        description=request.description,
        brand=request.brand,
        model=request.model,
        specs=request.specs,
        type=request.doc_type,
    )
