"""
Session Controller
==================

SopSession is the single owner of a user's working state: the asset
registry, the procedure history, the generator, the selected asset and
the busy flag. Nothing here is module-level; the API keeps one session
on app.state and tests build their own.

Busy Flag:
----------
Only one generation may be in flight per session. A second request while
the first is outstanding fails with GenerationInProgressError; nothing is
queued. The flag is cleared whether the generation succeeds or fails.
"""

from __future__ import annotations

import logging
from typing import Iterable

from app.ai.generator import SopGenerator
from app.exceptions import GenerationInProgressError, PreconditionError, ValidationError
from app.models.sop import Asset, DocType, GenerationRequest, SopRecord
from app.services.asset_registry import AssetRegistry
from app.services.history_store import HistoryStore
from app.services.record_builder import build_record
from app.services.seeding import seed_assets

logger = logging.getLogger(__name__)


class SopSession:

    def __init__(
        self,
        registry: AssetRegistry,
        history: HistoryStore,
        generator: SopGenerator,
    ) -> None:
        self.registry = registry
        self.history = history
        self.generator = generator
        self.selected_asset: Asset | None = None
        self._generating = False

    @property
    def is_generating(self) -> bool:
        return self._generating

    async def start(self) -> None:
        await self.history.load()

    def list_assets(self, search: str | None = None) -> list[Asset]:
        return self.registry.search(search)

    def add_asset(self, name: str | None, brand: str | None = "", model: str | None = "") -> Asset:
        """Create an asset and make it the selected one."""
        asset = self.registry.add_asset(name, brand, model)
        self.selected_asset = asset
        return asset

    def select_asset(self, asset_id: str) -> Asset:
        asset = self.registry.get_asset(asset_id)
        if asset is None:
            raise PreconditionError(f"Unknown asset: {asset_id}")
        self.selected_asset = asset
        return asset

    def documents_for_asset(self, asset_id: str) -> list[SopRecord]:
        return self.history.filter_by_asset(asset_id)

    async def generate_document(
        self,
        description: str,
        specs: str = "",
        doc_type: DocType = DocType.STANDARD,
        asset_id: str | None = None,
    ) -> SopRecord:
        """
        Generate, record and persist a procedure for an asset.

        Uses asset_id when given (and selects that asset), otherwise the
        currently selected asset.

        Raises:
            ValidationError: description is blank
            PreconditionError: no asset selected, or asset_id is unknown
            GenerationInProgressError: another generation is running
            ConfigurationError, UpstreamError: from the generator
        """
        if not description or not description.strip():
            raise ValidationError("Description is required")

        if self._generating:
            raise GenerationInProgressError("A document is already being generated")

        asset = self.select_asset(asset_id) if asset_id else self.selected_asset
        if asset is None:
            raise PreconditionError("Select an asset before generating a document")

        request = GenerationRequest(
            description=description,
            brand=asset.brand,
            model=asset.model,
            specs=specs or "",
            doc_type=doc_type,
        )

        self._generating = True
        try:
            result = await self.generator.generate(request)
            record = build_record(result.text, request, asset.id)
            await self.history.append(record)
        finally:
            self._generating = False

        logger.info(f"Stored document {record.id} for asset {asset.id}: {record.title}")
        return record


def create_session(
    history: HistoryStore,
    generator: SopGenerator,
    assets: Iterable[Asset] | None = None,
) -> SopSession:
    """Build a session seeded with the initial assets unless others are given."""
    registry = AssetRegistry(seed_assets() if assets is None else assets)
    return SopSession(registry, history, generator)
