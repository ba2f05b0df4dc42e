"""
Asset Registry
==============

Ordered, in-memory list of equipment. New assets are prepended, so the
list reads newest-first followed by the seed assets in seed order.

The registry is not persisted: it is rebuilt from the seed list on every
start. Procedures keep a weak reference (asset_id) and simply stop
matching when their asset is gone.
"""

import logging
import uuid
from typing import Iterable

from app.exceptions import ValidationError
from app.models.sop import Asset

logger = logging.getLogger(__name__)


class AssetRegistry:

    def __init__(self, initial: Iterable[Asset] = ()) -> None:
        self._assets: list[Asset] = list(initial)

    def list_assets(self) -> list[Asset]:
        return list(self._assets)

    def add_asset(
        self,
        name: str | None,
        brand: str | None = "",
        model: str | None = "",
    ) -> Asset:
        """
        Create an asset and put it at the front of the list.

        Raises:
            ValidationError: name is missing or blank
        """
        if name is None or not name.strip():
            raise ValidationError("Asset name is required")

        asset = Asset(
            id=str(uuid.uuid4()),
            name=name,
            brand=brand or "",
            model=model or "",
        )
        self._assets.insert(0, asset)
        logger.info(f"Added asset {asset.id} ({asset.name})")
        return asset

    def get_asset(self, asset_id: str) -> Asset | None:
        for asset in self._assets:
            if asset.id == asset_id:
                return asset
        return None

    def search(self, term: str | None) -> list[Asset]:
        """Case-insensitive substring match on name, brand or model."""
        if not term:
            return self.list_assets()
        needle = term.lower()
        return [
            asset
            for asset in self._assets
            if needle in asset.name.lower()
            or needle in asset.brand.lower()
            or needle in asset.model.lower()
        ]

    def __len__(self) -> int:
        return len(self._assets)
