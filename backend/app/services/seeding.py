"""
Seed Data - Initial Asset Registry
==================================

Demo equipment every new session starts with. Ids are stable so that
procedures stored against a seed asset stay linked across restarts, even
though the registry itself is rebuilt from this list each time.
"""

from app.models.sop import Asset

INITIAL_ASSETS: tuple[Asset, ...] = (
    Asset(id="asset-001", name="Compressore Aria Principale", brand="Atlas Copco", model="GA 30"),
    Asset(id="asset-002", name="Pompa Centrifuga Circuito Raffreddamento", brand="Grundfos", model="CR 32-2"),
    Asset(id="asset-003", name="Unità Trattamento Aria UTA-1", brand="Daikin", model="D-AHU Professional"),
    Asset(id="asset-004", name="Caldaia a Condensazione", brand="Viessmann", model="Vitocrossal 300"),
    Asset(id="asset-005", name="Carrello Elevatore", brand="Linde", model="E20"),
    Asset(id="asset-006", name="Gruppo Elettrogeno di Emergenza", brand="Caterpillar", model="C15"),
)


def seed_assets() -> list[Asset]:
    """Return a fresh list of the initial assets, in display order."""
    return list(INITIAL_ASSETS)
