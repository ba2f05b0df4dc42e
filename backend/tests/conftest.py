"""Shared fixtures: in-memory storage, a stubbed OpenAI client, sessions."""

from datetime import datetime, timezone
from unittest.mock import AsyncMock, MagicMock

import pytest

from app.ai.generator import SopGenerator
from app.models.sop import Asset, DocType, GenerationRequest, SopRecord
from app.services.asset_registry import AssetRegistry
from app.services.history_store import HistoryStore
from app.services.session import SopSession
from app.storage.memory import InMemoryStorage

SAMPLE_SOP = (
    "# Manutenzione Preventiva Compressor-1\n"
    "## Obiettivo\n"
    "Garantire il corretto funzionamento del compressore.\n"
    "## Procedura\n"
    "1. Scollegare l'alimentazione.\n"
    "2. Verificare la coppia di serraggio (45 Nm).\n"
)


def make_completion(text: str | None) -> MagicMock:
    """Build an object shaped like an OpenAI ChatCompletion."""
    message = MagicMock()
    message.content = text
    choice = MagicMock()
    choice.message = message
    completion = MagicMock()
    completion.choices = [choice]
    return completion


def make_record(
    record_id: str,
    asset_id: str | None,
    title: str = "Procedura",
    created_at: datetime | None = None,
) -> SopRecord:
    return SopRecord(
        id=record_id,
        asset_id=asset_id,
        title=title,
        content=f"# {title}\n",
        created_at=created_at or datetime(2026, 1, 1, tzinfo=timezone.utc),
        description="Controllo",
        type=DocType.STANDARD,
    )


@pytest.fixture
def storage():
    return InMemoryStorage()


@pytest.fixture
def history(storage):
    return HistoryStore(storage)


@pytest.fixture
def mock_openai():
    """AsyncOpenAI stand-in whose completion returns SAMPLE_SOP."""
    client = MagicMock()
    client.chat.completions.create = AsyncMock(return_value=make_completion(SAMPLE_SOP))
    return client


@pytest.fixture
def generator(mock_openai):
    return SopGenerator(api_key="sk-test", model="gpt-4o", openai_client=mock_openai)


@pytest.fixture
def registry():
    return AssetRegistry([
        Asset(id="asset-a", name="Pompa", brand="Grundfos", model="CR 32"),
        Asset(id="asset-b", name="Caldaia", brand="Viessmann", model="Vitocrossal"),
    ])


@pytest.fixture
def session(registry, history, generator):
    return SopSession(registry, history, generator)


@pytest.fixture
def generation_request():
    return GenerationRequest(
        description="Manutenzione preventiva trimestrale",
        brand="Atlas",
        model="GX7",
        specs="Coppia 45 Nm",
        doc_type=DocType.STANDARD,
    )
