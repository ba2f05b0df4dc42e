"""API route tests using FastAPI's TestClient with an in-memory session."""

import warnings
from unittest.mock import AsyncMock

import pytest
from fastapi.testclient import TestClient

from app.ai.generator import SopGenerator
from app.api.utils import to_http_exception
from app.exceptions import (
    ConfigurationError,
    GenerationInProgressError,
    PreconditionError,
    UpstreamError,
    ValidationError,
)
from app.main import create_app
from app.services.session import SopSession
from tests.conftest import make_completion


@pytest.fixture
def client(session):
    with TestClient(create_app(session=session)) as test_client:
        yield test_client


def _generate(client, **payload):
    body = {"description": "Manutenzione preventiva trimestrale", "specs": "Coppia 45 Nm"}
    body.update(payload)
    return client.post("/api/documents/generate", json=body)


class TestStatusEndpoints:

    def test_root(self, client):
        response = client.get("/")
        assert response.status_code == 200
        assert response.json()["status"] == "running"

    def test_health(self, client):
        data = client.get("/health").json()
        assert data["status"] == "healthy"
        assert data["generation_configured"] is True
        assert data["assets"] == 2


class TestAssetRoutes:

    def test_list_assets(self, client):
        data = client.get("/api/assets/").json()
        assert [a["id"] for a in data] == ["asset-a", "asset-b"]

    def test_search_assets(self, client):
        data = client.get("/api/assets/", params={"search": "viessmann"}).json()
        assert [a["id"] for a in data] == ["asset-b"]

    def test_create_asset_is_listed_first_and_selected(self, client):
        response = client.post("/api/assets/", json={"name": "Compressor-1", "brand": "Atlas", "model": "GX7"})
        assert response.status_code == 201
        created = response.json()

        assert client.get("/api/assets/").json()[0]["id"] == created["id"]
        assert client.get("/api/assets/selected").json()["id"] == created["id"]

    def test_create_asset_without_name(self, client):
        response = client.post("/api/assets/", json={"brand": "Atlas"})
        assert response.status_code == 422
        assert "name" in response.json()["detail"]

    def test_no_selection(self, client):
        assert client.get("/api/assets/selected").status_code == 404

    def test_select_unknown_asset(self, client):
        assert client.post("/api/assets/missing/select").status_code == 404


class TestDocumentRoutes:

    def test_end_to_end_generation(self, client):
        asset = client.post("/api/assets/", json={"name": "Compressor-1", "brand": "Atlas", "model": "GX7"}).json()

        response = _generate(client, asset_id=asset["id"], doc_type="standard")
        assert response.status_code == 201
        document = response.json()
        assert document["asset_id"] == asset["id"]
        assert document["title"] == "Manutenzione Preventiva Compressor-1"
        assert document["type"] == "standard"

        listed = client.get(f"/api/assets/{asset['id']}/documents").json()
        assert [d["id"] for d in listed] == [document["id"]]
        assert listed[0]["badge"] == "SOP"
        assert client.get(f"/api/assets/{asset['id']}").json()["document_count"] == 1

    def test_generate_uses_selected_asset(self, client):
        client.post("/api/assets/asset-b/select")
        document = _generate(client).json()
        assert document["asset_id"] == "asset-b"

    def test_generate_without_asset(self, client):
        assert _generate(client).status_code == 400

    def test_generate_blank_description(self, client):
        assert _generate(client, asset_id="asset-a", description="  ").status_code == 422

    def test_generate_invalid_doc_type(self, client):
        assert _generate(client, asset_id="asset-a", doc_type="memo").status_code == 422

    def test_generate_without_credential(self, registry, history, mock_openai):
        session = SopSession(registry, history, SopGenerator(api_key=None, openai_client=mock_openai))
        with TestClient(create_app(session=session)) as client:
            response = _generate(client, asset_id="asset-a")

        assert response.status_code == 503
        mock_openai.chat.completions.create.assert_not_called()

    def test_generate_upstream_failure(self, client, mock_openai):
        mock_openai.chat.completions.create = AsyncMock(return_value=make_completion(None))
        assert _generate(client, asset_id="asset-a").status_code == 502

    def test_history_listing_and_filter(self, client):
        first = _generate(client, asset_id="asset-a").json()
        second = _generate(client, asset_id="asset-b").json()

        assert [d["id"] for d in client.get("/api/documents/").json()] == [second["id"], first["id"]]
        filtered = client.get("/api/documents/", params={"asset_id": "asset-a"}).json()
        assert [d["id"] for d in filtered] == [first["id"]]
        assert client.get("/api/documents/", params={"asset_id": "nope"}).json() == []

    def test_get_document(self, client):
        document = _generate(client, asset_id="asset-a").json()

        fetched = client.get(f"/api/documents/{document['id']}").json()
        assert fetched == document
        assert client.get("/api/documents/missing").status_code == 404

    def test_markdown_download(self, client):
        document = _generate(client, asset_id="asset-a").json()

        response = client.get(f"/api/documents/{document['id']}/markdown")
        assert response.status_code == 200
        assert response.headers["content-type"].startswith("text/markdown")
        assert "Manutenzione_Preventiva_Compressor-1_SOP.md" in response.headers["content-disposition"]
        assert response.text == document["content"]

    def test_print_view(self, client):
        document = _generate(client, asset_id="asset-a").json()

        response = client.get(f"/api/documents/{document['id']}/print")
        assert response.status_code == 200
        assert response.headers["content-type"].startswith("text/html")
        html = response.text
        assert "Manutenzione Preventiva Compressor-1" in html
        assert document["id"][:6].upper() in html
        assert "Specifiche Tecniche di Riferimento" in html
        assert "# Manutenzione Preventiva" not in html

    def test_print_view_renders_markdown(self, client):
        document = _generate(client, asset_id="asset-a").json()

        html = client.get(f"/api/documents/{document['id']}/print").text
        assert "<h2>Obiettivo</h2>" in html
        assert "<li>Scollegare l'alimentazione.</li>" in html
        assert "## " not in html


class TestErrorMapping:

    @pytest.mark.parametrize(
        "error, status_code",
        [
            (ValidationError("blank"), 422),
            (PreconditionError("no asset"), 400),
            (GenerationInProgressError("busy"), 409),
            (ConfigurationError("no key"), 503),
            (UpstreamError("boom"), 502),
        ],
    )
    def test_domain_errors_map_without_deprecation_warnings(self, error, status_code):
        with warnings.catch_warnings():
            warnings.simplefilter("error")
            exc = to_http_exception(error)

        assert exc.status_code == status_code
        assert exc.detail == str(error)
