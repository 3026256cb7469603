"""
Tests for the /search HTTP endpoints with a stubbed gateway.
"""

import pytest
from fastapi.testclient import TestClient

from app.api.search import get_search_gateway
from app.core.config import settings
from app.core.search_errors import BackendUnavailable, InvalidArgument
from app.main import app
from app.schemas.search import Pagination, ResultPage, SearchResult
from app.services.hit_classifier import HitClassifier
from app.services.result_hydrator import ResultHydrator
from app.services.search_gateway import SearchGateway


class RecordingIndexClient:
    def __init__(self):
        self.calls = []

    async def search(self, indices, body):
        self.calls.append((indices, body))
        raise AssertionError("index must not be queried")


class StubGateway:
    def __init__(self, error=None):
        self.error = error
        self.calls = []

    async def _answer(self, variant, entry, per_page, page):
        self.calls.append((variant, entry, per_page, page))
        if self.error:
            raise self.error
        return ResultPage(
            results=[SearchResult(id="a1", type="artist", kind="artist", name="The Beatles",
                                  slug="the-beatles", image_url="http://img/a1.jpg", country="GB")],
            pagination=Pagination(page_number=page or 1, per_page=per_page or 5, total_matches=1, total_pages=1),
        )

    async def search_all(self, entry, per_page=None, page=None):
        return await self._answer("all", entry, per_page, page)

    async def search_albums(self, entry, per_page=None, page=None):
        return await self._answer("albums", entry, per_page, page)

    async def search_artists(self, entry, per_page=None, page=None):
        return await self._answer("artists", entry, per_page, page)


@pytest.fixture
def stub_gateway():
    stub = StubGateway()
    app.dependency_overrides[get_search_gateway] = lambda: stub
    yield stub
    app.dependency_overrides.clear()


@pytest.fixture
def client():
    return TestClient(app)


class TestSearchEndpoints:

    def test_search_all(self, client, stub_gateway):
        response = client.get("/search/", params={"entry": "Beatles", "per_page": 3, "page": 2})

        assert response.status_code == 200
        data = response.json()
        assert data["results"][0]["slug"] == "the-beatles"
        assert data["results"][0]["country"] == "GB"
        assert data["pagination"] == {"page_number": 2, "per_page": 3, "total_matches": 1, "total_pages": 1}
        assert stub_gateway.calls == [("all", "Beatles", 3, 2)]

    def test_variants(self, client, stub_gateway):
        assert client.get("/search/albums", params={"entry": "Help"}).status_code == 200
        assert client.get("/search/artists", params={"entry": "Help"}).status_code == 200
        assert stub_gateway.calls == [("albums", "Help", None, None), ("artists", "Help", None, None)]

    def test_missing_entry_is_rejected_before_the_index(self, client):
        index = RecordingIndexClient()
        gateway = SearchGateway(index, HitClassifier(settings.search_partitions()), ResultHydrator({}))
        app.dependency_overrides[get_search_gateway] = lambda: gateway
        try:
            for path in ("/search/", "/search/albums", "/search/artists"):
                response = client.get(path)
                assert response.status_code == 400
                assert "detail" in response.json()
        finally:
            app.dependency_overrides.clear()
        assert index.calls == []

    def test_invalid_argument_maps_to_400(self, client, stub_gateway):
        stub_gateway.error = InvalidArgument("Page must be greater than zero")
        response = client.get("/search/", params={"entry": "Beatles", "page": 0})
        assert response.status_code == 400
        assert "detail" in response.json()

    def test_backend_unavailable_maps_to_503(self, client, stub_gateway):
        stub_gateway.error = BackendUnavailable("connection refused")
        response = client.get("/search/artists", params={"entry": "Beatles"})
        assert response.status_code == 503


class TestHealth:

    def test_health(self, client):
        response = client.get("/health")
        assert response.status_code == 200
        assert response.json() == {"status": "ok"}

    def test_detailed_health_reports_index_offline(self, client, monkeypatch):
        async def offline_ping():
            return False

        monkeypatch.setattr("app.api.routes_health.search_index_client.ping", offline_ping)
        response = client.get("/health/detailed")

        assert response.status_code == 200
        data = response.json()
        assert data["services"]["search_index"]["status"] == "offline"
        assert data["services"]["search_index"]["last_error"] == "unreachable"
        assert data["services"]["database"]["status"] == "online"
        assert data["status"] == "degraded"
