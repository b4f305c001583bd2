"""API key validation tests."""

import httpx
import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from src.api.routes import router
from src.audit.fetch import PageFetcher
from src.config import Settings, get_settings

API_KEY = "test-secret-key"


def _make_app(api_key: str) -> FastAPI:
    app = FastAPI()
    app.include_router(router)
    app.state.fetcher = PageFetcher(
        transport=httpx.MockTransport(lambda request: httpx.Response(200, text="<title>Hi</title>")),
    )

    def _override_settings() -> Settings:
        return Settings(api_key=api_key)

    app.dependency_overrides[get_settings] = _override_settings

    @app.get("/health")
    async def health():
        return {"status": "ok"}

    return app


@pytest.fixture
def client() -> TestClient:
    return TestClient(_make_app(API_KEY))


class TestApiKeyAuth:
    def test_valid_key(self, client: TestClient) -> None:
        resp = client.post("/analyze", json={"url": "example.com"}, headers={"X-API-Key": API_KEY})
        assert resp.status_code == 200
        assert resp.json()["success"] is True

    def test_missing_key(self, client: TestClient) -> None:
        resp = client.post("/analyze", json={"url": "example.com"})
        assert resp.status_code == 401

    def test_wrong_key(self, client: TestClient) -> None:
        resp = client.post("/analyze", json={"url": "example.com"}, headers={"X-API-Key": "wrong-key"})
        assert resp.status_code == 401
        assert resp.json()["detail"] == "Invalid API key"

    def test_health_no_auth(self, client: TestClient) -> None:
        resp = client.get("/health")
        assert resp.status_code == 200

    def test_auth_disabled_without_configured_key(self) -> None:
        client = TestClient(_make_app(""))
        resp = client.post("/analyze", json={"url": "example.com"})
        assert resp.status_code == 200
