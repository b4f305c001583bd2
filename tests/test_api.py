"""POST /analyze route tests."""

import httpx
import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from src.api.routes import router
from src.audit.fetch import PageFetcher
from src.config import Settings, get_settings

PAGE = (
    "<html><head><title>Fresh coffee beans delivered weekly to you</title>"
    '<meta name="description" content="Roasted to order."></head>'
    '<body><h1>Coffee</h1><img src="a.jpg" alt="Beans"><a href="/shop">Shop</a>'
    "<main>" + "coffee beans roasted " * 20 + "</main></body></html>"
)


def _client(handler) -> TestClient:
    app = FastAPI()
    app.include_router(router)
    app.state.fetcher = PageFetcher(transport=httpx.MockTransport(handler))
    app.dependency_overrides[get_settings] = lambda: Settings(api_key="")
    return TestClient(app)


def test_analyze_success_payload():
    client = _client(lambda request: httpx.Response(200, text=PAGE))
    resp = client.post("/analyze", json={"url": "  example.com  "})

    assert resp.status_code == 200
    payload = resp.json()
    assert payload["success"] is True
    data = payload["data"]
    assert data["url"].startswith("https://example.com")
    assert data["title"] == "Fresh coffee beans delivered weekly to you"
    assert data["images"] == {"total": 1, "with_alt": 1, "without_alt": 0}
    assert data["links"] == {"total": 1, "internal": 1, "external": 0}

    report = payload["report"]
    assert list(report) == [
        "ranking_factors",
        "score",
        "wins",
        "recommendations",
        "keywords",
        "high_impact_keywords",
        "total_words",
        "internal_links",
        "external_links",
        "h2_count",
    ]
    assert report["ranking_factors"][0] == {
        "name": "Title Length",
        "status": "good",
        "description": "Optimal title length for SERP display.",
    }
    assert report["keywords"][0] == {"word": "coffee", "count": 20}
    assert "coffee" in report["high_impact_keywords"]


def test_analyze_fetch_failure_payload():
    client = _client(lambda request: httpx.Response(403))
    resp = client.post("/analyze", json={"url": "https://example.com"})

    assert resp.status_code == 200
    assert resp.json() == {
        "success": False,
        "error": {
            "kind": "forbidden",
            "message": "Access forbidden. This site might be blocking automated crawlers.",
        },
    }


@pytest.mark.parametrize("url", ["", "   "])
def test_analyze_rejects_blank_url(url):
    client = _client(lambda request: httpx.Response(200, text=PAGE))
    resp = client.post("/analyze", json={"url": url})
    assert resp.status_code == 422
