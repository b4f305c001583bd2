"""Fixtures: page builders and mock-transport fetchers."""

import random
from typing import Callable

import httpx
import pytest

from src.audit.fetch import PageFetcher

Handler = Callable[[httpx.Request], httpx.Response]


def _html_page(
    title: str = "",
    meta: str = "",
    body: str = "",
    head_extra: str = "",
) -> str:
    """Build a minimal HTML document."""
    title_tag = f"<title>{title}</title>" if title else ""
    meta_tag = f'<meta name="description" content="{meta}">' if meta else ""
    return (
        f"<html><head>{title_tag}{meta_tag}{head_extra}</head>"
        f"<body>{body}</body></html>"
    )


@pytest.fixture
def html_page() -> Callable[..., str]:
    return _html_page


@pytest.fixture
def make_fetcher() -> Callable[[Handler], PageFetcher]:
    """Build a PageFetcher whose network layer is *handler*."""

    def _make(handler: Handler) -> PageFetcher:
        return PageFetcher(
            timeout=1.0,
            rng=random.Random(0),
            transport=httpx.MockTransport(handler),
        )

    return _make
