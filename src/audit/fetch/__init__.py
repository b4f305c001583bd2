"""Page acquisition: HTTP retrieval with host and user-agent fallback."""

from __future__ import annotations

from typing import TYPE_CHECKING

from .errors import FetchError, FetchErrorKind
from .fetcher import PageFetcher, normalize_url
from .ladder import FetchLadder, LadderState

if TYPE_CHECKING:
    from src.config import Settings

__all__ = [
    "FetchError",
    "FetchErrorKind",
    "FetchLadder",
    "LadderState",
    "PageFetcher",
    "build_fetcher",
    "normalize_url",
]


def build_fetcher(settings: Settings) -> PageFetcher:
    """Build a page fetcher configured from application settings."""
    return PageFetcher(
        timeout=settings.fetch_timeout_seconds,
        max_redirects=settings.fetch_max_redirects,
        weak_threshold=settings.weak_content_threshold,
    )
