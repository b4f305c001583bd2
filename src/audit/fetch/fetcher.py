"""HTTP page fetcher driving the fallback ladder."""

from __future__ import annotations

import asyncio
import logging
import random
import re

import httpx

from src.audit.extract import build_signals
from src.audit.models import PageSignals

from .agents import AgentProfile, pick_user_agent, request_headers
from .challenge import looks_like_challenge
from .errors import (
    FetchError,
    FetchErrorKind,
    blocked_error,
    classify_exception,
    classify_status,
)
from .ladder import WEAK_CONTENT_THRESHOLD, FetchLadder

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT = 15.0
DEFAULT_MAX_REDIRECTS = 10

_SCHEME_RE = re.compile(r"^[a-zA-Z][a-zA-Z0-9+.-]*://")


def normalize_url(raw_url: str) -> str:
    """Trim *raw_url* and default to ``https://`` when no scheme is given."""
    url = (raw_url or "").strip()
    if not url:
        raise FetchError(FetchErrorKind.UNKNOWN, "Please enter a URL to analyse.")
    if not _SCHEME_RE.match(url):
        url = f"https://{url}"
    return url


class PageFetcher:
    """Fetches a single page and turns it into :class:`PageSignals`.

    Every attempt opens its own client, so concurrent ``fetch`` calls share
    no connection state. ``rng`` drives user-agent rotation and
    ``transport`` replaces the network layer (tests use
    ``httpx.MockTransport``).
    """

    def __init__(
        self,
        *,
        timeout: float = DEFAULT_TIMEOUT,
        max_redirects: int = DEFAULT_MAX_REDIRECTS,
        weak_threshold: int = WEAK_CONTENT_THRESHOLD,
        rng: random.Random | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._timeout = timeout
        self._max_redirects = max_redirects
        self._weak_threshold = weak_threshold
        self._rng = rng or random.Random()
        self._transport = transport

    async def fetch(self, raw_url: str, *, cancel: asyncio.Event | None = None) -> PageSignals:
        """Fetch *raw_url* through the fallback ladder.

        Raises :class:`FetchError` once the ladder is exhausted, and
        ``asyncio.CancelledError`` if *cancel* is set before a ladder step.
        """
        url = normalize_url(raw_url)
        ladder = FetchLadder(url, weak_threshold=self._weak_threshold)
        logger.info("fetch started", extra={"url": url})

        while not ladder.done:
            if cancel is not None and cancel.is_set():
                logger.info("fetch cancelled", extra={"url": url, "attempts": ladder.attempts})
                raise asyncio.CancelledError()
            outcome = await self._attempt(ladder.url, ladder.profile)
            ladder.advance(outcome)

        try:
            signals = ladder.result()
        except FetchError as exc:
            logger.warning(
                "fetch failed",
                extra={"url": url, "kind": exc.kind.value, "attempts": ladder.attempts},
            )
            raise

        logger.info(
            "fetch completed",
            extra={"url": url, "final_url": signals.url, "attempts": ladder.attempts},
        )
        return signals

    async def _attempt(self, url: str, profile: AgentProfile) -> PageSignals | FetchError:
        """Run one GET and return either signals or the classified failure."""
        user_agent = pick_user_agent(profile, self._rng)
        logger.debug("fetch attempt", extra={"url": url, "profile": profile})
        try:
            async with httpx.AsyncClient(
                follow_redirects=True,
                max_redirects=self._max_redirects,
                timeout=self._timeout,
                headers=request_headers(user_agent),
                transport=self._transport,
            ) as client:
                resp = await client.get(url)
                body = resp.text
        except (httpx.HTTPError, httpx.InvalidURL) as exc:
            error = classify_exception(exc, url)
            logger.debug(
                "fetch attempt failed",
                extra={"url": url, "kind": error.kind.value, "error_type": type(exc).__name__},
            )
            return error

        # Challenge pages often arrive with 403/503, so check the body first.
        if looks_like_challenge(body, resp.status_code):
            logger.debug("bot challenge detected", extra={"url": url, "status_code": resp.status_code})
            return blocked_error(url)
        if not resp.is_success:
            return classify_status(resp.status_code, url)
        return build_signals(body, str(resp.url))
