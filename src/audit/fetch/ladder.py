"""Fallback ladder for page fetching, modelled as a finite state machine.

States and transitions::

    PRIMARY --(apex host, DNS/network error)--> HOST_FALLBACK
    PRIMARY | HOST_FALLBACK --(weak result)--> UA_FALLBACK
    PRIMARY | HOST_FALLBACK --(good result)--> SUCCEEDED
    UA_FALLBACK --(any outcome)--> SUCCEEDED  (best result kept)
    anything else --> FAILED

The ladder performs no I/O. The caller runs one attempt per non-terminal
state against ``url`` with a user agent from ``profile`` and feeds the
outcome back through :meth:`FetchLadder.advance`.
"""

from __future__ import annotations

import logging
from enum import Enum

import httpx
import tldextract

from src.audit.models import PageSignals

from .agents import AgentProfile
from .errors import FetchError, FetchErrorKind

logger = logging.getLogger(__name__)

MAX_ATTEMPTS = 3
WEAK_CONTENT_THRESHOLD = 500
HOST_FALLBACK_KINDS = frozenset({FetchErrorKind.DOMAIN_NOT_FOUND, FetchErrorKind.NETWORK_ERROR})

# Bundled public suffix snapshot only; never fetch the list over the network.
_extract_domain = tldextract.TLDExtract(suffix_list_urls=())


class LadderState(str, Enum):
    PRIMARY = "primary"
    HOST_FALLBACK = "host_fallback"
    UA_FALLBACK = "ua_fallback"
    SUCCEEDED = "succeeded"
    FAILED = "failed"


def is_apex(host: str) -> bool:
    """True for a registrable domain with no subdomain label (``example.co.uk``)."""
    parts = _extract_domain(host)
    return bool(parts.domain and parts.suffix and not parts.subdomain)


def _host_of(url: str) -> str:
    try:
        return httpx.URL(url).host
    except httpx.InvalidURL:
        return ""


def www_variant(url: str) -> str:
    parsed = httpx.URL(url)
    return str(parsed.copy_with(host=f"www.{parsed.host}"))


def is_weak(signals: PageSignals, threshold: int = WEAK_CONTENT_THRESHOLD) -> bool:
    return not signals.title and len(signals.content) < threshold


def _prefer(current: PageSignals, candidate: PageSignals) -> PageSignals:
    if candidate.title or len(candidate.content) > len(current.content):
        return candidate
    return current


class FetchLadder:
    """Tracks one fetch call through the fallback states."""

    def __init__(self, url: str, *, weak_threshold: int = WEAK_CONTENT_THRESHOLD) -> None:
        self.url = url
        self.state = LadderState.PRIMARY
        self.attempts = 0
        self._weak_threshold = weak_threshold
        self._result: PageSignals | None = None
        self._error: FetchError | None = None

    @property
    def done(self) -> bool:
        return self.state in (LadderState.SUCCEEDED, LadderState.FAILED)

    @property
    def profile(self) -> AgentProfile:
        return "mobile" if self.state is LadderState.UA_FALLBACK else "desktop"

    def advance(self, outcome: PageSignals | FetchError) -> LadderState:
        """Record the outcome of the attempt for the current state and transition."""
        if self.done:
            raise RuntimeError(f"ladder already finished in state {self.state.value}")

        previous = self.state
        self.attempts += 1
        if previous is LadderState.PRIMARY:
            self._after_primary(outcome)
        elif previous is LadderState.HOST_FALLBACK:
            self._after_host_fallback(outcome)
        else:
            self._after_ua_fallback(outcome)

        if not self.done and self.attempts >= MAX_ATTEMPTS:
            self._finish()

        logger.debug(
            "fetch ladder transition",
            extra={"from_state": previous.value, "to_state": self.state.value, "attempts": self.attempts},
        )
        return self.state

    def result(self) -> PageSignals:
        """Return the kept page signals, or raise the surfaced fetch error."""
        if not self.done:
            raise RuntimeError("ladder has not finished")
        if self._result is not None:
            return self._result
        assert self._error is not None
        raise self._error

    def _accept(self, signals: PageSignals) -> None:
        self._result = signals
        if is_weak(signals, self._weak_threshold):
            self.state = LadderState.UA_FALLBACK
        else:
            self.state = LadderState.SUCCEEDED

    def _fail(self, error: FetchError) -> None:
        self._error = error
        self.state = LadderState.FAILED

    def _finish(self) -> None:
        self.state = LadderState.SUCCEEDED if self._result is not None else LadderState.FAILED

    def _after_primary(self, outcome: PageSignals | FetchError) -> None:
        if not isinstance(outcome, FetchError):
            self._accept(outcome)
            return
        if outcome.kind in HOST_FALLBACK_KINDS and is_apex(_host_of(self.url)):
            self._error = outcome
            self.url = www_variant(self.url)
            self.state = LadderState.HOST_FALLBACK
            return
        self._fail(outcome)

    def _after_host_fallback(self, outcome: PageSignals | FetchError) -> None:
        if not isinstance(outcome, FetchError):
            self._accept(outcome)
            return
        # A challenge page is reported as such; otherwise the primary error wins.
        if outcome.kind is FetchErrorKind.BLOCKED:
            self._fail(outcome)
        else:
            self.state = LadderState.FAILED

    def _after_ua_fallback(self, outcome: PageSignals | FetchError) -> None:
        if not isinstance(outcome, FetchError):
            assert self._result is not None
            self._result = _prefer(self._result, outcome)
        self.state = LadderState.SUCCEEDED
