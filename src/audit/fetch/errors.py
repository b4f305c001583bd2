"""Fetch failure taxonomy and transport error classification."""

from __future__ import annotations

import socket
from enum import Enum

import httpx


class FetchErrorKind(str, Enum):
    TIMEOUT = "timeout"
    DOMAIN_NOT_FOUND = "domain_not_found"
    FORBIDDEN = "forbidden"
    RATE_LIMITED = "rate_limited"
    BLOCKED = "blocked"
    NETWORK_ERROR = "network_error"
    UNKNOWN = "unknown"


class FetchError(Exception):
    """A classified page fetch failure with a user-facing message."""

    def __init__(
        self,
        kind: FetchErrorKind,
        message: str,
        *,
        url: str = "",
        status_code: int | None = None,
    ) -> None:
        super().__init__(message)
        self.kind = kind
        self.message = message
        self.url = url
        self.status_code = status_code

    def __repr__(self) -> str:
        return f"FetchError(kind={self.kind.value!r}, url={self.url!r}, status_code={self.status_code!r})"


# Substrings of resolver errors across platforms (glibc, macOS, Windows).
_DNS_MARKERS = (
    "name or service not known",
    "nodename nor servname",
    "temporary failure in name resolution",
    "no address associated with hostname",
    "getaddrinfo failed",
    "name resolution",
)


def _is_dns_failure(exc: BaseException) -> bool:
    seen: set[int] = set()
    current: BaseException | None = exc
    while current is not None and id(current) not in seen:
        seen.add(id(current))
        if isinstance(current, socket.gaierror):
            return True
        text = str(current).lower()
        if any(marker in text for marker in _DNS_MARKERS):
            return True
        current = current.__cause__ or current.__context__
    return False


def blocked_error(url: str) -> FetchError:
    return FetchError(
        FetchErrorKind.BLOCKED,
        "The site is protected by a bot challenge and cannot be analysed automatically.",
        url=url,
    )


def classify_status(status_code: int, url: str) -> FetchError:
    """Map a non-2xx HTTP status to a classified error."""
    if status_code == 403:
        return FetchError(
            FetchErrorKind.FORBIDDEN,
            "Access forbidden. This site might be blocking automated crawlers.",
            url=url,
            status_code=status_code,
        )
    if status_code == 429:
        return FetchError(
            FetchErrorKind.RATE_LIMITED,
            "The site is rate limiting requests. Please try again later.",
            url=url,
            status_code=status_code,
        )
    if status_code == 404:
        message = "Page not found (404)."
    else:
        message = f"The site responded with an unexpected status (HTTP {status_code})."
    return FetchError(FetchErrorKind.UNKNOWN, message, url=url, status_code=status_code)


def classify_exception(exc: Exception, url: str) -> FetchError:
    """Map a transport exception to a classified error without leaking internals."""
    if isinstance(exc, httpx.TimeoutException):
        return FetchError(
            FetchErrorKind.TIMEOUT,
            "Request timed out. The site might be slow or blocking us.",
            url=url,
        )
    if isinstance(exc, httpx.ConnectError) and _is_dns_failure(exc):
        return FetchError(
            FetchErrorKind.DOMAIN_NOT_FOUND,
            "Domain not found. Please check the URL spelling.",
            url=url,
        )
    if isinstance(exc, httpx.RequestError):
        return FetchError(
            FetchErrorKind.NETWORK_ERROR,
            f"Network error reaching {url}. Please ensure the URL is correct and public.",
            url=url,
        )
    return FetchError(
        FetchErrorKind.UNKNOWN,
        f"Could not fetch {url}. Please ensure the URL is valid.",
        url=url,
    )
