"""Heuristic detection of bot-protection interstitial pages."""

from __future__ import annotations

import re

PROTECTION_VENDORS = (
    "cloudflare",
    "ddos-guard",
    "sucuri",
    "incapsula",
    "imperva",
    "akamai",
    "perimeterx",
    "datadome",
)

# Phrases matched against the page <title> only; article bodies quote them freely.
CHALLENGE_PHRASES = (
    "checking your browser",
    "verify you are human",
    "verify that you are human",
    "attention required",
    "just a moment",
)

# Script and resource names that only challenge interstitials load.
CHALLENGE_MARKERS = (
    "/cdn-cgi/challenge-platform/",
    "cf_chl_opt",
    "cf-chl-widget",
    "_incapsula_resource",
    "captcha-delivery.com",
    "px-captcha",
    "sucuri_cloudproxy_js",
)

# Interstitials are small; a large 2xx body is a real page.
MAX_CHALLENGE_BODY = 50_000

_TITLE_RE = re.compile(r"<title[^>]*>(.*?)</title>", re.IGNORECASE | re.DOTALL)


def _title_of(text: str) -> str:
    match = _TITLE_RE.search(text)
    return match.group(1).strip() if match else ""


def looks_like_challenge(body: str, status_code: int = 200) -> bool:
    """True when *body* is a bot-protection interstitial rather than content.

    Requires a non-2xx status or a short body, and then either a
    challenge-only script marker or a challenge phrase in the title of a
    page that names a protection vendor.
    """
    if 200 <= status_code < 300 and len(body) >= MAX_CHALLENGE_BODY:
        return False
    text = body.lower()
    if any(marker in text for marker in CHALLENGE_MARKERS):
        return True
    title = _title_of(text)
    return any(p in title for p in CHALLENGE_PHRASES) and any(v in text for v in PROTECTION_VENDORS)
