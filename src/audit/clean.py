"""Body text cleaning for keyword and word-count analysis."""

from __future__ import annotations

import re

from .document import SoupDocument
from .models import CONTENT_CAP

# Non-content chrome removed before text extraction.
_NOISE_SELECTORS = (
    "script",
    "style",
    "nav",
    "footer",
    "header",
    "svg",
    "canvas",
    "iframe",
    "noscript",
    'link[rel~="stylesheet"]',
)

# First candidate present in the document wins, even if its text is empty.
_BODY_CANDIDATES = ("main", "article", "#content", "body")

_WHITESPACE_RE = re.compile(r"\s+")


def clean(markup: str | bytes) -> str:
    """Return normalized body text, hard-cut at ``CONTENT_CAP`` characters.

    The cut is not word-boundary aware, so the last word may be truncated.
    """
    doc = SoupDocument(markup)
    for selector in _NOISE_SELECTORS:
        doc.remove(selector)

    text = None
    for selector in _BODY_CANDIDATES:
        text = doc.first_text(selector)
        if text is not None:
            break
    if text is None:
        text = doc.full_text()

    return _WHITESPACE_RE.sub(" ", text).strip()[:CONTENT_CAP]
