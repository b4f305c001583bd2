"""Structural signal extraction from raw page markup."""

from __future__ import annotations

import logging
from dataclasses import replace
from urllib.parse import urljoin, urlparse

from .clean import clean
from .document import DocumentQuery, SoupDocument
from .models import ImageStats, LinkStats, PageSignals

logger = logging.getLogger(__name__)

_RELATIVE_PREFIXES = ("/", "./", "#")


def _resolve_title(doc: DocumentQuery) -> str:
    title = (doc.first_text("title") or "").strip()
    if title:
        return title
    og_title = doc.meta_content("property", "og:title")
    if og_title:
        return og_title
    h1s = [text for text in doc.texts("h1") if text]
    return h1s[0] if h1s else ""


def _resolve_meta_description(doc: DocumentQuery) -> str:
    return (
        doc.meta_content("name", "description")
        or doc.meta_content("property", "og:description")
        or doc.meta_content("name", "twitter:description")
    )


def _count_images(doc: DocumentQuery) -> ImageStats:
    alts = doc.attribute_values("img", "alt")
    with_alt = sum(1 for alt in alts if alt is not None and alt.strip())
    return ImageStats(total=len(alts), with_alt=with_alt, without_alt=len(alts) - with_alt)


def _is_internal(href: str | None, page_url: str, page_host: str) -> bool:
    if href is None:
        return False
    href = href.strip()
    if href.startswith(_RELATIVE_PREFIXES):
        return True
    try:
        host = urlparse(urljoin(page_url, href)).hostname
    except ValueError:
        return False
    return bool(host) and host == page_host


def _count_links(doc: DocumentQuery, page_url: str) -> LinkStats:
    hrefs = doc.attribute_values("a", "href")
    page_host = (urlparse(page_url).hostname or "").lower()
    internal = sum(1 for href in hrefs if _is_internal(href, page_url, page_host))
    total = len(hrefs)
    return LinkStats(total=total, internal=internal, external=max(0, total - internal))


def extract(markup: str | bytes, final_url: str) -> PageSignals:
    """Parse *markup* into a :class:`PageSignals` record with empty content.

    Missing elements degrade to empty strings and zero counts; malformed
    markup never raises.
    """
    doc = SoupDocument(markup)
    return PageSignals(
        url=final_url,
        title=_resolve_title(doc),
        meta_description=_resolve_meta_description(doc),
        h1s=tuple(text for text in doc.texts("h1") if text),
        h2s=tuple(text for text in doc.texts("h2") if text),
        images=_count_images(doc),
        links=_count_links(doc, final_url),
    )


def build_signals(markup: str | bytes, final_url: str) -> PageSignals:
    """Extract structural signals and attach the cleaned body text."""
    signals = extract(markup, final_url)
    content = clean(markup)
    logger.debug(
        "signals extracted",
        extra={
            "url": final_url,
            "title_length": len(signals.title),
            "h1_count": len(signals.h1s),
            "content_length": len(content),
        },
    )
    return replace(signals, content=content)
