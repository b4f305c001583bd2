"""Audit pipeline: fetch a page, then score and rank its content."""

from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass

from .fetch import PageFetcher
from .keywords import analyze
from .models import PageSignals, Report
from .report import assemble
from .scoring import score

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AuditResult:
    signals: PageSignals
    report: Report


def analyze_signals(signals: PageSignals) -> Report:
    """Pure analysis half of the pipeline: identical signals give identical reports."""
    scored = score(signals)
    keywords = analyze(signals.content)
    return assemble(scored, keywords, signals)


async def audit_url(
    raw_url: str,
    fetcher: PageFetcher,
    *,
    cancel: asyncio.Event | None = None,
) -> AuditResult:
    """Fetch *raw_url* and build its report.

    Fetch failures propagate as ``FetchError``; no partial result is returned.
    """
    signals = await fetcher.fetch(raw_url, cancel=cancel)
    report = analyze_signals(signals)
    logger.info(
        "audit completed",
        extra={
            "url": signals.url,
            "score": report.score,
            "recommendations": len(report.recommendations),
            "keywords": len(report.keywords),
        },
    )
    return AuditResult(signals=signals, report=report)
