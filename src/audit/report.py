"""Report assembly from scoring and keyword results."""

from __future__ import annotations

from .models import KeywordResult, PageSignals, Report, ScoreResult


def assemble(scored: ScoreResult, keywords: KeywordResult, signals: PageSignals) -> Report:
    """Combine analysis outputs into a single rendering-agnostic report."""
    return Report(
        ranking_factors=scored.ranking_factors,
        score=scored.score,
        wins=scored.wins,
        recommendations=scored.recommendations,
        keywords=keywords.keywords,
        high_impact_keywords=keywords.high_impact,
        total_words=keywords.total_words,
        internal_links=signals.links.internal,
        external_links=signals.links.external,
        h2_count=len(signals.h2s),
    )
