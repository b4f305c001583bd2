"""Data models for the page audit pipeline."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Literal

CONTENT_CAP = 40_000

FactorStatus = Literal["good", "warning", "critical"]


@dataclass(frozen=True)
class ImageStats:
    total: int = 0
    with_alt: int = 0
    without_alt: int = 0


@dataclass(frozen=True)
class LinkStats:
    total: int = 0
    internal: int = 0
    external: int = 0


@dataclass(frozen=True)
class PageSignals:
    """Structural signals extracted from a single fetched page."""

    url: str
    title: str = ""
    meta_description: str = ""
    content: str = ""
    h1s: tuple[str, ...] = ()
    h2s: tuple[str, ...] = ()
    images: ImageStats = field(default_factory=ImageStats)
    links: LinkStats = field(default_factory=LinkStats)


@dataclass(frozen=True)
class RankingFactor:
    name: str
    status: FactorStatus
    description: str


@dataclass(frozen=True)
class Keyword:
    word: str
    count: int


@dataclass(frozen=True)
class KeywordResult:
    keywords: tuple[Keyword, ...] = ()
    high_impact: tuple[str, ...] = ()
    total_words: int = 0


@dataclass(frozen=True)
class ScoreResult:
    ranking_factors: tuple[RankingFactor, ...] = ()
    score: int = 0
    wins: tuple[str, ...] = ()
    recommendations: tuple[str, ...] = ()


@dataclass(frozen=True)
class Report:
    """Rendering-agnostic audit report. Field order is part of the contract."""

    ranking_factors: tuple[RankingFactor, ...] = ()
    score: int = 0
    wins: tuple[str, ...] = ()
    recommendations: tuple[str, ...] = ()
    keywords: tuple[Keyword, ...] = ()
    high_impact_keywords: tuple[str, ...] = ()
    total_words: int = 0
    internal_links: int = 0
    external_links: int = 0
    h2_count: int = 0
