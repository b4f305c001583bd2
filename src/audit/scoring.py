"""Rule-based SEO scoring over extracted page signals."""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass, field

from .keywords import count_words
from .models import PageSignals, RankingFactor, ScoreResult

logger = logging.getLogger(__name__)

TITLE_MIN = 30
TITLE_MAX = 65
META_MIN = 120
INTERNAL_LINK_MIN = 3
CONNECTED_LINK_COUNT = 10
CONTENT_WORD_COUNT = 300
IMAGE_POINTS = 15

# Best case of the rule table: 25 + 20 + 20 + 15 + 10 + 10.
NOMINAL_MAX_SCORE = 100

ADD_H1 = "Add a single, descriptive H1 heading that states the main topic of the page."
LENGTHEN_META = "Write a meta description of 150-160 characters that summarises the page and invites the click."
ADD_ALT_TEXT = "Add ALT descriptive tags to all images to improve accessibility and image search rankings."
ADD_INTERNAL_LINKS = "Improve internal linking to help search engines crawl and index your site better."


@dataclass
class _Tally:
    """Accumulates the outcome of each rule in evaluation order."""

    score: int = 0
    factors: list[RankingFactor] = field(default_factory=list)
    wins: list[str] = field(default_factory=list)
    recommendations: list[str] = field(default_factory=list)

    def factor(self, name: str, status: str, description: str) -> None:
        self.factors.append(RankingFactor(name=name, status=status, description=description))


def _round_half_up(value: float) -> int:
    return math.floor(value + 0.5)


def _score_title(title: str, tally: _Tally) -> None:
    length = len(title)
    if TITLE_MIN <= length <= TITLE_MAX:
        tally.score += 25
        tally.factor("Title Length", "good", "Optimal title length for SERP display.")
        tally.wins.append(f"Title length ({length} characters) is optimal for search results.")
    elif length:
        tally.score += 10
        tally.factor(
            "Title Optimization",
            "warning",
            f"Current length: {length}. Ideal is {TITLE_MIN}-{TITLE_MAX} characters.",
        )
    else:
        tally.factor("Title Missing", "critical", "No title found. Search engines will invent one.")


def _score_h1(h1s: tuple[str, ...], tally: _Tally) -> None:
    if len(h1s) == 1:
        tally.score += 20
        tally.factor("H1 Header", "good", "Exactly one H1 tag found. Perfect for structure.")
        tally.wins.append("Single H1 heading gives the page a clear main topic.")
    elif h1s:
        tally.score += 5
        tally.factor(
            "Multiple H1s",
            "warning",
            f"{len(h1s)} H1 tags found. Try to have only one main heading.",
        )
    else:
        tally.factor("H1 Missing", "critical", "No H1 tag found. This is a vital SEO factor.")
        tally.recommendations.append(ADD_H1)


def _score_meta(meta: str, tally: _Tally) -> None:
    length = len(meta)
    if length > META_MIN:
        tally.score += 20
        tally.factor("Meta Description", "good", "Detailed description found.")
        tally.wins.append("Robust meta description supports search snippet quality.")
    elif length:
        tally.score += 5
        tally.factor("Meta Length", "warning", "Meta description is a bit short. Aim for 150-160 characters.")
        tally.recommendations.append(LENGTHEN_META)
    else:
        tally.factor(
            "Meta Tag Missing",
            "critical",
            "No meta description found. Search engines will auto-generate one.",
        )
        tally.recommendations.append(LENGTHEN_META)


def _score_images(signals: PageSignals, tally: _Tally) -> None:
    images = signals.images
    if images.total == 0:
        tally.score += IMAGE_POINTS
        tally.factor("Images", "good", "No images found, nothing to check for ALT text.")
    elif images.without_alt == 0:
        tally.score += IMAGE_POINTS
        tally.factor("Image Alt Tags", "good", "All images have ALT attributes.")
        tally.wins.append("All images carry ALT text and are accessible.")
    else:
        covered = (images.total - images.without_alt) * IMAGE_POINTS / images.total
        tally.score += _round_half_up(covered)
        tally.factor("Image ALTs", "warning", f"{images.without_alt} images are missing ALT text.")
        tally.recommendations.append(ADD_ALT_TEXT)


def _score_links(signals: PageSignals, tally: _Tally) -> None:
    links = signals.links
    if links.internal < INTERNAL_LINK_MIN:
        tally.recommendations.append(ADD_INTERNAL_LINKS)
    if links.total > CONNECTED_LINK_COUNT:
        tally.score += 10
        tally.wins.append(f"High connectivity with {links.total} links on the page.")
    else:
        tally.score += 5


def _score_content(signals: PageSignals, tally: _Tally) -> None:
    words = count_words(signals.content)
    if words > CONTENT_WORD_COUNT:
        tally.score += 10
        tally.wins.append(f"Sufficient content volume ({words} words).")
    else:
        tally.score += 5


def score(signals: PageSignals) -> ScoreResult:
    """Evaluate the rule table against *signals*.

    Rules are additive and evaluated independently in a fixed order:
    title, H1, meta description, images, links, content volume. Only the
    first four surface ranking factors.
    """
    tally = _Tally()
    _score_title(signals.title, tally)
    _score_h1(signals.h1s, tally)
    _score_meta(signals.meta_description, tally)
    _score_images(signals, tally)
    _score_links(signals, tally)
    _score_content(signals, tally)

    if tally.score > NOMINAL_MAX_SCORE:
        logger.warning(
            "score exceeds nominal maximum",
            extra={"url": signals.url, "score": tally.score, "max": NOMINAL_MAX_SCORE},
        )

    return ScoreResult(
        ranking_factors=tuple(tally.factors),
        score=tally.score,
        wins=tuple(tally.wins),
        recommendations=tuple(tally.recommendations),
    )
