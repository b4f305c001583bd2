"""Keyword frequency ranking over cleaned body text."""

from __future__ import annotations

import re
from collections import Counter

from .models import Keyword, KeywordResult

KEYWORD_LIMIT = 50
HIGH_IMPACT_THRESHOLD = 5
MIN_WORD_LENGTH = 4

STOP_WORDS = frozenset({
    "this", "that", "with", "from", "your", "their", "about", "more", "when",
    "what", "which", "where", "there", "these", "those", "them", "they",
    "have", "been", "were", "will", "would", "could", "should", "into",
    "than", "then", "also", "just", "only", "over", "some", "such", "very",
    "here", "each", "other", "because", "while", "after", "before", "under",
    "does", "doing", "being", "ours", "yours", "hers", "mine", "itself",
})

_PUNCTUATION_RE = re.compile(r"[^\w\s]")


def count_words(text: str) -> int:
    """Number of whitespace-separated tokens in *text*."""
    return len(text.split())


def tokenize(text: str) -> list[str]:
    """Lowercase, strip punctuation and drop short or stop-word tokens."""
    words = _PUNCTUATION_RE.sub("", text.lower()).split()
    return [w for w in words if len(w) >= MIN_WORD_LENGTH and w not in STOP_WORDS]


def analyze(text: str) -> KeywordResult:
    """Rank keywords in *text* by frequency.

    Ties keep first-occurrence order: ``Counter`` preserves insertion order
    and ``sorted`` is stable.
    """
    tokens = tokenize(text)
    counts = Counter(tokens)
    ranked = sorted(counts.items(), key=lambda item: item[1], reverse=True)[:KEYWORD_LIMIT]
    keywords = tuple(Keyword(word=word, count=count) for word, count in ranked)
    return KeywordResult(
        keywords=keywords,
        high_impact=tuple(k.word for k in keywords if k.count > HIGH_IMPACT_THRESHOLD),
        total_words=len(tokens),
    )
