"""Pipeline and report assembly tests."""

import httpx
import pytest

from src.audit.fetch import FetchError, FetchErrorKind
from src.audit.keywords import analyze
from src.audit.models import ImageStats, LinkStats, PageSignals, Report
from src.audit.pipeline import analyze_signals, audit_url
from src.audit.report import assemble
from src.audit.scoring import score


def _signals() -> PageSignals:
    return PageSignals(
        url="https://example.com",
        title="Handmade oak furniture for every room of your home",
        meta_description="",
        content="oak furniture " * 7 + "chairs tables",
        h1s=("Oak furniture",),
        h2s=("Chairs", "Tables"),
        images=ImageStats(total=2, with_alt=1, without_alt=1),
        links=LinkStats(total=3, internal=1, external=2),
    )


def test_assemble_copies_analysis_outputs():
    signals = _signals()
    scored = score(signals)
    keywords = analyze(signals.content)
    report = assemble(scored, keywords, signals)

    assert report.ranking_factors == scored.ranking_factors
    assert report.score == scored.score
    assert report.wins == scored.wins
    assert report.recommendations == scored.recommendations
    assert report.keywords == keywords.keywords
    assert report.high_impact_keywords == ("furniture",)
    assert report.total_words == 9
    assert report.internal_links == 1
    assert report.external_links == 2
    assert report.h2_count == 2


def test_report_field_order_is_stable():
    assert list(Report.__dataclass_fields__) == [
        "ranking_factors",
        "score",
        "wins",
        "recommendations",
        "keywords",
        "high_impact_keywords",
        "total_words",
        "internal_links",
        "external_links",
        "h2_count",
    ]


def test_analysis_is_deterministic():
    signals = _signals()
    assert analyze_signals(signals) == analyze_signals(signals)


@pytest.mark.asyncio
async def test_audit_url_returns_signals_and_report(make_fetcher, html_page):
    html = html_page(
        title="Handmade oak furniture for every room of your home",
        body="<h1>Oak furniture</h1><main>" + "oak furniture " * 10 + "</main>",
    )
    fetcher = make_fetcher(lambda request: httpx.Response(200, text=html))

    result = await audit_url("example.com", fetcher)

    assert result.signals.title.startswith("Handmade")
    assert result.report == analyze_signals(result.signals)
    assert result.report.keywords[0].word == "furniture"


@pytest.mark.asyncio
async def test_audit_url_propagates_fetch_errors(make_fetcher):
    fetcher = make_fetcher(lambda request: httpx.Response(403))
    with pytest.raises(FetchError) as exc_info:
        await audit_url("https://example.com", fetcher)
    assert exc_info.value.kind is FetchErrorKind.FORBIDDEN
