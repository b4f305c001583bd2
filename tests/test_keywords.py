"""Keyword analyzer unit tests."""

from src.audit.keywords import KEYWORD_LIMIT, STOP_WORDS, analyze, count_words, tokenize


def test_tokenize_strips_punctuation_short_words_and_stop_words():
    tokens = tokenize("Hello, World! This is the BEST widget-shop from your town.")
    assert tokens == ["hello", "world", "best", "widgetshop", "town"]


def test_ranks_by_descending_frequency():
    result = analyze("apple banana apple cherry banana apple")
    assert [(k.word, k.count) for k in result.keywords] == [
        ("apple", 3),
        ("banana", 2),
        ("cherry", 1),
    ]


def test_ties_keep_first_occurrence_order():
    result = analyze("zebra mango zebra mango kiwis")
    assert [k.word for k in result.keywords] == ["zebra", "mango", "kiwis"]


def test_caps_keyword_list():
    text = " ".join(f"word{i:03d}" for i in range(120))
    result = analyze(text)
    assert len(result.keywords) == KEYWORD_LIMIT
    assert result.keywords[0].word == "word000"


def test_high_impact_needs_more_than_five_occurrences():
    text = "widgets " * 6 + "gadgets " * 5
    result = analyze(text)
    assert result.high_impact == ("widgets",)


def test_emitted_words_respect_filters():
    text = "that this with from your their about more when cats dogs dog cat"
    result = analyze(text)
    for keyword in result.keywords:
        assert len(keyword.word) > 3
        assert keyword.word not in STOP_WORDS
    assert [k.word for k in result.keywords] == ["cats", "dogs"]


def test_total_words_counts_filtered_tokens():
    assert analyze("a bb ccc dddd").total_words == 1
    assert analyze("this widget, that widget!").total_words == 2
    assert count_words("  spaced   out  ") == 2


def test_empty_text():
    result = analyze("")
    assert result.keywords == ()
    assert result.high_impact == ()
    assert result.total_words == 0
