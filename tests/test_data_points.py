"""Tests for numeric data point extraction."""

from unbubble_compare.analysis import extract_data_points


def test_extracts_currency_percent_and_counts() -> None:
    text = "The budget is $25B and grew 10%, reaching 150,000 users, up from 2.5%."
    tokens = extract_data_points(text)
    assert {"$25B", "10%", "150,000", "2.5%"} <= set(tokens)


def test_deduplicates() -> None:
    tokens = extract_data_points("Up 10% this year and 10% last year.")
    assert tokens == ["10%"]


def test_currency_with_grouping_and_decimals() -> None:
    tokens = extract_data_points("It cost $150,000 and later $2.6T.")
    assert "$150,000" in tokens
    assert "$2.6T" in tokens


def test_plain_small_integers_ignored() -> None:
    assert extract_data_points("In 2024 there were 12 hearings.") == []


def test_limit() -> None:
    text = " ".join(f"{n}%" for n in range(20))
    assert len(extract_data_points(text)) == 10
    assert len(extract_data_points(text, limit=None)) == 20
    assert extract_data_points(text, limit=3) == ["0%", "1%", "2%"]


def test_empty_text() -> None:
    assert extract_data_points("") == []
