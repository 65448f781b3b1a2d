"""Shared fixtures for Unbubble Compare tests."""

import pytest

from unbubble_compare.data import Article, Leaning


@pytest.fixture
def left_article() -> Article:
    """Left-leaning article stressing social equity."""
    return Article(
        id="left-1",
        title="Funding Boost Advances Equity",
        source="Progressive Daily",
        leaning=Leaning.LEFT,
        summary=(
            "The policy advances social equity for working families.",
            "Critics note a 10% increase in program funding.",
        ),
        key_facts=("10% increase", "Passed in 2024"),
    )


@pytest.fixture
def right_article() -> Article:
    """Right-leaning article stressing economic growth."""
    return Article(
        id="right-1",
        title="Plan Drives Growth for Small Business",
        source="Market Journal",
        leaning=Leaning.RIGHT,
        summary=(
            "The plan drives economic growth for small businesses.",
            "Funding rose by a 10% increase this year.",
        ),
        key_facts=("10% increase",),
    )


@pytest.fixture
def article_pair(left_article: Article, right_article: Article) -> list[Article]:
    return [left_article, right_article]


@pytest.fixture
def article_payloads() -> list[dict[str, object]]:
    """Wire-format articles as a client would send them."""
    return [
        {
            "id": "left-1",
            "title": "Funding Boost Advances Equity",
            "source": "Progressive Daily",
            "leaning": "left",
            "summary": [
                "The policy advances social equity for working families.",
                "Critics note a 10% increase in program funding.",
            ],
            "keyFacts": ["10% increase"],
            "subTopicName": "Budget",
        },
        {
            "id": "right-1",
            "title": "Plan Drives Growth for Small Business",
            "source": "Market Journal",
            "leaning": "right",
            "summary": [
                "The plan drives economic growth for small businesses.",
                "Funding rose by a 10% increase this year.",
            ],
            "keyFacts": ["10% increase"],
            "subTopicName": "Budget",
        },
    ]
