"""Keyword-presence theme tagging."""

from collections import Counter

from unbubble_compare.analysis.keywords import THEMES, KeywordGroup
from unbubble_compare.analysis.thresholds import MIN_SHARED_ARTICLES
from unbubble_compare.data import Article


def tag_themes(text: str, themes: tuple[KeywordGroup, ...] = THEMES) -> list[str]:
    """Return the theme labels whose keywords occur in ``text``.

    Presence is binary per label; labels come back in vocabulary order.
    """
    return [group.label for group in themes if group.word_pattern().search(text)]


def common_themes(
    articles: list[Article],
    *,
    min_articles: int = MIN_SHARED_ARTICLES,
    themes: tuple[KeywordGroup, ...] = THEMES,
) -> list[str]:
    """Theme labels tagged in at least ``min_articles`` distinct articles."""
    counts: Counter[str] = Counter()
    for article in articles:
        counts.update(tag_themes(article.combined_text, themes))
    return [group.label for group in themes if counts[group.label] >= min_articles]
