"""Divergence mapping: how each article frames the same claim area."""

from unbubble_compare.analysis.keywords import (
    CLAIM_AREAS,
    DIVERGENCE_VALUE_INDICATORS,
    KeywordGroup,
)
from unbubble_compare.analysis.thresholds import (
    FRAMING_MAX_LENGTH,
    MAX_DIVERGENCES,
    MIN_ARTICLES,
    MIN_SHARED_ARTICLES,
)
from unbubble_compare.data import Article, Divergence, Framing

ELLIPSIS = "..."


def truncate(text: str, max_length: int = FRAMING_MAX_LENGTH) -> str:
    """Cut ``text`` to ``max_length`` characters, ending in an ellipsis."""
    if len(text) <= max_length:
        return text
    return text[: max_length - len(ELLIPSIS)] + ELLIPSIS


def infer_underlying_value(sentences: list[str]) -> str | None:
    """First value whose indicator keyword appears in the sentences."""
    combined = " ".join(sentences).lower()
    for indicator, value in DIVERGENCE_VALUE_INDICATORS:
        if indicator in combined:
            return value
    return None


def _framing_for(article: Article, area: KeywordGroup, max_length: int) -> Framing:
    relevant = [text for text in article.text_fragments if area.hits_substring(text)]
    return Framing(
        leaning=article.leaning,
        source=article.source,
        framing=truncate(relevant[0], max_length) if relevant else "",
        underlying_value=infer_underlying_value(relevant),
    )


def map_divergences(
    articles: list[Article],
    *,
    claim_areas: tuple[KeywordGroup, ...] = CLAIM_AREAS,
    min_articles: int = MIN_SHARED_ARTICLES,
    framing_max_length: int = FRAMING_MAX_LENGTH,
    limit: int = MAX_DIVERGENCES,
) -> list[Divergence]:
    """Collect each article's framing for every claim area two or more articles cover.

    Claim areas are visited in table order. An area is reported when its
    qualifying articles span two or more leanings, or when any of them has
    a non-empty framing sentence.

    Args:
        articles: Articles under comparison.
        claim_areas: Ordered claim-area table.
        min_articles: Qualifying articles needed before an area is considered.
        framing_max_length: Truncation length for framing sentences.
        limit: Maximum divergences to return.

    Returns:
        Divergences in claim-area order.
    """
    if len(articles) < MIN_ARTICLES:
        return []

    divergences: list[Divergence] = []
    for area in claim_areas:
        relevant = [a for a in articles if area.hits_substring(a.combined_text)]
        if len(relevant) < min_articles:
            continue

        framings = tuple(_framing_for(a, area, framing_max_length) for a in relevant)
        distinct_leanings = {f.leaning for f in framings}
        if len(distinct_leanings) >= 2 or any(f.framing for f in framings):
            divergences.append(Divergence(claim=area.label, framings=framings))

    return divergences[:limit]
