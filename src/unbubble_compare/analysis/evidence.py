"""Evidence and omission analysis: what each article highlights and skips."""

from unbubble_compare.analysis.keywords import RESEARCH_LANGUAGE, TOPIC_UNIVERSE
from unbubble_compare.analysis.thresholds import (
    EVIDENCE_MIN_LENGTH,
    MAX_EMPHASIZED_EVIDENCE,
    MAX_OMITTED_TOPICS,
    MIN_ARTICLES,
)
from unbubble_compare.data import Article, EvidencePattern


def topic_universe(articles: list[Article], topics: tuple[str, ...] = TOPIC_UNIVERSE) -> list[str]:
    """Topics from the fixed list that at least one article mentions."""
    texts = [a.combined_text.lower() for a in articles]
    return [topic for topic in topics if any(topic in text for text in texts)]


def is_emphasized(sentence: str, min_length: int = EVIDENCE_MIN_LENGTH) -> bool:
    """A sentence is evidence if it has a digit, cites research, or is substantial."""
    return (
        any(ch.isdigit() for ch in sentence)
        or RESEARCH_LANGUAGE.search(sentence) is not None
        or len(sentence) > min_length
    )


def analyze_evidence_patterns(
    articles: list[Article],
    *,
    topics: tuple[str, ...] = TOPIC_UNIVERSE,
    evidence_min_length: int = EVIDENCE_MIN_LENGTH,
) -> list[EvidencePattern]:
    """One evidence pattern per article, in input order.

    ``omitted_topics`` lists topics a sibling article mentions but this one
    does not.
    """
    if len(articles) < MIN_ARTICLES:
        return []

    universe = topic_universe(articles, topics)
    texts = [a.combined_text.lower() for a in articles]

    patterns: list[EvidencePattern] = []
    for idx, article in enumerate(articles):
        emphasized = [s for s in article.summary if is_emphasized(s, evidence_min_length)]
        omitted = [
            topic
            for topic in universe
            if topic not in texts[idx]
            and any(topic in text for j, text in enumerate(texts) if j != idx)
        ]
        patterns.append(
            EvidencePattern(
                article_id=article.id,
                source=article.source,
                leaning=article.leaning,
                emphasized_evidence=tuple(emphasized[:MAX_EMPHASIZED_EVIDENCE]),
                omitted_topics=tuple(omitted[:MAX_OMITTED_TOPICS]),
            )
        )
    return patterns
