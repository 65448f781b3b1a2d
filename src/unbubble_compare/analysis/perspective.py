"""Single-article perspective analysis."""

from unbubble_compare.analysis.keywords import (
    EMPHASIS_TOPICS,
    FRAMING_PATTERNS,
    LANGUAGE_PATTERNS,
    OMISSION_TOPICS,
    PERSPECTIVE_VALUE_INDICATORS,
)
from unbubble_compare.data import Article, PerspectiveAnalysis

MAX_VALUES = 4
MAX_EMPHASES = 4
MAX_OMISSIONS = 3


def _framing_sentence(article: Article) -> str:
    for sentence in article.summary:
        if any(pattern.search(sentence) for pattern in FRAMING_PATTERNS):
            return sentence
    return article.summary[0] if article.summary else ""


def generate_perspective_analysis(
    article: Article,
    all_articles: list[Article] | None = None,
) -> PerspectiveAnalysis:
    """Explain one article's framing, values, emphases and tone.

    Potential omissions need the rest of the comparison set and are left
    empty unless ``all_articles`` holds more than one article.
    """
    text = article.combined_text.lower()

    values: list[str] = []
    for indicator, value in PERSPECTIVE_VALUE_INDICATORS:
        if indicator in text and value not in values:
            values.append(value)

    emphases = [
        topic
        for topic in EMPHASIS_TOPICS
        if any(topic in sentence.lower() for sentence in article.summary)
    ]

    omissions: list[str] = []
    if all_articles and len(all_articles) > 1:
        sibling_texts = [a.combined_text.lower() for a in all_articles]
        omissions = [
            topic
            for topic in OMISSION_TOPICS
            if topic not in text and any(topic in t for t in sibling_texts)
        ]

    tones = [label for label, pattern in LANGUAGE_PATTERNS if pattern.search(text)]

    return PerspectiveAnalysis(
        framing=_framing_sentence(article),
        underlying_values=tuple(values[:MAX_VALUES]),
        key_emphases=tuple(emphases[:MAX_EMPHASES]),
        potential_omissions=tuple(omissions[:MAX_OMISSIONS]),
        language_patterns=tuple(tones),
    )
