"""Word-overlap similarity between text fragments."""

import re
from dataclasses import dataclass

from unbubble_compare.analysis.thresholds import SIMILARITY_THRESHOLD
from unbubble_compare.data import Article

_WORD = re.compile(r"\b\w+\b")


def _word_set(text: str) -> set[str]:
    return set(_WORD.findall(text.lower()))


def calculate_similarity(a: str, b: str) -> float:
    """Jaccard index of the lowercase word sets of ``a`` and ``b``.

    Returns 0.0 when both fragments are empty.
    """
    words_a = _word_set(a)
    words_b = _word_set(b)
    union = words_a | words_b
    if not union:
        return 0.0
    return len(words_a & words_b) / len(union)


@dataclass(frozen=True)
class SimilarStatement:
    """A pair of near-duplicate summary sentences from two articles."""

    text: str
    other_text: str
    sources: tuple[str, str]
    score: float


def find_similar_statements(
    articles: list[Article],
    threshold: float = SIMILARITY_THRESHOLD,
) -> list[SimilarStatement]:
    """Find the most similar summary sentence pair for every article pair.

    For each pair (i < j) the highest-scoring sentence pair at or above
    ``threshold`` is kept. Ties keep the first pair encountered, and the
    representative ``text`` comes from the earlier article.
    """
    statements: list[SimilarStatement] = []
    for i, first in enumerate(articles):
        for second in articles[i + 1 :]:
            best: SimilarStatement | None = None
            for sentence_a in first.summary:
                for sentence_b in second.summary:
                    score = calculate_similarity(sentence_a, sentence_b)
                    if score < threshold:
                        continue
                    if best is None or score > best.score:
                        best = SimilarStatement(
                            text=sentence_a,
                            other_text=sentence_b,
                            sources=(first.source, second.source),
                            score=score,
                        )
            if best is not None:
                statements.append(best)
    return statements
