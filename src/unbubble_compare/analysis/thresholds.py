"""Tunable limits for the heuristic comparison."""

from dataclasses import dataclass

MIN_ARTICLES = 2
MIN_SHARED_ARTICLES = 2
SIMILARITY_THRESHOLD = 0.3
EVIDENCE_MIN_LENGTH = 80
FRAMING_MAX_LENGTH = 150
BASELINE_CONTEXT_MAX_LENGTH = 200

# Output caps
MAX_SHARED_FACTS = 5
MAX_COMMON_THEMES = 4
MAX_DIFFERENCES = 3
MAX_DATA_POINTS = 10
MAX_EXACT_FACT_MATCHES = 3
MAX_BASELINE_FACTS = 6
MAX_DIVERGENCES = 5
MAX_EMPHASIZED_EVIDENCE = 3
MAX_OMITTED_TOPICS = 4


@dataclass(frozen=True)
class Thresholds:
    """Named, overridable thresholds.

    Attributes:
        min_articles: Smallest article set that gets a non-empty comparison.
        min_shared_articles: Articles that must mention a fact/theme for it to count as shared.
        similarity_threshold: Jaccard index at which two sentences count as similar.
        evidence_min_length: Sentences longer than this count as emphasized evidence.
        framing_max_length: Framing sentences are truncated to this many characters.
        baseline_context_max_length: Longer context sentences fall back to the bare fact.
    """

    min_articles: int = MIN_ARTICLES
    min_shared_articles: int = MIN_SHARED_ARTICLES
    similarity_threshold: float = SIMILARITY_THRESHOLD
    evidence_min_length: int = EVIDENCE_MIN_LENGTH
    framing_max_length: int = FRAMING_MAX_LENGTH
    baseline_context_max_length: int = BASELINE_CONTEXT_MAX_LENGTH
