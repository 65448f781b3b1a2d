"""Shared-fact detection across articles.

Two signals feed the shared factual baseline:

- exact key-fact matches: a key fact that, lowercased and trimmed, appears in
  the key facts of two or more articles;
- repeated mentions: numbers (with units), named events and cost/time/
  emissions constraint terms found in the text of two or more articles.
"""

import re

from unbubble_compare.analysis.keywords import (
    BASELINE_CONSTRAINT_PATTERNS,
    BASELINE_EVENT_PATTERNS,
    BASELINE_NUMBER,
    SHARED_NUMBER,
)
from unbubble_compare.analysis.thresholds import (
    BASELINE_CONTEXT_MAX_LENGTH,
    MAX_BASELINE_FACTS,
    MAX_EXACT_FACT_MATCHES,
    MIN_ARTICLES,
    MIN_SHARED_ARTICLES,
)
from unbubble_compare.data import Article, SharedFact

_SENTENCE_SPLIT = re.compile(r"[.!?]+")
_WHITESPACE = re.compile(r"\s+")


def _normalize(fact: str) -> str:
    return fact.lower().strip()


def _key_fact_holders(articles: list[Article]) -> dict[str, tuple[str, list[int]]]:
    """Map each normalized key fact to its first original spelling and holder indices."""
    holders: dict[str, tuple[str, list[int]]] = {}
    for idx, article in enumerate(articles):
        for fact in article.key_facts:
            normalized = _normalize(fact)
            if not normalized:
                continue
            _, indices = holders.setdefault(normalized, (fact, []))
            if idx not in indices:
                indices.append(idx)
    return holders


def match_key_facts(
    articles: list[Article],
    *,
    min_articles: int = MIN_SHARED_ARTICLES,
    limit: int | None = MAX_EXACT_FACT_MATCHES,
) -> list[str]:
    """Key facts repeated across articles, in first-seen order.

    Each fact is counted once per article. The returned string is the first
    original-cased occurrence.
    """
    matches = [
        original
        for original, indices in _key_fact_holders(articles).values()
        if len(indices) >= min_articles
    ]
    return matches if limit is None else matches[:limit]


def find_shared_numbers(
    articles: list[Article], *, min_articles: int = MIN_SHARED_ARTICLES
) -> list[str]:
    """Numeric tokens that appear in the raw text of two or more articles."""
    holders: dict[str, set[int]] = {}
    for idx, article in enumerate(articles):
        for match in SHARED_NUMBER.finditer(article.combined_text):
            holders.setdefault(match.group(0), set()).add(idx)
    return [token for token, indices in holders.items() if len(indices) >= min_articles]


def _first_sentence_containing(text: str, term: str) -> str | None:
    for sentence in _SENTENCE_SPLIT.split(text):
        if term in sentence.lower():
            return _WHITESPACE.sub(" ", sentence.strip())
    return None


def _cited_by(articles: list[Article], indices: list[int]) -> tuple[str, ...]:
    sources: dict[str, None] = {}
    for idx in indices:
        sources.setdefault(articles[idx].source, None)
    return tuple(sources)


def _collect_mentions(articles: list[Article]) -> dict[str, list[int]]:
    mentions: dict[str, list[int]] = {}

    def record(term: str, idx: int) -> None:
        indices = mentions.setdefault(term, [])
        if idx not in indices:
            indices.append(idx)

    for idx, article in enumerate(articles):
        text = article.combined_text
        for match in BASELINE_NUMBER.finditer(text):
            record(_normalize(match.group(0)), idx)
        for pattern in BASELINE_EVENT_PATTERNS:
            for match in pattern.finditer(text):
                record(_normalize(match.group(0)), idx)
        for pattern in BASELINE_CONSTRAINT_PATTERNS:
            for match in pattern.finditer(text):
                term = _normalize(match.group(0))
                if len(term) > 3:
                    record(term, idx)
    return mentions


def find_shared_baseline(
    articles: list[Article],
    *,
    min_articles: int = MIN_SHARED_ARTICLES,
    context_max_length: int = BASELINE_CONTEXT_MAX_LENGTH,
    limit: int = MAX_BASELINE_FACTS,
) -> list[SharedFact]:
    """Build the shared factual baseline for an article set.

    Exact key-fact matches come first. Repeated mentions follow, each shown
    through the first sentence that contains it (or the bare term when that
    sentence is longer than ``context_max_length``).

    Returns:
        At most ``limit`` shared facts, or an empty list for fewer than two articles.
    """
    if len(articles) < MIN_ARTICLES:
        return []

    baseline: list[SharedFact] = []
    seen_facts: set[str] = set()

    def add(fact: str, indices: list[int]) -> None:
        if fact in seen_facts:
            return
        seen_facts.add(fact)
        baseline.append(SharedFact(fact=fact, cited_by=_cited_by(articles, indices)))

    for original, indices in _key_fact_holders(articles).values():
        if len(indices) >= min_articles:
            add(original, indices)

    for term, indices in _collect_mentions(articles).items():
        if len(indices) < min_articles:
            continue
        context = None
        for idx in indices:
            context = _first_sentence_containing(articles[idx].combined_text, term)
            if context:
                break
        best = context or term
        add(term if len(best) > context_max_length else best, indices)

    return baseline[:limit]
