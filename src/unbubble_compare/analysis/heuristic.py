"""Deterministic comparison built from the pattern and overlap heuristics.

This is the always-available path: it needs no network and no credentials.
``HeuristicAnalyzer.analyze`` produces the structured ``AnalyticalComparison``;
``HeuristicAnalyzer.compare`` projects the same signals onto the flat
``ComparisonResult`` served by the API.
"""

import logging

from unbubble_compare.analysis.datapoints import extract_data_points
from unbubble_compare.analysis.divergence import map_divergences
from unbubble_compare.analysis.evidence import analyze_evidence_patterns
from unbubble_compare.analysis.facts import (
    find_shared_baseline,
    find_shared_numbers,
    match_key_facts,
)
from unbubble_compare.analysis.perspective import generate_perspective_analysis
from unbubble_compare.analysis.similarity import find_similar_statements
from unbubble_compare.analysis.themes import common_themes, tag_themes
from unbubble_compare.analysis.thresholds import (
    MAX_COMMON_THEMES,
    MAX_DATA_POINTS,
    MAX_DIFFERENCES,
    MAX_SHARED_FACTS,
    Thresholds,
)
from unbubble_compare.data import (
    AnalyticalComparison,
    Article,
    ComparisonResult,
    Divergence,
    PerspectiveAnalysis,
)

logger = logging.getLogger(__name__)


def _dedupe(items: list[str], limit: int) -> tuple[str, ...]:
    seen: dict[str, None] = {}
    for item in items:
        seen.setdefault(item, None)
    return tuple(list(seen)[:limit])


def _sentence_key(text: str) -> str:
    return text.strip().rstrip(".!?;:, ").lower()


def _join_labels(labels: list[str]) -> str:
    if len(labels) <= 1:
        return "".join(labels)
    return ", ".join(labels[:-1]) + " and " + labels[-1]


def _has_opposing_leanings(articles: list[Article]) -> bool:
    return any(a.leaning.is_left() for a in articles) and any(
        a.leaning.is_right() for a in articles
    )


def _describe(article: Article) -> str:
    return f"{article.source} ({article.leaning.label})"


class HeuristicAnalyzer:
    """Compare articles using keyword, overlap and pattern heuristics only.

    Pure and side-effect free: the same article list always yields the same
    result. Article sets smaller than ``thresholds.min_articles`` produce
    empty results rather than errors.

    Args:
        thresholds: Limits for similarity, evidence length, framing length, etc.
    """

    def __init__(self, thresholds: Thresholds | None = None) -> None:
        self._thresholds = thresholds or Thresholds()

    @property
    def thresholds(self) -> Thresholds:
        return self._thresholds

    def analyze(self, articles: list[Article]) -> AnalyticalComparison:
        """Shared baseline, divergence map and evidence patterns for the articles."""
        t = self._thresholds
        if len(articles) < t.min_articles:
            return AnalyticalComparison()

        return AnalyticalComparison(
            shared_baseline=tuple(
                find_shared_baseline(
                    articles,
                    min_articles=t.min_shared_articles,
                    context_max_length=t.baseline_context_max_length,
                )
            ),
            divergences=tuple(
                map_divergences(
                    articles,
                    min_articles=t.min_shared_articles,
                    framing_max_length=t.framing_max_length,
                )
            ),
            evidence_analysis=tuple(
                analyze_evidence_patterns(articles, evidence_min_length=t.evidence_min_length)
            ),
        )

    def explain(
        self, article: Article, all_articles: list[Article] | None = None
    ) -> PerspectiveAnalysis:
        """Perspective analysis for one article, optionally against its siblings."""
        return generate_perspective_analysis(article, all_articles)

    def compare(self, articles: list[Article]) -> ComparisonResult:
        """Flat comparison: shared facts, common themes, differences, data points."""
        if len(articles) < self._thresholds.min_articles:
            return ComparisonResult.empty()

        analysis = self.analyze(articles)
        result = ComparisonResult(
            shared_facts=self._shared_facts(articles, analysis),
            common_themes=self._common_themes(articles),
            differences=self._differences(articles, analysis.divergences),
            data_points=self._data_points(articles),
        )
        logger.debug(
            "Heuristic comparison of %d articles: %d facts, %d themes, %d differences",
            len(articles),
            len(result.shared_facts),
            len(result.common_themes),
            len(result.differences),
        )
        return result

    def _shared_facts(
        self, articles: list[Article], analysis: AnalyticalComparison
    ) -> tuple[str, ...]:
        t = self._thresholds
        pair = len(articles) == 2
        facts: list[str] = []

        key_matches = match_key_facts(articles, min_articles=t.min_shared_articles)
        agree = "Both agree" if pair else "Multiple sources agree"
        facts.extend(f'{agree}: "{fact}"' for fact in key_matches)

        numbers = find_shared_numbers(articles, min_articles=t.min_shared_articles)
        if numbers:
            cohort = "Both sources" if pair else "Multiple sources"
            facts.append(f"{cohort} cite the same figures: {', '.join(numbers[:MAX_DATA_POINTS])}")

        quoted: set[str] = set()
        for statement in find_similar_statements(articles, t.similarity_threshold):
            first, second = statement.sources
            facts.append(f'{first} and {second} make a similar point: "{statement.text}"')
            quoted.update(_sentence_key(s) for s in (statement.text, statement.other_text))

        for item in analysis.shared_baseline:
            if item.fact in key_matches or _sentence_key(item.fact) in quoted:
                continue
            facts.append(f"{item.fact} (cited by {', '.join(item.cited_by)})")

        return _dedupe(facts, MAX_SHARED_FACTS)

    def _common_themes(self, articles: list[Article]) -> tuple[str, ...]:
        pair = len(articles) == 2
        subject = "Both perspectives" if pair else "Multiple perspectives"
        themes = [
            f"{subject} address {label}"
            for label in common_themes(
                articles, min_articles=self._thresholds.min_shared_articles
            )
        ]

        if _has_opposing_leanings(articles):
            who = "both" if pair else "all sides"
            themes.append(
                f"Despite political differences, {who} recognize the multifaceted nature "
                "of this issue"
            )

        buckets = {a.sub_topic_name for a in articles}
        if len(buckets) == 1:
            name = buckets.pop()
            if name:
                who = "Both" if pair else "All"
                themes.append(f'{who} examine the "{name}" dimension of this topic')

        return _dedupe(themes, MAX_COMMON_THEMES)

    def _differences(
        self, articles: list[Article], divergences: tuple[Divergence, ...]
    ) -> tuple[str, ...]:
        differences: list[str] = []

        # Themes only one article raises
        tags = [tag_themes(a.combined_text) for a in articles]
        exclusive: list[str] = []
        for idx, article in enumerate(articles):
            others = {label for j, labels in enumerate(tags) if j != idx for label in labels}
            own = [label for label in tags[idx] if label not in others]
            if own:
                exclusive.append(f"{_describe(article)} emphasizes {_join_labels(own[:2])}")
        if len(exclusive) >= 2:
            differences.append(", while ".join(exclusive))

        for divergence in divergences:
            valued = [f for f in divergence.framings if f.underlying_value]
            if len({f.underlying_value for f in valued}) >= 2:
                framed = ", while ".join(
                    f"{f.source} ({f.leaning.label}) frames it around {f.underlying_value}"
                    for f in valued
                )
                differences.append(f"{divergence.claim}: {framed}")
            elif len({f.leaning for f in divergence.framings}) >= 2:
                sources = _join_labels(
                    [f"{f.source} ({f.leaning.label})" for f in divergence.framings]
                )
                differences.append(f"{divergence.claim}: {sources} frame this differently")

        return _dedupe(differences, MAX_DIFFERENCES)

    def _data_points(self, articles: list[Article]) -> tuple[str, ...]:
        holders: dict[str, set[int]] = {}
        for idx, article in enumerate(articles):
            for token in extract_data_points(article.combined_text, limit=None):
                holders.setdefault(token, set()).add(idx)
        recurring = [
            token
            for token, indices in holders.items()
            if len(indices) >= self._thresholds.min_shared_articles
        ]
        return tuple(recurring[:MAX_DATA_POINTS])
