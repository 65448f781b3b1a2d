"""Tests for the heuristic comparison orchestrator."""

import pytest

from unbubble_compare.analysis import HeuristicAnalyzer, Thresholds
from unbubble_compare.data import (
    AnalyticalComparison,
    Article,
    ComparisonResult,
    Leaning,
)


@pytest.fixture
def analyzer() -> HeuristicAnalyzer:
    return HeuristicAnalyzer()


def _article(source: str, leaning: Leaning, *summary: str, sub_topic: str = "") -> Article:
    return Article(
        id=source.lower().replace(" ", "-"),
        title="t",
        source=source,
        leaning=leaning,
        summary=summary,
        sub_topic_name=sub_topic,
    )


class TestSmallInputs:
    """Article sets below the minimum produce empty results."""

    def test_compare_empty(self, analyzer: HeuristicAnalyzer) -> None:
        assert analyzer.compare([]) == ComparisonResult.empty()

    def test_compare_single(self, analyzer: HeuristicAnalyzer, left_article: Article) -> None:
        result = analyzer.compare([left_article])
        assert result.to_dict() == {
            "sharedFacts": [],
            "commonThemes": [],
            "differences": [],
            "dataPoints": [],
        }

    def test_analyze_single(self, analyzer: HeuristicAnalyzer, left_article: Article) -> None:
        assert analyzer.analyze([left_article]) == AnalyticalComparison()


class TestScenario:
    """Left article on social equity, right article on economic growth."""

    def test_shared_fact_references_key_fact(
        self, analyzer: HeuristicAnalyzer, article_pair: list[Article]
    ) -> None:
        result = analyzer.compare(article_pair)
        assert result.shared_facts[0] == 'Both agree: "10% increase"'

    def test_differences_surface_social_vs_economic(
        self, analyzer: HeuristicAnalyzer, article_pair: list[Article]
    ) -> None:
        result = analyzer.compare(article_pair)
        assert result.differences[0] == (
            "Progressive Daily (Left) emphasizes social implications, "
            "while Market Journal (Right) emphasizes economic impact"
        )

    def test_data_points_recur_across_articles(
        self, analyzer: HeuristicAnalyzer, article_pair: list[Article]
    ) -> None:
        assert analyzer.compare(article_pair).data_points == ("10%",)

    def test_opposing_leanings_theme(
        self, analyzer: HeuristicAnalyzer, article_pair: list[Article]
    ) -> None:
        themes = analyzer.compare(article_pair).common_themes
        assert any(t.startswith("Despite political differences, both") for t in themes)

    def test_similar_statement_reported(
        self, analyzer: HeuristicAnalyzer, article_pair: list[Article]
    ) -> None:
        facts = analyzer.compare(article_pair).shared_facts
        assert any("make a similar point" in f for f in facts)

    def test_similar_statement_not_repeated_as_baseline(
        self, analyzer: HeuristicAnalyzer
    ) -> None:
        articles = [
            _article("Left Post", Leaning.LEFT, "Critics note a 10% increase in program funding."),
            _article(
                "Right Times",
                Leaning.RIGHT,
                "Critics note a 10% increase in program funding this year.",
            ),
        ]

        facts = analyzer.compare(articles).shared_facts

        mentions = [f for f in facts if "Critics note a 10% increase in program funding" in f]
        assert len(mentions) == 1
        assert "make a similar point" in mentions[0]

    def test_structured_analysis(
        self, analyzer: HeuristicAnalyzer, article_pair: list[Article]
    ) -> None:
        analysis = analyzer.analyze(article_pair)
        assert analysis.shared_baseline[0].fact == "10% increase"
        assert analysis.shared_baseline[0].cited_by == ("Progressive Daily", "Market Journal")
        assert [e.article_id for e in analysis.evidence_analysis] == ["left-1", "right-1"]


def test_idempotent(analyzer: HeuristicAnalyzer, article_pair: list[Article]) -> None:
    first = analyzer.compare(article_pair)
    second = analyzer.compare(article_pair)
    assert first == second
    assert first.to_dict() == second.to_dict()
    assert analyzer.analyze(article_pair).to_dict() == analyzer.analyze(article_pair).to_dict()


def test_output_respects_caps(analyzer: HeuristicAnalyzer) -> None:
    facts = tuple(f"Shared fact number {i}" for i in range(8))
    sentences = (
        "Economic cost and safety risk dominate, with climate emissions rising.",
        "Health, community equity and jobs for workers are at stake.",
        "Innovation and technology spending grew 10%, 20%, 30%, 40%, 50%, 60%.",
        "Officials cite 70%, 80%, 90%, 95%, 99% and $25B, $30B.",
    )
    articles = [
        Article(
            id=str(i),
            title="t",
            source=f"Outlet {i}",
            leaning=leaning,
            summary=sentences,
            key_facts=facts,
        )
        for i, leaning in enumerate([Leaning.LEFT, Leaning.CENTER, Leaning.RIGHT])
    ]

    result = analyzer.compare(articles)

    assert len(result.shared_facts) <= 5
    assert len(result.common_themes) <= 4
    assert len(result.differences) <= 3
    assert len(result.data_points) == 10
    assert result.shared_facts[0].startswith("Multiple sources agree")
    assert result.common_themes[0].startswith("Multiple perspectives address")


def test_divergent_values_in_differences(analyzer: HeuristicAnalyzer) -> None:
    a = _article("Outlet A", Leaning.LEFT, "Safety risk worries the community.")
    b = _article("Outlet B", Leaning.RIGHT, "Climate goals need community buy-in.")

    differences = analyzer.compare([a, b]).differences

    assert differences == (
        "Outlet A (Left) emphasizes safety concerns, "
        "while Outlet B (Right) emphasizes environmental impact",
        "Social impact: Outlet A (Left) frames it around safety, "
        "while Outlet B (Right) frames it around environment",
    )


def test_shared_sub_topic_theme(analyzer: HeuristicAnalyzer) -> None:
    a = _article("A", Leaning.CENTER, "Plain words.", sub_topic="Costs")
    b = _article("B", Leaning.CENTER, "Other words.", sub_topic="Costs")
    themes = analyzer.compare([a, b]).common_themes
    assert themes == ('Both examine the "Costs" dimension of this topic',)


def test_custom_thresholds() -> None:
    analyzer = HeuristicAnalyzer(Thresholds(min_articles=3))
    a = _article("A", Leaning.LEFT, "The cost rose 10%.")
    b = _article("B", Leaning.RIGHT, "The cost rose 10%.")
    assert analyzer.compare([a, b]) == ComparisonResult.empty()
    assert analyzer.thresholds.min_articles == 3


def test_explain(analyzer: HeuristicAnalyzer, article_pair: list[Article]) -> None:
    analysis = analyzer.explain(article_pair[0], article_pair)
    assert analysis.framing
    assert "equity" in analysis.underlying_values
