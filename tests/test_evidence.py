"""Tests for evidence and omission analysis."""

from unbubble_compare.analysis import analyze_evidence_patterns
from unbubble_compare.analysis.evidence import is_emphasized, topic_universe
from unbubble_compare.data import Article, Leaning


def _article(article_id: str, *summary: str) -> Article:
    return Article(
        id=article_id,
        title="t",
        source=f"Source {article_id}",
        leaning=Leaning.CENTER,
        summary=summary,
    )


def test_omitted_topics_come_from_siblings() -> None:
    a = _article("a", "Officials stressed safety.")
    b = _article("b", "Safety and cost dominate.")

    patterns = analyze_evidence_patterns([a, b])

    assert patterns[0].article_id == "a"
    assert "cost" in patterns[0].omitted_topics
    assert "cost" not in patterns[1].omitted_topics
    assert patterns[1].omitted_topics == ()


def test_topic_universe() -> None:
    a = _article("a", "Climate and jobs.")
    b = _article("b", "Nothing else.")
    assert topic_universe([a, b]) == ["climate", "jobs"]


def test_is_emphasized() -> None:
    assert is_emphasized("Output rose 12 points.")
    assert is_emphasized("Research suggests caution.")
    assert is_emphasized("word " * 20)
    assert not is_emphasized("Short claim.")


def test_emphasized_evidence_capped() -> None:
    a = _article("a", "1 first.", "2 second.", "3 third.", "4 fourth.", "Plain.")
    b = _article("b", "Other.")

    patterns = analyze_evidence_patterns([a, b])

    assert patterns[0].emphasized_evidence == ("1 first.", "2 second.", "3 third.")
    assert patterns[1].emphasized_evidence == ()


def test_omitted_topics_capped() -> None:
    a = _article("a", "Cost, safety, climate, health and security all matter.")
    b = _article("b", "Unrelated.")

    patterns = analyze_evidence_patterns([a, b])

    assert len(patterns[1].omitted_topics) == 4
    assert patterns[0].omitted_topics == ()


def test_fewer_than_two_articles() -> None:
    assert analyze_evidence_patterns([_article("a", "Safety.")]) == []
