"""Core data models for Unbubble Compare."""

from dataclasses import dataclass, field
from enum import StrEnum


class Leaning(StrEnum):
    """Political leaning of an article or outlet.

    The first five values are ordered left to right. ``NEUTRAL`` (academic,
    data-driven, non-partisan outlets) sits outside that ordering.
    """

    LEFT = "left"
    LEAN_LEFT = "lean-left"
    CENTER = "center"
    LEAN_RIGHT = "lean-right"
    RIGHT = "right"
    NEUTRAL = "neutral"

    @property
    def label(self) -> str:
        """Human-readable label, e.g. ``"Lean Left"``."""
        return _LEANING_LABELS[self]

    @property
    def spectrum_position(self) -> int | None:
        """Position on the left-right spectrum (0-4), or None for NEUTRAL."""
        if self is Leaning.NEUTRAL:
            return None
        return _SPECTRUM_ORDER.index(self)

    def is_left(self) -> bool:
        return self in (Leaning.LEFT, Leaning.LEAN_LEFT)

    def is_right(self) -> bool:
        return self in (Leaning.RIGHT, Leaning.LEAN_RIGHT)


_SPECTRUM_ORDER: list[Leaning] = [
    Leaning.LEFT,
    Leaning.LEAN_LEFT,
    Leaning.CENTER,
    Leaning.LEAN_RIGHT,
    Leaning.RIGHT,
]

_LEANING_LABELS: dict[Leaning, str] = {
    Leaning.LEFT: "Left",
    Leaning.LEAN_LEFT: "Lean Left",
    Leaning.CENTER: "Center",
    Leaning.LEAN_RIGHT: "Lean Right",
    Leaning.RIGHT: "Right",
    Leaning.NEUTRAL: "Neutral",
}


class FallbackReason(StrEnum):
    """Why the heuristic result was served instead of the remote one.

    Values double as the ``X-Fallback-Reason`` header sent to clients.
    """

    API_KEY_MISSING = "api-key-missing"
    TIMEOUT = "timeout"
    RATE_LIMIT = "rate-limit"
    PARSE_ERROR = "parse-error"
    INVALID_STRUCTURE = "invalid-structure"
    API_ERROR = "api-error"


@dataclass(frozen=True)
class Article:
    """A single article selected for comparison.

    ``summary`` is kept in presentation order since several heuristics look
    at the first matching sentence. ``sub_topic_name`` is the bucket the
    article was filed under in the topic graph.
    """

    id: str
    title: str
    source: str
    leaning: Leaning
    summary: tuple[str, ...]
    key_facts: tuple[str, ...] = ()
    sub_topic_name: str = ""
    url: str | None = None

    @property
    def text_fragments(self) -> tuple[str, ...]:
        """Summary sentences followed by key facts."""
        return self.summary + self.key_facts

    @property
    def combined_text(self) -> str:
        return " ".join(self.text_fragments)

    def to_dict(self) -> dict[str, object]:
        data: dict[str, object] = {
            "id": self.id,
            "title": self.title,
            "source": self.source,
            "leaning": self.leaning.value,
            "summary": list(self.summary),
            "keyFacts": list(self.key_facts),
        }
        if self.sub_topic_name:
            data["subTopicName"] = self.sub_topic_name
        if self.url:
            data["url"] = self.url
        return data


@dataclass(frozen=True)
class ComparisonResult:
    """Flat comparison served by the API, whichever path produced it."""

    shared_facts: tuple[str, ...] = ()
    common_themes: tuple[str, ...] = ()
    differences: tuple[str, ...] = ()
    data_points: tuple[str, ...] = ()

    @classmethod
    def empty(cls) -> "ComparisonResult":
        return cls()

    def to_dict(self) -> dict[str, list[str]]:
        return {
            "sharedFacts": list(self.shared_facts),
            "commonThemes": list(self.common_themes),
            "differences": list(self.differences),
            "dataPoints": list(self.data_points),
        }


@dataclass(frozen=True)
class SharedFact:
    """A fact corroborated by two or more articles."""

    fact: str
    cited_by: tuple[str, ...]

    def to_dict(self) -> dict[str, object]:
        return {"fact": self.fact, "citedBy": list(self.cited_by)}


@dataclass(frozen=True)
class Framing:
    """How one article frames a claim area."""

    leaning: Leaning
    source: str
    framing: str
    underlying_value: str | None = None

    def to_dict(self) -> dict[str, object]:
        data: dict[str, object] = {
            "leaning": self.leaning.value,
            "source": self.source,
            "framing": self.framing,
        }
        if self.underlying_value is not None:
            data["underlyingValue"] = self.underlying_value
        return data


@dataclass(frozen=True)
class Divergence:
    """A claim area covered by several articles, with each article's framing."""

    claim: str
    framings: tuple[Framing, ...]

    def to_dict(self) -> dict[str, object]:
        return {"claim": self.claim, "framings": [f.to_dict() for f in self.framings]}


@dataclass(frozen=True)
class EvidencePattern:
    """What one article emphasizes and which sibling topics it leaves out."""

    article_id: str
    source: str
    leaning: Leaning
    emphasized_evidence: tuple[str, ...] = ()
    omitted_topics: tuple[str, ...] = ()

    def to_dict(self) -> dict[str, object]:
        return {
            "articleId": self.article_id,
            "source": self.source,
            "leaning": self.leaning.value,
            "emphasizedEvidence": list(self.emphasized_evidence),
            "omittedTopics": list(self.omitted_topics),
        }


@dataclass(frozen=True)
class AnalyticalComparison:
    """Structured comparison: shared baseline, divergence map, evidence patterns."""

    shared_baseline: tuple[SharedFact, ...] = ()
    divergences: tuple[Divergence, ...] = ()
    evidence_analysis: tuple[EvidencePattern, ...] = ()

    def to_dict(self) -> dict[str, object]:
        return {
            "sharedBaseline": [f.to_dict() for f in self.shared_baseline],
            "divergences": [d.to_dict() for d in self.divergences],
            "evidenceAnalysis": [e.to_dict() for e in self.evidence_analysis],
        }


@dataclass(frozen=True)
class PerspectiveAnalysis:
    """Explanation of a single article's perspective."""

    framing: str = ""
    underlying_values: tuple[str, ...] = ()
    key_emphases: tuple[str, ...] = ()
    potential_omissions: tuple[str, ...] = ()
    language_patterns: tuple[str, ...] = ()

    def to_dict(self) -> dict[str, object]:
        return {
            "framing": self.framing,
            "underlyingValues": list(self.underlying_values),
            "keyEmphases": list(self.key_emphases),
            "potentialOmissions": list(self.potential_omissions),
            "languagePatterns": list(self.language_patterns),
        }


@dataclass(frozen=True)
class SubTopic:
    """One angle of a topic, with the articles filed under it."""

    id: str
    name: str
    description: str
    articles: tuple[Article, ...] = ()

    def to_dict(self) -> dict[str, object]:
        return {
            "id": self.id,
            "name": self.name,
            "description": self.description,
            "articles": [a.to_dict() for a in self.articles],
        }


@dataclass(frozen=True)
class Topic:
    """A topic broken into sub-topics for the knowledge graph."""

    id: str
    name: str
    description: str
    sub_topics: tuple[SubTopic, ...] = ()

    def to_dict(self) -> dict[str, object]:
        return {
            "id": self.id,
            "name": self.name,
            "description": self.description,
            "subTopics": [s.to_dict() for s in self.sub_topics],
        }


@dataclass(frozen=True)
class APICallUsage:
    """Token usage from a single generator call."""

    model: str
    input_tokens: int = 0
    output_tokens: int = 0
    cache_creation_input_tokens: int = 0
    cache_read_input_tokens: int = 0


@dataclass
class Usage:
    """Accumulated generator usage for one request."""

    api_calls: list[APICallUsage] = field(default_factory=list)

    @property
    def input_tokens(self) -> int:
        return sum(c.input_tokens for c in self.api_calls)

    @property
    def output_tokens(self) -> int:
        return sum(c.output_tokens for c in self.api_calls)

    def __add__(self, other: "Usage") -> "Usage":
        return Usage(api_calls=self.api_calls + other.api_calls)

    def __iadd__(self, other: "Usage") -> "Usage":
        self.api_calls.extend(other.api_calls)
        return self


@dataclass(frozen=True)
class RemoteAnalysis:
    """The remote generator produced a valid comparison."""

    result: ComparisonResult
    usage: Usage = field(default_factory=Usage)


@dataclass(frozen=True)
class FallbackAnalysis:
    """The heuristic comparison was substituted; ``reason`` says why."""

    result: ComparisonResult
    reason: FallbackReason
    detail: str = ""
    usage: Usage = field(default_factory=Usage)


ComparisonOutcome = RemoteAnalysis | FallbackAnalysis
