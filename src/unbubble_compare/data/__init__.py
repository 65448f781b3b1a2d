"""Data models for Unbubble Compare."""

from unbubble_compare.data.models import (
    AnalyticalComparison,
    APICallUsage,
    Article,
    ComparisonOutcome,
    ComparisonResult,
    Divergence,
    EvidencePattern,
    FallbackAnalysis,
    FallbackReason,
    Framing,
    Leaning,
    PerspectiveAnalysis,
    RemoteAnalysis,
    SharedFact,
    SubTopic,
    Topic,
    Usage,
)
from unbubble_compare.data.schemas import (
    ArticlePayload,
    ComparisonRequest,
    SubTopicPayload,
    TopicPayload,
    TopicRequest,
)

__all__ = [
    "APICallUsage",
    "AnalyticalComparison",
    "Article",
    "ArticlePayload",
    "ComparisonOutcome",
    "ComparisonRequest",
    "ComparisonResult",
    "Divergence",
    "EvidencePattern",
    "FallbackAnalysis",
    "FallbackReason",
    "Framing",
    "Leaning",
    "PerspectiveAnalysis",
    "RemoteAnalysis",
    "SharedFact",
    "SubTopic",
    "SubTopicPayload",
    "Topic",
    "TopicPayload",
    "TopicRequest",
    "Usage",
]
