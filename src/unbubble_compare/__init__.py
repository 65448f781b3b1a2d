"""Unbubble Compare: find common ground between articles from across the political spectrum."""

from unbubble_compare.analysis import HeuristicAnalyzer, Thresholds
from unbubble_compare.config import CompareConfig, create_from_config, load_config
from unbubble_compare.data import (
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
from unbubble_compare.errors import (
    BadRequestError,
    CompareError,
    ParseError,
    RemoteAnalysisError,
)
from unbubble_compare.generator.base import TextGenerator
from unbubble_compare.generator.claude import ClaudeGenerator
from unbubble_compare.generator.noop import NoOpGenerator
from unbubble_compare.pipeline.base import Pipeline
from unbubble_compare.pipeline.comparison import ComparisonPipeline
from unbubble_compare.run_logger import RunLogger
from unbubble_compare.topics import TopicGenerator, mock_topic

__all__ = [
    "APICallUsage",
    "AnalyticalComparison",
    "Article",
    "BadRequestError",
    "ClaudeGenerator",
    "CompareConfig",
    "CompareError",
    "ComparisonOutcome",
    "ComparisonPipeline",
    "ComparisonResult",
    "Divergence",
    "EvidencePattern",
    "FallbackAnalysis",
    "FallbackReason",
    "Framing",
    "HeuristicAnalyzer",
    "Leaning",
    "NoOpGenerator",
    "ParseError",
    "PerspectiveAnalysis",
    "Pipeline",
    "RemoteAnalysis",
    "RemoteAnalysisError",
    "RunLogger",
    "SharedFact",
    "SubTopic",
    "TextGenerator",
    "Thresholds",
    "Topic",
    "TopicGenerator",
    "Usage",
    "create_from_config",
    "load_config",
    "mock_topic",
]
