"""Comparison pipelines."""

from unbubble_compare.pipeline.base import Pipeline
from unbubble_compare.pipeline.comparison import DEFAULT_TIMEOUT_SECONDS, ComparisonPipeline

__all__ = ["DEFAULT_TIMEOUT_SECONDS", "ComparisonPipeline", "Pipeline"]
