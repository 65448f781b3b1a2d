"""Configuration module for Unbubble Compare."""

from unbubble_compare.config.factory import (
    create_from_config,
    create_generator,
    create_heuristic,
    create_pipeline,
    create_topic_generator,
)
from unbubble_compare.config.loader import get_default_config_path, load_config
from unbubble_compare.config.models import (
    ClaudeGeneratorConfig,
    CompareConfig,
    ComparisonConfig,
    GeneratorConfig,
    LoggingConfig,
    NoOpGeneratorConfig,
    ThresholdsConfig,
)

__all__ = [
    "ClaudeGeneratorConfig",
    "CompareConfig",
    "ComparisonConfig",
    "GeneratorConfig",
    "LoggingConfig",
    "NoOpGeneratorConfig",
    "ThresholdsConfig",
    "create_from_config",
    "create_generator",
    "create_heuristic",
    "create_pipeline",
    "create_topic_generator",
    "get_default_config_path",
    "load_config",
]
