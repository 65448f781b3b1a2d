"""Factory functions to create components from configuration."""

from pathlib import Path

from unbubble_compare.analysis import HeuristicAnalyzer, Thresholds
from unbubble_compare.config.models import (
    ClaudeGeneratorConfig,
    CompareConfig,
    ComparisonConfig,
    GeneratorConfig,
    NoOpGeneratorConfig,
    ThresholdsConfig,
)
from unbubble_compare.generator.base import TextGenerator
from unbubble_compare.generator.claude import ClaudeGenerator
from unbubble_compare.generator.noop import NoOpGenerator
from unbubble_compare.pipeline.comparison import ComparisonPipeline
from unbubble_compare.run_logger import RunLogger
from unbubble_compare.topics import TopicGenerator


def create_generator(config: GeneratorConfig) -> TextGenerator:
    """Create a text generator from config.

    Uses explicit type matching rather than getattr.
    """
    if isinstance(config, ClaudeGeneratorConfig):
        return ClaudeGenerator(
            model=config.model,
            max_tokens=config.max_tokens,
            temperature=config.temperature,
            system_prompt=config.system_prompt,
        )
    if isinstance(config, NoOpGeneratorConfig):
        return NoOpGenerator()
    msg = f"Unknown generator config type: {type(config)}"
    raise ValueError(msg)


def create_heuristic(config: ThresholdsConfig) -> HeuristicAnalyzer:
    """Create the heuristic analyzer with the configured thresholds."""
    return HeuristicAnalyzer(Thresholds(**config.model_dump()))


def create_pipeline(
    config: ComparisonConfig,
    run_logger: RunLogger | None = None,
    generator: TextGenerator | None = None,
) -> ComparisonPipeline:
    """Create the comparison pipeline from config.

    Args:
        config: Comparison configuration.
        run_logger: Optional run logger.
        generator: Pre-built generator to share with other components.
    """
    return ComparisonPipeline(
        generator=generator or create_generator(config.generator),
        heuristic=create_heuristic(config.thresholds),
        timeout_seconds=config.timeout_seconds,
        run_logger=run_logger,
    )


def create_topic_generator(
    config: ComparisonConfig, generator: TextGenerator | None = None
) -> TopicGenerator:
    """Create the topic generator, sharing the comparison timeout."""
    return TopicGenerator(
        generator or create_generator(config.generator),
        timeout_seconds=config.timeout_seconds,
    )


def create_from_config(
    config: CompareConfig,
    *,
    log_override: bool | None = None,
    log_dir_override: str | None = None,
) -> tuple[ComparisonPipeline, RunLogger | None]:
    """Create a complete pipeline from root config.

    Args:
        config: Root configuration.
        log_override: Override the config's logging.enabled setting.
        log_dir_override: Override the config's logging.log_dir setting.

    Returns:
        Tuple of (pipeline, run_logger).
        run_logger is None if logging is disabled.
    """
    log_enabled = log_override if log_override is not None else config.logging.enabled
    log_dir = Path(log_dir_override if log_dir_override is not None else config.logging.log_dir)

    run_logger: RunLogger | None = None
    if log_enabled:
        run_logger = RunLogger(log_dir=log_dir, enabled=True)

    pipeline = create_pipeline(config.comparison, run_logger=run_logger)
    return (pipeline, run_logger)
