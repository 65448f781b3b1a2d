"""Pydantic configuration models for Unbubble Compare components."""

from typing import Annotated, Literal

from pydantic import BaseModel, Field, PositiveFloat

from unbubble_compare.analysis.thresholds import (
    BASELINE_CONTEXT_MAX_LENGTH,
    EVIDENCE_MIN_LENGTH,
    FRAMING_MAX_LENGTH,
    MIN_ARTICLES,
    MIN_SHARED_ARTICLES,
    SIMILARITY_THRESHOLD,
)

# ============================================================
# Generator Configs
# ============================================================


class ClaudeGeneratorConfig(BaseModel):
    """Configuration for ClaudeGenerator.

    The API key itself is never stored in config; it comes from the
    CLAUDE_API_KEY environment variable.
    """

    type: Literal["claude"] = "claude"
    model: str = "claude-haiku-4-5-20251001"
    max_tokens: int = 4096
    temperature: float = Field(default=0.3, ge=0.0, le=1.0)
    system_prompt: str | None = None

    model_config = {"frozen": True}


class NoOpGeneratorConfig(BaseModel):
    """Generator that is never configured (heuristic-only deployments)."""

    type: Literal["noop"] = "noop"

    model_config = {"frozen": True}


GeneratorConfig = Annotated[
    ClaudeGeneratorConfig | NoOpGeneratorConfig,
    Field(discriminator="type"),
]


# ============================================================
# Heuristic Configs
# ============================================================


class ThresholdsConfig(BaseModel):
    """Overrides for the heuristic thresholds."""

    min_articles: int = Field(default=MIN_ARTICLES, ge=2)
    min_shared_articles: int = Field(default=MIN_SHARED_ARTICLES, ge=2)
    similarity_threshold: float = Field(default=SIMILARITY_THRESHOLD, gt=0.0, le=1.0)
    evidence_min_length: int = Field(default=EVIDENCE_MIN_LENGTH, ge=0)
    framing_max_length: int = Field(default=FRAMING_MAX_LENGTH, ge=4)
    baseline_context_max_length: int = Field(default=BASELINE_CONTEXT_MAX_LENGTH, ge=1)

    model_config = {"frozen": True}


# ============================================================
# Comparison Config
# ============================================================


class ComparisonConfig(BaseModel):
    """Configuration for the comparison pipeline."""

    generator: GeneratorConfig = Field(default_factory=ClaudeGeneratorConfig)
    timeout_seconds: PositiveFloat = 55.0
    thresholds: ThresholdsConfig = Field(default_factory=ThresholdsConfig)

    model_config = {"frozen": True}


# ============================================================
# Logging Config
# ============================================================


class LoggingConfig(BaseModel):
    """Configuration for per-comparison run logs."""

    enabled: bool = False
    log_dir: str = "logs"

    model_config = {"frozen": True}


# ============================================================
# Root Config
# ============================================================


class CompareConfig(BaseModel):
    """Root configuration for Unbubble Compare."""

    comparison: ComparisonConfig = Field(default_factory=ComparisonConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    model_config = {"frozen": True}
