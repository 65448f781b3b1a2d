"""Run logger for recording comparison stages to JSON files."""

import dataclasses
import uuid
from contextvars import ContextVar
from datetime import UTC, datetime
from enum import Enum
from pathlib import Path
from typing import Any

from pydantic import BaseModel

from unbubble_compare.data import Usage


class StageRecord(BaseModel):
    """Record of a single comparison stage."""

    stage: str
    component: str
    input: Any = None
    output: Any = None
    usage: dict[str, Any] | None = None
    error: str | None = None
    timestamp: str = ""
    duration_seconds: float = 0.0


class RunRecord(BaseModel):
    """Record of one comparison request."""

    run_id: str
    pipeline_type: str
    articles: list[dict[str, Any]]
    started_at: str
    completed_at: str | None = None
    stages: list[StageRecord] = []
    outcome: str | None = None
    fallback_reason: str | None = None
    result: dict[str, Any] | None = None
    total_usage: dict[str, Any] | None = None


def _serialize(obj: Any) -> Any:
    """Serialize an object to JSON-compatible format.

    Objects with a ``to_dict`` (articles, results) use their wire form. For
    Usage objects, includes computed token totals.
    """
    if obj is None:
        return None
    if isinstance(obj, Usage):
        return {
            "api_calls": [_serialize(c) for c in obj.api_calls],
            "input_tokens": obj.input_tokens,
            "output_tokens": obj.output_tokens,
        }
    if isinstance(obj, Enum):
        return obj.value
    if hasattr(obj, "to_dict"):
        return obj.to_dict()
    if dataclasses.is_dataclass(obj) and not isinstance(obj, type):
        return dataclasses.asdict(obj)
    if isinstance(obj, BaseModel):
        return obj.model_dump()
    if isinstance(obj, list | tuple):
        return [_serialize(item) for item in obj]
    if isinstance(obj, dict):
        return {k: _serialize(v) for k, v in obj.items()}
    if isinstance(obj, Path):
        return str(obj)
    return obj


class RunLogger:
    """Accumulates comparison stage records and writes a JSON log file per run.

    The in-flight record lives in a context variable, so concurrent runs in
    separate asyncio tasks (one per request) each keep their own record.
    When ``enabled=False``, all methods are no-ops.

    Args:
        log_dir: Directory to write JSON log files.
        enabled: If False, all methods become no-ops.
    """

    def __init__(self, log_dir: Path, *, enabled: bool = True) -> None:
        self._log_dir = log_dir
        self._enabled = enabled
        self._current: ContextVar[RunRecord | None] = ContextVar(
            f"run_record_{id(self)}", default=None
        )
        self._last_log_path: Path | None = None

    @property
    def enabled(self) -> bool:
        """Whether logging is active."""
        return self._enabled

    @property
    def last_log_path(self) -> Path | None:
        """Path to the last written log file, or None."""
        return self._last_log_path

    def start_run(self, pipeline_type: str, articles: list[Any]) -> None:
        """Initialize a new run record.

        Args:
            pipeline_type: Type of pipeline (e.g. "comparison").
            articles: The articles being compared.
        """
        if not self._enabled:
            return

        self._current.set(
            RunRecord(
                run_id=str(uuid.uuid4()),
                pipeline_type=pipeline_type,
                articles=[_serialize(a) for a in articles],
                started_at=datetime.now(tz=UTC).isoformat(),
            )
        )

    def log_stage(
        self,
        stage: str,
        component: str,
        input_data: Any,
        output_data: Any,
        usage: Usage | None,
        duration_seconds: float,
        *,
        error: str | None = None,
    ) -> None:
        """Append a stage record to the current run.

        Args:
            stage: Stage name (e.g. "remote_generation", "parse").
            component: Component class or function name.
            input_data: Stage input (will be serialized).
            output_data: Stage output (will be serialized).
            usage: Usage object for this stage (None for local stages).
            duration_seconds: Wall-clock time for this stage.
            error: Failure message when the stage failed.
        """
        record = self._current.get()
        if not self._enabled or record is None:
            return

        record.stages.append(
            StageRecord(
                stage=stage,
                component=component,
                input=_serialize(input_data),
                output=_serialize(output_data),
                usage=_serialize(usage) if usage is not None else None,
                error=error,
                timestamp=datetime.now(tz=UTC).isoformat(),
                duration_seconds=round(duration_seconds, 4),
            )
        )

    def finish_run(
        self,
        outcome: Any,
    ) -> Path | None:
        """Write the run record to a JSON file.

        Args:
            outcome: The ``RemoteAnalysis`` or ``FallbackAnalysis`` returned.

        Returns:
            Path to the written JSON file, or None if logging is disabled.
        """
        record = self._current.get()
        if not self._enabled or record is None:
            return None

        reason = getattr(outcome, "reason", None)
        record.completed_at = datetime.now(tz=UTC).isoformat()
        record.outcome = "fallback" if reason is not None else "remote"
        record.fallback_reason = _serialize(reason)
        record.result = _serialize(outcome.result)
        record.total_usage = _serialize(outcome.usage)

        self._log_dir.mkdir(parents=True, exist_ok=True)

        # run_2026-02-12T14-30-00_<id>.json (colons -> dashes)
        ts = record.started_at.replace(":", "-")
        ts = ts.split(".")[0].split("+")[0]
        filename = f"run_{ts}_{record.run_id[:8]}.json"
        filepath = self._log_dir / filename

        filepath.write_text(record.model_dump_json(indent=2))
        self._last_log_path = filepath
        self._current.set(None)
        return filepath
