"""Remote-first comparison pipeline with heuristic fallback."""

import asyncio
import logging
import time

from unbubble_compare.analysis import HeuristicAnalyzer
from unbubble_compare.data import (
    Article,
    ComparisonOutcome,
    ComparisonResult,
    FallbackAnalysis,
    RemoteAnalysis,
    Usage,
)
from unbubble_compare.errors import (
    BadRequestError,
    GenerationTimeoutError,
    RemoteAnalysisError,
    UnconfiguredError,
    classify_exception,
)
from unbubble_compare.generator.base import TextGenerator
from unbubble_compare.response import (
    build_comparison_prompt,
    normalize_result,
    parse_json_with_repair,
)
from unbubble_compare.run_logger import RunLogger

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT_SECONDS = 55.0


class ComparisonPipeline:
    """Compare articles with a remote generator, falling back to heuristics.

    Flow:
    1. Refuse article sets below the analyzer's ``min_articles`` (the only
       error a caller sees)
    2. Skip straight to the fallback when the generator has no credential
    3. Make exactly one generator call inside a timeout scope; on expiry the
       call is cancelled
    4. Repair-parse and normalize the output
    5. Any failure in 2-4 substitutes the heuristic result wholesale, tagged
       with the failure's reason

    Args:
        generator: Remote text generator.
        heuristic: Analyzer used for the fallback result.
        timeout_seconds: Wall-clock budget for the generator call.
        run_logger: Optional RunLogger for intermediate result logging.
    """

    def __init__(
        self,
        generator: TextGenerator,
        heuristic: HeuristicAnalyzer | None = None,
        *,
        timeout_seconds: float = DEFAULT_TIMEOUT_SECONDS,
        run_logger: RunLogger | None = None,
    ) -> None:
        self._generator = generator
        self._heuristic = heuristic or HeuristicAnalyzer()
        self._timeout = timeout_seconds
        self._run_logger = run_logger

    @property
    def heuristic(self) -> HeuristicAnalyzer:
        return self._heuristic

    @property
    def generator(self) -> TextGenerator:
        return self._generator

    async def run(self, articles: list[Article]) -> ComparisonOutcome:
        """Execute the comparison.

        Args:
            articles: Articles to compare.

        Returns:
            ``RemoteAnalysis`` or ``FallbackAnalysis``.

        Raises:
            BadRequestError: Fewer articles than ``thresholds.min_articles``.
        """
        min_articles = self._heuristic.thresholds.min_articles
        if len(articles) < min_articles:
            raise BadRequestError(f"At least {min_articles} articles are required for comparison")

        if self._run_logger:
            self._run_logger.start_run("comparison", articles)

        usage = Usage()
        try:
            result = await self._remote(articles, usage)
        except RemoteAnalysisError as e:
            outcome: ComparisonOutcome = self._fallback(articles, e, usage)
        except Exception as e:
            # Unknown generator failures are classified by message.
            outcome = self._fallback(articles, classify_exception(e), usage)
        else:
            outcome = RemoteAnalysis(result=result, usage=usage)

        if self._run_logger:
            self._run_logger.finish_run(outcome)
        return outcome

    async def _remote(self, articles: list[Article], usage: Usage) -> ComparisonResult:
        if not self._generator.configured:
            raise UnconfiguredError("remote generator has no usable credential")

        prompt = build_comparison_prompt(articles)

        t0 = time.monotonic()
        try:
            async with asyncio.timeout(self._timeout):
                text, gen_usage = await self._generator.generate(prompt)
        except TimeoutError as e:
            self._log_stage("remote_generation", prompt, None, None, t0, error="timeout")
            raise GenerationTimeoutError(
                f"generation exceeded {self._timeout:g}s"
            ) from e
        except Exception as e:
            self._log_stage("remote_generation", prompt, None, None, t0, error=str(e))
            raise
        usage += gen_usage
        self._log_stage("remote_generation", prompt, text, gen_usage, t0)

        t0 = time.monotonic()
        try:
            parsed = parse_json_with_repair(text)
        except RemoteAnalysisError as e:
            self._log_stage("parse", text, None, None, t0, error=str(e))
            raise
        self._log_stage("parse", text, parsed, None, t0)

        t0 = time.monotonic()
        try:
            result = normalize_result(parsed)
        except RemoteAnalysisError as e:
            self._log_stage("normalize", parsed, None, None, t0, error=str(e))
            raise
        self._log_stage("normalize", parsed, result, None, t0)
        return result

    def _fallback(
        self, articles: list[Article], error: RemoteAnalysisError, usage: Usage
    ) -> FallbackAnalysis:
        logger.warning(f"Using heuristic comparison ({error.reason}): {error}")

        t0 = time.monotonic()
        result = self._heuristic.compare(articles)
        self._log_stage("heuristic", {"reason": error.reason}, result, None, t0)

        return FallbackAnalysis(result=result, reason=error.reason, detail=str(error), usage=usage)

    def _log_stage(
        self,
        stage: str,
        input_data: object,
        output_data: object,
        usage: Usage | None,
        started: float,
        *,
        error: str | None = None,
    ) -> None:
        if not self._run_logger:
            return
        components = {
            "remote_generation": type(self._generator).__name__,
            "heuristic": type(self._heuristic).__name__,
        }
        self._run_logger.log_stage(
            stage=stage,
            component=components.get(stage, stage),
            input_data=input_data,
            output_data=output_data,
            usage=usage,
            duration_seconds=time.monotonic() - started,
            error=error,
        )
