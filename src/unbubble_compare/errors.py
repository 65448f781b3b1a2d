"""Failure taxonomy for comparison requests.

Only ``BadRequestError`` ever reaches a caller. Every ``RemoteAnalysisError``
is absorbed by the pipeline and turned into a heuristic fallback tagged with
the error's ``reason``.
"""

from unbubble_compare.data import FallbackReason


class CompareError(Exception):
    """Base class for all Unbubble Compare errors."""


class BadRequestError(CompareError, ValueError):
    """The caller broke the request contract (e.g. fewer than 2 articles)."""


class RemoteAnalysisError(CompareError):
    """The remote analysis path failed and the heuristic result must be used."""

    reason: FallbackReason = FallbackReason.API_ERROR


class UnconfiguredError(RemoteAnalysisError):
    """No usable credential; raised before any network I/O."""

    reason = FallbackReason.API_KEY_MISSING


class GenerationTimeoutError(RemoteAnalysisError):
    """The generator did not answer within the wall-clock budget."""

    reason = FallbackReason.TIMEOUT


class RateLimitedError(RemoteAnalysisError):
    """The generator signalled quota exhaustion (HTTP 429)."""

    reason = FallbackReason.RATE_LIMIT

    def __init__(self, message: str = "rate limited", *, retry_after: int = 60) -> None:
        super().__init__(message)
        self.retry_after = retry_after


class AuthFailureError(RemoteAnalysisError):
    """The credential was rejected."""


class InvalidArgumentError(RemoteAnalysisError):
    """The generator rejected the request as malformed."""


class UnavailableError(RemoteAnalysisError):
    """The generator could not be reached or failed server-side."""


class ParseError(RemoteAnalysisError):
    """Generator output could not be coerced into JSON, even after repair."""

    reason = FallbackReason.PARSE_ERROR


class InvalidStructureError(RemoteAnalysisError):
    """Generator output parsed but lacks the required comparison fields."""

    reason = FallbackReason.INVALID_STRUCTURE


def classify_exception(exc: BaseException) -> RemoteAnalysisError:
    """Map an arbitrary generator failure onto the taxonomy.

    Typed errors pass through unchanged. Anything else is classified by its
    message, the same way quota and timeout failures surface from SDKs that
    don't raise dedicated exception types.
    """
    if isinstance(exc, RemoteAnalysisError):
        return exc
    if isinstance(exc, TimeoutError):
        return GenerationTimeoutError(str(exc) or "generation timed out")

    message = str(exc)
    lowered = message.lower()
    if any(
        marker in lowered for marker in ("quota", "429", "rate limit", "resource_exhausted")
    ):
        return RateLimitedError(message)
    if "timeout" in lowered or "timed out" in lowered:
        return GenerationTimeoutError(message)
    return UnavailableError(message or type(exc).__name__)
