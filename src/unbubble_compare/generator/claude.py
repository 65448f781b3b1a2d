import logging
import os

import anthropic
from anthropic.types import TextBlock

from unbubble_compare.data import APICallUsage, Usage
from unbubble_compare.errors import (
    AuthFailureError,
    GenerationTimeoutError,
    InvalidArgumentError,
    RateLimitedError,
    RemoteAnalysisError,
    UnavailableError,
    UnconfiguredError,
)

logger = logging.getLogger(__name__)

API_KEY_ENV = "CLAUDE_API_KEY"
PLACEHOLDER_KEYS = frozenset({"your_api_key_here", "changeme", ""})

DEFAULT_SYSTEM_PROMPT = """\
You are a careful, non-partisan media analyst. Answer with a single JSON \
object exactly as instructed and nothing else: no markdown fences, no \
commentary.\
"""


def is_usable_key(api_key: str | None) -> bool:
    """True for a non-empty key that is not a known placeholder."""
    return api_key is not None and api_key.strip() not in PLACEHOLDER_KEYS


def _map_api_error(exc: anthropic.AnthropicError) -> RemoteAnalysisError:
    """Translate an SDK exception into the comparison failure taxonomy."""
    if isinstance(exc, anthropic.RateLimitError):
        retry_after = 60
        header = exc.response.headers.get("retry-after")
        if header and header.isdigit():
            retry_after = int(header)
        return RateLimitedError(str(exc), retry_after=retry_after)
    if isinstance(exc, anthropic.AuthenticationError | anthropic.PermissionDeniedError):
        return AuthFailureError(str(exc))
    if isinstance(exc, anthropic.BadRequestError | anthropic.UnprocessableEntityError):
        return InvalidArgumentError(str(exc))
    if isinstance(exc, anthropic.APITimeoutError):
        return GenerationTimeoutError(str(exc))
    return UnavailableError(str(exc))


class ClaudeGenerator:
    """Generate text with Anthropic's Claude API.

    SDK-level retries are disabled: a comparison request makes at most one
    call. Without a usable key no client is created and ``generate`` fails
    immediately with ``UnconfiguredError``.

    Args:
        model: Anthropic model ID to use.
        api_key: API key (defaults to CLAUDE_API_KEY env var).
        max_tokens: Output token ceiling.
        temperature: Sampling temperature; low values keep the analysis focused.
        system_prompt: System prompt; the built-in default asks for bare JSON.
    """

    def __init__(
        self,
        *,
        model: str = "claude-haiku-4-5-20251001",
        api_key: str | None = None,
        max_tokens: int = 4096,
        temperature: float = 0.3,
        system_prompt: str | None = None,
    ) -> None:
        self._model = model
        self._max_tokens = max_tokens
        self._temperature = temperature
        self._system_prompt = system_prompt or DEFAULT_SYSTEM_PROMPT
        resolved_key = api_key or os.environ.get(API_KEY_ENV)
        self._client: anthropic.AsyncAnthropic | None = None
        if is_usable_key(resolved_key):
            self._client = anthropic.AsyncAnthropic(api_key=resolved_key, max_retries=0)

    @property
    def configured(self) -> bool:
        return self._client is not None

    @property
    def model(self) -> str:
        return self._model

    async def generate(self, prompt: str) -> tuple[str, Usage]:
        if self._client is None:
            raise UnconfiguredError(f"{API_KEY_ENV} is not configured")

        try:
            response = await self._client.messages.create(
                model=self._model,
                max_tokens=self._max_tokens,
                temperature=self._temperature,
                system=self._system_prompt,
                messages=[{"role": "user", "content": prompt}],
            )
        except anthropic.AnthropicError as e:
            mapped = _map_api_error(e)
            logger.warning("Claude call failed (%s): %s", mapped.reason, e)
            raise mapped from e

        usage = Usage(
            api_calls=[
                APICallUsage(
                    model=self._model,
                    input_tokens=response.usage.input_tokens,
                    output_tokens=response.usage.output_tokens,
                    cache_creation_input_tokens=getattr(
                        response.usage, "cache_creation_input_tokens", 0
                    )
                    or 0,
                    cache_read_input_tokens=getattr(response.usage, "cache_read_input_tokens", 0)
                    or 0,
                ),
            ],
        )

        text = "".join(block.text for block in response.content if isinstance(block, TextBlock))
        if response.stop_reason == "max_tokens":
            logger.warning("Claude response hit max_tokens; output may be truncated")
        return (text, usage)
