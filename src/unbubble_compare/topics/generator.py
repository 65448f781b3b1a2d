"""Topic generation through the remote generator."""

import asyncio
import logging

from pydantic import ValidationError

from unbubble_compare.data import Topic, TopicPayload
from unbubble_compare.errors import InvalidStructureError, RemoteAnalysisError, classify_exception
from unbubble_compare.generator.base import TextGenerator
from unbubble_compare.response import build_topic_prompt, parse_json_with_repair
from unbubble_compare.topics.mock import mock_topic

logger = logging.getLogger(__name__)


def parse_topic(text: str) -> Topic:
    """Parse generator output into a ``Topic``.

    Raises:
        ParseError: The output is not JSON even after repair.
        InvalidStructureError: The JSON does not describe a topic.
    """
    parsed = parse_json_with_repair(text)
    try:
        return TopicPayload.model_validate(parsed).to_topic()
    except ValidationError as e:
        raise InvalidStructureError(f"invalid topic: {e.error_count()} validation errors") from e


class TopicGenerator:
    """Generate a multi-perspective topic map for a query.

    Never fails: when the generator is unconfigured or any step goes wrong,
    the deterministic mock topic for the query is returned instead.

    Args:
        generator: Remote text generator.
        timeout_seconds: Wall-clock budget for the generator call.
    """

    def __init__(self, generator: TextGenerator, *, timeout_seconds: float = 55.0) -> None:
        self._generator = generator
        self._timeout = timeout_seconds

    async def generate(self, query: str) -> Topic:
        """Topic for ``query`` (already trimmed and non-empty)."""
        if not self._generator.configured:
            logger.warning("Topic generator not configured; returning mock topic")
            return mock_topic(query)

        try:
            async with asyncio.timeout(self._timeout):
                text, _usage = await self._generator.generate(build_topic_prompt(query))
            return parse_topic(text)
        except RemoteAnalysisError as e:
            logger.warning(f"Topic generation failed ({e.reason}); returning mock topic: {e}")
        except Exception as e:
            error = classify_exception(e)
            logger.warning(f"Topic generation failed ({error.reason}); returning mock topic: {e}")
        return mock_topic(query)
