"""Topic generation with a deterministic fallback."""

from unbubble_compare.topics.generator import TopicGenerator, parse_topic
from unbubble_compare.topics.mock import mock_topic, slugify

__all__ = ["TopicGenerator", "mock_topic", "parse_topic", "slugify"]
