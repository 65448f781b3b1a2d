"""Remote text generation."""

from unbubble_compare.generator.base import TextGenerator
from unbubble_compare.generator.claude import ClaudeGenerator, is_usable_key
from unbubble_compare.generator.noop import NoOpGenerator

__all__ = [
    "ClaudeGenerator",
    "NoOpGenerator",
    "TextGenerator",
    "is_usable_key",
]
