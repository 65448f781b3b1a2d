"""Prompt building and output handling for remote comparisons."""

from unbubble_compare.response.normalize import RESULT_FIELDS, normalize_result
from unbubble_compare.response.prompt import build_comparison_prompt, build_topic_prompt
from unbubble_compare.response.repair import clean_response, parse_json_with_repair

__all__ = [
    "RESULT_FIELDS",
    "build_comparison_prompt",
    "build_topic_prompt",
    "clean_response",
    "normalize_result",
    "parse_json_with_repair",
]
