"""Validation of parsed generator output into a ``ComparisonResult``."""

from typing import Any

from unbubble_compare.analysis.thresholds import (
    MAX_COMMON_THEMES,
    MAX_DATA_POINTS,
    MAX_DIFFERENCES,
    MAX_SHARED_FACTS,
)
from unbubble_compare.data import ComparisonResult
from unbubble_compare.errors import InvalidStructureError

# Wire field name -> cap, in ComparisonResult field order.
RESULT_FIELDS: dict[str, int] = {
    "sharedFacts": MAX_SHARED_FACTS,
    "commonThemes": MAX_COMMON_THEMES,
    "differences": MAX_DIFFERENCES,
    "dataPoints": MAX_DATA_POINTS,
}


def _strings(values: list[Any], cap: int) -> tuple[str, ...]:
    return tuple(v for v in values if isinstance(v, str))[:cap]


def normalize_result(parsed: Any) -> ComparisonResult:
    """Coerce a parsed payload into a capped ``ComparisonResult``.

    A payload that is not an object, or is missing any of the four fields, or
    carries a field that is not a list, is rejected as a whole; fields are
    never patched individually. Non-string elements are dropped.

    Raises:
        InvalidStructureError: The payload does not have the comparison shape.
    """
    if not isinstance(parsed, dict):
        raise InvalidStructureError(f"expected a JSON object, got {type(parsed).__name__}")

    missing = [name for name in RESULT_FIELDS if name not in parsed]
    if missing:
        raise InvalidStructureError(f"missing fields: {', '.join(missing)}")

    wrong_type = [name for name in RESULT_FIELDS if not isinstance(parsed[name], list)]
    if wrong_type:
        raise InvalidStructureError(f"fields are not arrays: {', '.join(wrong_type)}")

    shared, themes, differences, data_points = (
        _strings(parsed[name], cap) for name, cap in RESULT_FIELDS.items()
    )
    return ComparisonResult(
        shared_facts=shared,
        common_themes=themes,
        differences=differences,
        data_points=data_points,
    )
