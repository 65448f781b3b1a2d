"""Tests for result normalization."""

import pytest

from unbubble_compare.data import ComparisonResult, FallbackReason
from unbubble_compare.errors import InvalidStructureError
from unbubble_compare.response import normalize_result


def _payload(**overrides: object) -> dict[str, object]:
    payload: dict[str, object] = {
        "sharedFacts": ["a"],
        "commonThemes": ["b"],
        "differences": ["c"],
        "dataPoints": ["10%"],
    }
    payload.update(overrides)
    return payload


def test_valid_payload() -> None:
    assert normalize_result(_payload()) == ComparisonResult(
        shared_facts=("a",),
        common_themes=("b",),
        differences=("c",),
        data_points=("10%",),
    )


def test_non_strings_filtered() -> None:
    result = normalize_result(_payload(sharedFacts=["a", 1, None, {"x": 1}, "b"]))
    assert result.shared_facts == ("a", "b")


def test_caps() -> None:
    items = [str(i) for i in range(20)]
    result = normalize_result(
        _payload(sharedFacts=items, commonThemes=items, differences=items, dataPoints=items)
    )
    assert len(result.shared_facts) == 5
    assert len(result.common_themes) == 4
    assert len(result.differences) == 3
    assert len(result.data_points) == 10


def test_extra_fields_ignored() -> None:
    assert normalize_result(_payload(summary="extra")).shared_facts == ("a",)


def test_missing_field() -> None:
    payload = _payload()
    del payload["dataPoints"]
    with pytest.raises(InvalidStructureError, match="dataPoints") as exc_info:
        normalize_result(payload)
    assert exc_info.value.reason is FallbackReason.INVALID_STRUCTURE


def test_field_not_a_list() -> None:
    with pytest.raises(InvalidStructureError, match="differences"):
        normalize_result(_payload(differences="one difference"))


@pytest.mark.parametrize("parsed", [[], "text", 3, None])
def test_not_an_object(parsed: object) -> None:
    with pytest.raises(InvalidStructureError):
        normalize_result(parsed)
