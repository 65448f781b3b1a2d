"""Tests for generator output parsing and repair."""

import pytest

from unbubble_compare.data import FallbackReason
from unbubble_compare.errors import ParseError
from unbubble_compare.response import clean_response, parse_json_with_repair
from unbubble_compare.response.repair import extract_object, repair_truncated


class TestCleanResponse:
    """Tests for fence and whitespace stripping."""

    def test_json_fence(self) -> None:
        assert clean_response('```json\n{"a": 1}\n```') == '{"a": 1}'

    def test_bare_fence(self) -> None:
        assert clean_response('```\n{"a": 1}\n```') == '{"a": 1}'

    def test_whitespace(self) -> None:
        assert clean_response('  \n{"a": 1}\n ') == '{"a": 1}'


def test_extract_object() -> None:
    assert extract_object('Sure! {"a": {"b": 2}} Hope that helps') == '{"a": {"b": 2}}'
    assert extract_object("no braces") is None


class TestParseJsonWithRepair:
    """Tests for the repair ladder."""

    def test_valid_json(self) -> None:
        assert parse_json_with_repair('{"sharedFacts": []}') == {"sharedFacts": []}

    def test_fenced(self) -> None:
        assert parse_json_with_repair('```json\n{"a": 1}\n```') == {"a": 1}

    def test_surrounding_prose(self) -> None:
        assert parse_json_with_repair('Here you go: {"a": [1, 2]} thanks') == {"a": [1, 2]}

    def test_trailing_commas(self) -> None:
        assert parse_json_with_repair('{"a": [1, 2,],}') == {"a": [1, 2]}

    def test_unterminated_string(self) -> None:
        text = '{"sharedFacts": ["Both agree", "Second'
        assert parse_json_with_repair(text) == {"sharedFacts": ["Both agree", "Second"]}

    def test_dangling_key(self) -> None:
        assert parse_json_with_repair('{"a": [1, 2], "b": ') == {"a": [1, 2]}

    def test_half_written_key(self) -> None:
        assert parse_json_with_repair('{"a": 1, "b') == {"a": 1}

    def test_missing_closing_braces(self) -> None:
        text = '{"sharedFacts": ["x"], "commonThemes": ["y"]'
        assert parse_json_with_repair(text) == {"sharedFacts": ["x"], "commonThemes": ["y"]}

    def test_braces_inside_strings_ignored(self) -> None:
        text = '{"a": "curly { and [ inside", "b": ["ok"'
        assert parse_json_with_repair(text) == {"a": "curly { and [ inside", "b": ["ok"]}

    def test_garbage_raises_parse_error(self) -> None:
        with pytest.raises(ParseError) as exc_info:
            parse_json_with_repair("not json at all")
        assert exc_info.value.reason is FallbackReason.PARSE_ERROR

    def test_empty_raises_parse_error(self) -> None:
        with pytest.raises(ParseError):
            parse_json_with_repair("   ")

    def test_non_text_raises_parse_error(self) -> None:
        with pytest.raises(ParseError):
            parse_json_with_repair(None)  # type: ignore[arg-type]

    def test_array_without_object_raises(self) -> None:
        with pytest.raises(ParseError):
            parse_json_with_repair("[1, 2")

    def test_error_reports_structure(self) -> None:
        with pytest.raises(ParseError, match=r"\{1/0\}"):
            parse_json_with_repair('{"a": tru')


def test_repair_truncated_without_object() -> None:
    assert repair_truncated("plain text") == []
