"""Parsing of generator output, with repair for fenced or truncated JSON.

Generators sometimes wrap JSON in markdown fences, prepend commentary, or
stop mid-object when they hit an output limit. ``parse_json_with_repair``
walks through progressively more aggressive recovery attempts and raises
``ParseError`` when none produces valid JSON. It never raises anything else.
"""

import json
import logging
import re
from typing import Any

from unbubble_compare.errors import ParseError

logger = logging.getLogger(__name__)

_FENCE_OPEN = re.compile(r"^```(?:json)?\s*", re.IGNORECASE)
_FENCE_CLOSE = re.compile(r"\s*```$")
_OBJECT_SPAN = re.compile(r"\{[\s\S]*\}")
_TRAILING_COMMA = re.compile(r",\s*([}\]])")
_DANGLING_SEPARATOR = re.compile(r"[,:]\s*$")


def clean_response(text: str) -> str:
    """Strip surrounding whitespace and markdown code fences."""
    cleaned = text.strip()
    cleaned = _FENCE_OPEN.sub("", cleaned)
    cleaned = _FENCE_CLOSE.sub("", cleaned)
    return cleaned.strip()


def extract_object(text: str) -> str | None:
    """The largest ``{...}`` span in ``text``, from the first ``{`` to the last ``}``."""
    match = _OBJECT_SPAN.search(text)
    return match.group(0) if match else None


def _scan(text: str) -> tuple[list[str], bool, bool, int | None, list[str]]:
    """Walk ``text`` tracking JSON nesting outside of strings.

    Returns:
        Tuple of (closers still open, inside a string at the end, ends on an
        escape, index of the last comma outside a string, closers open at
        that comma).
    """
    closers: list[str] = []
    in_string = False
    escaped = False
    last_comma: int | None = None
    closers_at_comma: list[str] = []

    for i, ch in enumerate(text):
        if in_string:
            if escaped:
                escaped = False
            elif ch == "\\":
                escaped = True
            elif ch == '"':
                in_string = False
            continue
        if ch == '"':
            in_string = True
        elif ch == "{":
            closers.append("}")
        elif ch == "[":
            closers.append("]")
        elif ch in "}]":
            if closers and closers[-1] == ch:
                closers.pop()
        elif ch == ",":
            last_comma = i
            closers_at_comma = list(closers)

    return closers, in_string, escaped, last_comma, closers_at_comma


def _close(text: str, closers: list[str]) -> str:
    text = _DANGLING_SEPARATOR.sub("", text.rstrip())
    return text + "".join(reversed(closers))


def repair_truncated(text: str) -> list[str]:
    """Candidate completions of JSON that was cut off mid-stream.

    The first candidate closes an open string and every open bracket. The
    second drops everything after the last comma outside a string, which
    discards a half-written key or value, then closes what was open there.
    """
    start = text.find("{")
    if start == -1:
        return []
    body = text[start:]

    closers, in_string, escaped, last_comma, closers_at_comma = _scan(body)
    candidates: list[str] = []

    head = body
    if in_string:
        if escaped:
            head = head[:-1]
        head += '"'
    candidates.append(_close(head, closers))

    if last_comma is not None:
        candidates.append(_close(body[:last_comma], closers_at_comma))

    return [_TRAILING_COMMA.sub(r"\1", c) for c in candidates]


def _try_load(text: str) -> tuple[bool, Any]:
    try:
        return True, json.loads(text)
    except (json.JSONDecodeError, RecursionError):
        return False, None


def _structure_counts(text: str) -> str:
    return (
        f"{{{text.count('{')}/{text.count('}')}}}, "
        f"[{text.count('[')}/{text.count(']')}]"
    )


def parse_json_with_repair(text: str) -> Any:
    """Parse generator output into a JSON value, repairing it if needed.

    Attempts, in order: the fence-stripped text as-is, the largest brace-
    delimited span, trailing-comma removal, and truncation repair.

    Args:
        text: Raw generator output.

    Returns:
        The parsed JSON value.

    Raises:
        ParseError: No attempt produced valid JSON.
    """
    if not isinstance(text, str):
        raise ParseError(f"expected text, got {type(text).__name__}")

    cleaned = clean_response(text)
    if not cleaned:
        raise ParseError("empty response")

    candidates = [cleaned]
    span = extract_object(cleaned)
    if span is not None and span != cleaned:
        candidates.append(span)
    candidates.extend(_TRAILING_COMMA.sub(r"\1", c) for c in list(candidates))
    candidates.extend(repair_truncated(cleaned))

    tried: set[str] = set()
    for candidate in candidates:
        if candidate in tried:
            continue
        tried.add(candidate)
        ok, value = _try_load(candidate)
        if ok:
            if candidate is not cleaned:
                logger.info("Parsed generator output after repair")
            return value

    logger.warning(
        "Could not parse generator output after repair. Structure: %s. Start: %r",
        _structure_counts(cleaned),
        cleaned[:500],
    )
    raise ParseError(f"unparseable response (structure {_structure_counts(cleaned)})")
