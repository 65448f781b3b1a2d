"""Pattern-based extraction of numeric data points."""

import re

from unbubble_compare.analysis.thresholds import MAX_DATA_POINTS

# Applied in this order; a token may be matched by more than one pattern.
DATA_POINT_PATTERNS: tuple[re.Pattern[str], ...] = (
    # Currency with optional unit suffix: $25B, $2.6T, $150,000
    re.compile(r"\$\d+(?:,\d{3})*(?:\.\d+)?(?:[BMKT]\b)?"),
    # Percentages: 10%, 13.5%
    re.compile(r"\d+(?:\.\d+)?%"),
    # Comma-grouped integers (4+ digits) not followed by a percent sign: 150,000
    re.compile(r"\b\d{1,3}(?:,\d{3})+(?!\d|%|,\d)"),
    # Bare decimals, optionally a percentage: 2.5, 2.5%
    re.compile(r"\b\d+\.\d+%?"),
)


def extract_data_points(text: str, limit: int | None = MAX_DATA_POINTS) -> list[str]:
    """Extract currency, percentage and large-number tokens from text.

    Tokens are deduplicated by exact string and keep first-seen order
    (pattern priority first, then position in the text).

    Args:
        text: Free text to scan.
        limit: Maximum tokens to return; None for no cap.

    Returns:
        Ordered, deduplicated list of tokens.
    """
    seen: dict[str, None] = {}
    for pattern in DATA_POINT_PATTERNS:
        for match in pattern.finditer(text):
            seen.setdefault(match.group(0), None)
    tokens = list(seen)
    return tokens if limit is None else tokens[:limit]
