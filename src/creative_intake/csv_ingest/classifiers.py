"""Header classification for asset-request CSVs.

HEADER_RULES is evaluated top to bottom and the first matching rule wins, so
order matters: "Creative Type" must be claimed before the size or count rules
get a chance to look at it.
"""

from typing import Callable

from creative_intake.csv_ingest.patterns import (
    COUNT_KEYWORDS,
    CREATIVE_TYPE_KEYWORDS,
    DURATION_KEYWORDS,
    NOTES_KEYWORDS,
    PLATFORM_KEYWORDS,
    SIZE_KEYWORDS,
    WHITESPACE,
)


def _contains_any(keywords: tuple[str, ...]) -> Callable[[str], bool]:
    """Build a predicate matching when any keyword is a substring of the header."""
    return lambda header: any(keyword in header for keyword in keywords)


def _contains_all(keywords: tuple[str, ...]) -> Callable[[str], bool]:
    """Build a predicate matching when every keyword is a substring of the header."""
    return lambda header: all(keyword in header for keyword in keywords)


# (predicate on the normalised header, semantic field name)
HEADER_RULES: list[tuple[Callable[[str], bool], str]] = [
    (_contains_any(PLATFORM_KEYWORDS), "platform"),
    (_contains_all(CREATIVE_TYPE_KEYWORDS), "creativeType"),
    (_contains_any(SIZE_KEYWORDS), "size"),
    (_contains_any(DURATION_KEYWORDS), "duration"),
    (_contains_any(COUNT_KEYWORDS), "count"),
    (_contains_any(NOTES_KEYWORDS), "notes"),
]


def normalize_header(header: str) -> str:
    """Lower-case and trim a header for keyword matching."""
    return header.lower().strip(WHITESPACE)


def classify_header(header: str) -> str:
    """Return the semantic field for a header, or the original header text if none match."""
    normalized = normalize_header(header)
    for predicate, field in HEADER_RULES:
        if predicate(normalized):
            return field
    return header


def build_header_map(headers: list[str]) -> dict[int, str]:
    """Map each column index to its record key."""
    return {index: classify_header(header) for index, header in enumerate(headers)}
