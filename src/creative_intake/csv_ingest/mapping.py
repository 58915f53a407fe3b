"""Map parsed CSV rows onto AssetRequestRecord objects.

Numeric fields take the first run of digits in the cell.  A duration with no
digits becomes None while a count with no digits becomes 0; callers rely on
that difference.
"""

import logging
from typing import Any

from creative_intake.csv_ingest.classifiers import build_header_map
from creative_intake.csv_ingest.patterns import DIGIT_RUN_RE, WHITESPACE
from creative_intake.csv_ingest.schema import AssetRequestRecord, ParsedTable
from creative_intake.csv_ingest.tokenizer import parse_csv

logger = logging.getLogger(__name__)


def extract_int(text: str) -> int | None:
    """Return the first run of ASCII digits in text as an int, or None.

    Runs too long for int() (the interpreter's digit limit) count as no number.
    """
    match = DIGIT_RUN_RE.search(text)
    if not match:
        return None
    try:
        return int(match.group(1))
    except ValueError:
        logger.warning("Ignoring %d-digit number in cell", len(match.group(1)))
        return None


def convert_cell(field: str, cell: str) -> Any:
    """Apply the per-field value transformation to one cell."""
    value = cell.strip(WHITESPACE)
    if field == "duration":
        return extract_int(value)
    if field == "count":
        number = extract_int(value)
        return number if number is not None else 0
    return value


def map_row(row: list[str], header_map: dict[int, str]) -> AssetRequestRecord:
    """Build one record from a row.

    Cells beyond the header count, and cells under an empty header, are ignored.
    """
    values: dict[str, Any] = {}
    for index, cell in enumerate(row):
        field = header_map.get(index)
        if not field:
            continue
        values[field] = convert_cell(field, cell)
    return AssetRequestRecord.from_mapping(values)


def map_table(table: ParsedTable) -> list[AssetRequestRecord]:
    """Convert every data row of a parsed table into a record, in source order."""
    if not table.headers or not table.rows:
        return []
    header_map = build_header_map(table.headers)
    logger.debug("Header map: %s", header_map)
    return [map_row(row, header_map) for row in table.rows]


def parse_asset_request_csv(content: str) -> list[AssetRequestRecord]:
    """Parse CSV text straight into asset-request records."""
    records = map_table(parse_csv(content))
    logger.info("Parsed %d asset request records", len(records))
    return records
