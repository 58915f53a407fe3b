"""Quoted-field CSV tokenizer and table parser.

parse_csv_line handles one physical line; parse_csv splits a document into
lines and tokenises each.  Neither function raises: unbalanced quotes and
ragged rows pass through as-is.

Blank lines are dropped before tokenising, so a quoted value spanning several
lines loses any empty line inside it.
"""

import logging

from creative_intake.csv_ingest.patterns import BOM, DELIMITER, LINE_SPLIT_RE, QUOTE, WHITESPACE
from creative_intake.csv_ingest.schema import ParsedTable

logger = logging.getLogger(__name__)


def parse_csv_line(line: str) -> list[str]:
    """Split a single CSV line into trimmed fields, honouring quotes and "" escapes."""
    fields: list[str] = []
    current: list[str] = []
    in_quotes = False

    i = 0
    while i < len(line):
        char = line[i]
        next_char = line[i + 1] if i + 1 < len(line) else None

        if char == QUOTE:
            if in_quotes and next_char == QUOTE:
                # Escaped quote inside a quoted field
                current.append(QUOTE)
                i += 1
            else:
                in_quotes = not in_quotes
        elif char == DELIMITER and not in_quotes:
            fields.append("".join(current).strip(WHITESPACE))
            current = []
        else:
            current.append(char)
        i += 1

    # Last field is always emitted, even when empty
    fields.append("".join(current).strip(WHITESPACE))
    return fields


def parse_csv(content: str) -> ParsedTable:
    """Parse CSV text into headers (first non-empty line) and data rows."""
    clean = content[1:] if content.startswith(BOM) else content

    lines = [line.strip(WHITESPACE) for line in LINE_SPLIT_RE.split(clean)]
    lines = [line for line in lines if line]

    if not lines:
        logger.debug("No non-empty lines in CSV content (%d chars)", len(content))
        return ParsedTable(headers=[], rows=[], raw_content=content)

    headers = parse_csv_line(lines[0])
    rows = [parse_csv_line(line) for line in lines[1:]]
    logger.debug("Parsed CSV: %d headers, %d rows", len(headers), len(rows))

    return ParsedTable(headers=headers, rows=rows, raw_content=content)
