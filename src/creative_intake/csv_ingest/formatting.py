"""Plain-text rendering of parsed tables and record previews.

Both outputs are diagnostic: they feed logs and the CLI, and nothing
downstream parses them.
"""

from creative_intake.csv_ingest.schema import AssetRequestRecord, ParsedTable

# ─── Fixed-Width Table ───────────────────────────────────────────────────────


def _column_widths(table: ParsedTable) -> list[int]:
    """Width of each column: the longer of its header and its longest cell."""
    widths: list[int] = []
    for index, header in enumerate(table.headers):
        longest_cell = max((len(row[index]) if index < len(row) else 0 for row in table.rows), default=0)
        widths.append(max(len(header), longest_cell))
    return widths


def _pad_row(cells: list[str], widths: list[int]) -> str:
    """Right-pad cells to their column widths; cells past the last column stay unpadded."""
    padded = [cell.ljust(widths[i]) if i < len(widths) else cell for i, cell in enumerate(cells)]
    return " | ".join(padded)


def format_csv_as_table(table: ParsedTable) -> str:
    """Render a parsed table as a fixed-width text table with a separator under the headers."""
    if not table.headers:
        return ""

    widths = _column_widths(table)
    lines = [_pad_row(table.headers, widths)]
    lines.append("-+-".join("-" * width for width in widths))
    for row in table.rows:
        lines.append(_pad_row(row, widths))

    return "\n".join(lines) + "\n"


# ─── Record Preview ──────────────────────────────────────────────────────────


def _describe_record(record: AssetRequestRecord) -> str:
    """One-line summary of the fields shown in the upload preview."""
    parts = [value for value in (record.platform, record.creative_type, record.size) if value]
    if record.count:
        parts.append(f"{record.count}x")
    return " · ".join(parts)


def describe_records(records: list[AssetRequestRecord], limit: int = 5) -> str:
    """Summarise loaded records: a count line, up to ``limit`` record lines, then a remainder note."""
    noun = "asset request" if len(records) == 1 else "asset requests"
    lines = [f"{len(records)} {noun} loaded"]
    lines.extend(_describe_record(record) for record in records[:limit])
    if len(records) > limit:
        lines.append(f"... and {len(records) - limit} more")
    return "\n".join(lines)
