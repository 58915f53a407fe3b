"""Pre-flight checks run on uploaded CSV text before parsing.

validate_csv_content is the only place in the ingest path that turns
failures into a user-facing message; the parser itself never raises.
"""

import logging

from creative_intake.csv_ingest.patterns import DELIMITER, LINE_SPLIT_RE, WHITESPACE
from creative_intake.csv_ingest.schema import CSVErrorCode, ValidationResult
from creative_intake.csv_ingest.tokenizer import parse_csv

logger = logging.getLogger(__name__)

ERROR_MESSAGES = {
    CSVErrorCode.EMPTY_CONTENT: "CSV content is empty",
    CSVErrorCode.NOT_CSV_FORMAT: "Content does not appear to be CSV format",
    CSVErrorCode.NO_HEADERS: "No headers found in CSV",
    CSVErrorCode.NO_DATA_ROWS: "No data rows found in CSV",
    CSVErrorCode.PARSE_FAILURE: "Failed to parse CSV",
    CSVErrorCode.NO_VALID_DATA: "No valid data found in CSV",
    CSVErrorCode.NOT_CSV_FILE: "Please upload a CSV file",
    CSVErrorCode.FILE_TOO_LARGE: "File exceeds the maximum upload size",
    CSVErrorCode.READ_FAILURE: "Failed to read file",
    CSVErrorCode.PROCESSING_FAILURE: "Failed to process file",
}


def failure(code: CSVErrorCode, detail: str | None = None) -> ValidationResult:
    """Build an invalid result, optionally appending detail to the standard message."""
    message = ERROR_MESSAGES[code]
    if detail:
        message = f"{message}: {detail}"
    logger.warning("CSV rejected (%s): %s", code.value, message)
    return ValidationResult(valid=False, error=message, code=code)


def looks_like_csv(content: str) -> bool:
    """Weak format check: a single line with no comma is not CSV; anything else passes."""
    return DELIMITER in content or len(LINE_SPLIT_RE.split(content)) > 1


def validate_csv_content(content: str) -> ValidationResult:
    """Check that content is non-empty, CSV-like, and has a header plus at least one data row."""
    if not content or not content.strip(WHITESPACE):
        return failure(CSVErrorCode.EMPTY_CONTENT)

    if not looks_like_csv(content):
        return failure(CSVErrorCode.NOT_CSV_FORMAT)

    try:
        parsed = parse_csv(content)
    except Exception as exc:  # pylint: disable=broad-exception-caught
        return failure(CSVErrorCode.PARSE_FAILURE, str(exc))

    if not parsed.headers:
        return failure(CSVErrorCode.NO_HEADERS)
    if not parsed.rows:
        return failure(CSVErrorCode.NO_DATA_ROWS)

    logger.debug("CSV content valid: %d columns, %d rows", len(parsed.headers), len(parsed.rows))
    return ValidationResult(valid=True)
