"""Upload flow for bulk asset-request CSVs.

Runs the same steps as the CSV upload field: check the file type and size,
read the text, validate it, parse it into records, and reject uploads that
yield no records.  Every failure comes back as an IngestResult carrying a
user-facing message instead of an exception.
"""

import logging
from pathlib import Path

from creative_intake.config import CSV_ACCEPTED_TYPES, MAX_UPLOAD_MB
from creative_intake.csv_ingest.mapping import parse_asset_request_csv
from creative_intake.csv_ingest.schema import CSVErrorCode, IngestResult
from creative_intake.csv_ingest.validation import ERROR_MESSAGES, validate_csv_content
from creative_intake.files.file_utils import format_file_size, guess_mime_type, validate_file_size, validate_file_type

logger = logging.getLogger(__name__)


def _failed(code: CSVErrorCode, detail: str | None = None) -> IngestResult:
    """Build a failed IngestResult, appending detail to the standard message for code."""
    error = ERROR_MESSAGES[code]
    if detail:
        error = f"{error}: {detail}"
    logger.warning("CSV ingest failed (%s): %s", code.value, error)
    return IngestResult(error=error, code=code)


def read_csv_text(path: Path) -> str:
    """Read a CSV file as UTF-8 without newline translation, so a lone "\\r" stays in the text."""
    return path.read_bytes().decode("utf-8")


def ingest_csv_text(content: str) -> IngestResult:
    """Validate and parse CSV text that has already been read into memory."""
    validation = validate_csv_content(content)
    if not validation.valid:
        return IngestResult(error=validation.error or "Invalid CSV format", code=validation.code)

    try:
        records = parse_asset_request_csv(content)
    except Exception as exc:  # pylint: disable=broad-exception-caught
        return _failed(CSVErrorCode.PROCESSING_FAILURE, str(exc))

    if not records:
        return _failed(CSVErrorCode.NO_VALID_DATA)

    logger.info("Loaded %d asset requests from CSV", len(records))
    return IngestResult(records=records)


def ingest_csv_file(path: Path | str, max_size_mb: float = MAX_UPLOAD_MB) -> IngestResult:
    """Run the full upload flow on a CSV file on disk.

    Raises FileNotFoundError if path does not exist; every other problem is
    reported through the returned IngestResult.
    """
    path = Path(path)
    size_bytes = path.stat().st_size
    logger.info("Ingesting %s (%s)", path.name, format_file_size(size_bytes))

    if not validate_file_type(path.name, guess_mime_type(path.name), CSV_ACCEPTED_TYPES):
        return _failed(CSVErrorCode.NOT_CSV_FILE)

    if not validate_file_size(size_bytes, max_size_mb):
        return _failed(CSVErrorCode.FILE_TOO_LARGE, f"{format_file_size(size_bytes)} > {max_size_mb:g} MB")

    try:
        content = read_csv_text(path)
    except (OSError, UnicodeDecodeError) as exc:
        return _failed(CSVErrorCode.READ_FAILURE, str(exc))

    return ingest_csv_text(content)
