"""Pydantic models for parsed CSV tables and asset-request records.

ParsedTable is the raw tokenisation result; AssetRequestRecord is the semantic
record handed to the bulk-creation form.  Known fields get typed treatment and
unrecognised columns pass through as strings in ``extra``.
"""

from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

# Canonical record keys, in classification order
SEMANTIC_FIELDS = ("platform", "creativeType", "size", "duration", "count", "notes")


class CSVErrorCode(str, Enum):
    """Failure categories reported by validation and the ingest pipeline."""

    EMPTY_CONTENT = "empty_content"
    NOT_CSV_FORMAT = "not_csv_format"
    NO_HEADERS = "no_headers"
    NO_DATA_ROWS = "no_data_rows"
    PARSE_FAILURE = "parse_failure"
    NO_VALID_DATA = "no_valid_data"
    NOT_CSV_FILE = "not_csv_file"
    FILE_TOO_LARGE = "file_too_large"
    READ_FAILURE = "read_failure"
    PROCESSING_FAILURE = "processing_failure"


class ParsedTable(BaseModel):
    """Tokenised CSV document.

    Row widths are not checked against ``headers``; short and long rows are
    kept exactly as tokenised.
    """

    model_config = ConfigDict(frozen=True)

    headers: list[str] = Field(default_factory=list)
    rows: list[list[str]] = Field(default_factory=list)
    raw_content: str = ""


class AssetRequestRecord(BaseModel):
    """One asset request built from a single CSV data row.

    Only fields the row actually supplied are marked as set, so ``as_dict``
    distinguishes a missing cell (key absent) from an empty one.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    platform: str | None = None
    creative_type: str | None = Field(default=None, alias="creativeType")
    size: str | None = None
    duration: int | None = None
    count: int | None = None
    notes: str | None = None
    extra: dict[str, str] = Field(default_factory=dict)

    @classmethod
    def from_mapping(cls, values: dict[str, Any]) -> "AssetRequestRecord":
        """Split a flat key/value mapping into semantic fields and passthrough columns."""
        known = {key: value for key, value in values.items() if key in SEMANTIC_FIELDS}
        extra = {key: value for key, value in values.items() if key not in SEMANTIC_FIELDS}
        return cls(**known, extra=extra)

    def as_dict(self) -> dict[str, Any]:
        """Return the flat mapping view: set semantic fields plus passthrough columns."""
        data = self.model_dump(by_alias=True, exclude_unset=True, exclude={"extra"})
        data.update(self.extra)
        return data


class ValidationResult(BaseModel):
    """Outcome of the pre-flight content check."""

    valid: bool
    error: str | None = None
    code: CSVErrorCode | None = None


class IngestResult(BaseModel):
    """Outcome of the full upload flow (file checks, validation, parsing)."""

    records: list[AssetRequestRecord] = Field(default_factory=list)
    error: str | None = None
    code: CSVErrorCode | None = None

    @property
    def ok(self) -> bool:
        """True when records were produced without an error."""
        return self.error is None and len(self.records) > 0
