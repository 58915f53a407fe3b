"""Unit tests for pre-flight CSV content validation."""

# pylint: disable=missing-class-docstring,missing-function-docstring

from creative_intake.csv_ingest import validation
from creative_intake.csv_ingest.schema import CSVErrorCode, ParsedTable
from creative_intake.csv_ingest.validation import looks_like_csv, validate_csv_content


class TestLooksLikeCsv:

    def test_comma_single_line(self):
        assert looks_like_csv("a,b") is True

    def test_no_comma_single_line(self):
        assert looks_like_csv("justonecellnocomma") is False

    def test_no_comma_multi_line(self):
        """Weak heuristic: any multi-line content passes."""
        assert looks_like_csv("platform\nMeta") is True


class TestValidateCsvContent:

    def test_empty_string(self):
        result = validate_csv_content("")
        assert result.valid is False
        assert result.code == CSVErrorCode.EMPTY_CONTENT
        assert result.error == "CSV content is empty"

    def test_whitespace_only(self):
        result = validate_csv_content("  \n\t ")
        assert result.valid is False
        assert result.code == CSVErrorCode.EMPTY_CONTENT

    def test_single_cell_not_csv(self):
        result = validate_csv_content("justonecellnocomma")
        assert result.valid is False
        assert result.code == CSVErrorCode.NOT_CSV_FORMAT

    def test_valid_content(self):
        result = validate_csv_content("platform,count\nMeta,5")
        assert result.valid is True
        assert result.error is None
        assert result.code is None

    def test_multi_line_without_commas_is_valid(self):
        assert validate_csv_content("platform\nMeta").valid is True

    def test_header_only(self):
        result = validate_csv_content("platform,count")
        assert result.valid is False
        assert result.code == CSVErrorCode.NO_DATA_ROWS
        assert result.error == "No data rows found in CSV"

    def test_header_only_with_trailing_blank_lines(self):
        result = validate_csv_content("platform,count\n\n\n")
        assert result.code == CSVErrorCode.NO_DATA_ROWS

    def test_bom_and_blank_line_is_empty(self):
        """A BOM counts as whitespace for the emptiness check."""
        result = validate_csv_content("\ufeff\n")
        assert result.valid is False
        assert result.code == CSVErrorCode.EMPTY_CONTENT
        assert result.error == "CSV content is empty"

    def test_no_headers(self, monkeypatch):
        monkeypatch.setattr(validation, "parse_csv", lambda _content: ParsedTable())
        result = validate_csv_content("a,b\n1,2")
        assert result.valid is False
        assert result.code == CSVErrorCode.NO_HEADERS

    def test_parse_exception_is_wrapped(self, monkeypatch):
        def explode(_content):
            raise ValueError("boom")

        monkeypatch.setattr(validation, "parse_csv", explode)
        result = validate_csv_content("a,b\n1,2")
        assert result.valid is False
        assert result.code == CSVErrorCode.PARSE_FAILURE
        assert result.error == "Failed to parse CSV: boom"
