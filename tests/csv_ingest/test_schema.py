"""Unit tests for the CSV ingest Pydantic models."""

# pylint: disable=missing-class-docstring,missing-function-docstring

import pytest
from pydantic import ValidationError

from creative_intake.csv_ingest.schema import AssetRequestRecord, CSVErrorCode, IngestResult, ParsedTable


class TestParsedTable:

    def test_defaults(self):
        table = ParsedTable()
        assert table.headers == []
        assert table.rows == []
        assert table.raw_content == ""

    def test_frozen(self):
        table = ParsedTable(headers=["a"], rows=[["1"]])
        with pytest.raises(ValidationError):
            table.headers = ["b"]


class TestAssetRequestRecord:

    def test_from_mapping_splits_known_and_extra(self):
        record = AssetRequestRecord.from_mapping({"platform": "Meta", "creativeType": "Video", "Owner": "Dana"})
        assert record.platform == "Meta"
        assert record.creative_type == "Video"
        assert record.extra == {"Owner": "Dana"}

    def test_as_dict_only_set_fields(self):
        record = AssetRequestRecord.from_mapping({"size": "1x1"})
        assert record.as_dict() == {"size": "1x1"}

    def test_as_dict_keeps_explicit_none(self):
        record = AssetRequestRecord.from_mapping({"duration": None})
        assert record.as_dict() == {"duration": None}

    def test_populate_by_field_name(self):
        record = AssetRequestRecord(creative_type="Static")
        assert record.as_dict() == {"creativeType": "Static"}

    def test_duration_must_be_numeric(self):
        with pytest.raises(ValidationError):
            AssetRequestRecord.from_mapping({"duration": "fifteen"})


class TestIngestResult:

    def test_ok_requires_records(self):
        assert IngestResult().ok is False

    def test_ok_with_records(self):
        result = IngestResult(records=[AssetRequestRecord(platform="Meta")])
        assert result.ok is True

    def test_error_is_not_ok(self):
        result = IngestResult(error="No valid data found in CSV", code=CSVErrorCode.NO_VALID_DATA)
        assert result.ok is False
