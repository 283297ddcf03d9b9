"""
Unit tests for Pydantic data models.

Tests the core models for validation, defaults, and constraint enforcement.
"""

import re

import pytest
from pydantic import ValidationError

from csv_automation.core.models import (
    OutputFile,
    PipelineConfig,
    PipelineStage,
    Record,
    RunContext,
    RunReport,
    utc_now_iso,
)


ISO_MS_UTC = re.compile(r"^\d{4}-\d{2}-\d{2}T\d{2}:\d{2}:\d{2}\.\d{3}Z$")


@pytest.mark.unit
class TestRecord:
    """Tests for Record model"""

    def test_defaults(self):
        """Test timestamp is generated and processed defaults to False"""
        record = Record(id="1", name="Alice", category="Team")
        assert record.processed is False
        assert ISO_MS_UTC.match(record.timestamp)

    def test_empty_strings_allowed(self):
        """Test empty fields are representable; validation happens in the cleaner"""
        record = Record(id="", name="", category="")
        assert record.id == ""

    def test_record_is_immutable(self):
        """Test records cannot be mutated after construction"""
        record = Record(id="1", name="Alice", category="Team")
        with pytest.raises(ValidationError):
            record.name = "Bob"

    def test_utc_now_iso_format(self):
        assert ISO_MS_UTC.match(utc_now_iso())


@pytest.mark.unit
class TestPipelineConfig:
    """Tests for PipelineConfig model"""

    def test_defaults(self):
        config = PipelineConfig()
        assert config.input_dir == "./data/input"
        assert config.output_dir == "./data/output"
        assert config.archive_dir_name == "archive"
        assert config.supported_extensions == (".json", ".csv")
        assert config.remove_duplicates is True
        assert config.retry_attempts == 3

    def test_log_level_is_normalized(self):
        assert PipelineConfig(log_level="debug").log_level == "DEBUG"

    @pytest.mark.parametrize("field,value", [
        ("delimiter", ",,"),
        ("delimiter", '"'),
        ("encoding", "not-a-codec"),
        ("input_dir", "   "),
        ("output_dir", "/tmp/out*"),
        ("archive_dir_name", "../elsewhere"),
        ("json_extension", "json"),
        ("retry_attempts", -1),
        ("process_interval_seconds", 0),
        ("log_format", "xml"),
    ])
    def test_invalid_settings_rejected(self, field, value):
        with pytest.raises(ValidationError):
            PipelineConfig(**{field: value})

    def test_extensions_must_differ(self):
        with pytest.raises(ValidationError, match="must differ"):
            PipelineConfig(json_extension=".csv")

    def test_input_dir_is_stripped(self):
        assert PipelineConfig(input_dir="  ./in  ").input_dir == "./in"


@pytest.mark.unit
class TestRunContext:
    """Tests for RunContext model"""

    def test_fresh_contexts_are_isolated(self):
        """Test two contexts never share state"""
        first = RunContext()
        second = RunContext()
        first.output_files.append(OutputFile(category="Team", path="team.csv", record_count=2))
        first.processed_count += 2

        assert second.output_files == []
        assert second.processed_count == 0
        assert first.run_id != second.run_id

    def test_initial_stage(self):
        context = RunContext()
        assert context.stage == PipelineStage.INIT
        assert context.succeeded is False
        assert context.elapsed_seconds() >= 0


@pytest.mark.unit
class TestRunReport:
    """Tests for RunReport model"""

    def test_serializes_with_report_keys(self):
        report = RunReport(
            total_records_processed=2,
            output_directory="./data/output",
            run_id="abc",
            duration_seconds=0.5,
        )
        data = report.model_dump(by_alias=True)

        assert data["totalRecordsProcessed"] == 2
        assert data["outputDirectory"] == "./data/output"
        assert data["status"] == "SUCCESS"
        assert isinstance(data["executionTime"], int)
        assert ISO_MS_UTC.match(data["timestamp"])

    def test_accepts_aliases(self):
        report = RunReport(
            totalRecordsProcessed=1,
            outputDirectory="out",
            runId="abc",
            durationSeconds=0.1,
        )
        assert report.total_records_processed == 1

    def test_status_only_success(self):
        with pytest.raises(ValidationError):
            RunReport(
                total_records_processed=0,
                output_directory="out",
                run_id="abc",
                duration_seconds=0.0,
                status="FAILURE",
            )


@pytest.mark.unit
class TestOutputFile:
    """Tests for OutputFile model"""

    def test_negative_count_rejected(self):
        with pytest.raises(ValidationError):
            OutputFile(category="Team", path="team.csv", record_count=-1)
