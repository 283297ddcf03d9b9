"""
PipelineConfig model holding the settings of one automation run.
"""

from typing import Literal

from pydantic import BaseModel, Field, field_validator, model_validator

from csv_automation.utils.validation import (
    validate_delimiter,
    validate_directory_name,
    validate_directory_path,
    validate_encoding,
    validate_extension,
)


class PipelineConfig(BaseModel):
    """
    Settings validated once at startup and passed to every run.

    Attributes:
        input_dir: Directory scanned (non-recursively) for input files
        output_dir: Directory receiving category files and reports
        archive_dir_name: Subdirectory of input_dir that consumed files move to
        json_extension: Extension of structured record files
        csv_extension: Extension of delimited-text record files
        enable_cleaning: Drop records missing id, name or category
        remove_duplicates: Collapse records sharing an id (last one wins)
        auto_archive: Move consumed input files to the archive after output
        generate_report: Write a JSON run report after archiving
        delimiter: Field delimiter for category output files
        encoding: Text encoding for reading inputs and writing outputs
        retry_attempts: Declared retry budget (not acted on by the pipeline)
        process_interval_seconds: Pause between runs in watch mode
        log_level: Logger level name
        log_format: "json" or "text"
    """

    input_dir: str = "./data/input"
    output_dir: str = "./data/output"
    archive_dir_name: str = "archive"
    json_extension: str = ".json"
    csv_extension: str = ".csv"

    enable_cleaning: bool = True
    remove_duplicates: bool = True
    auto_archive: bool = True
    generate_report: bool = True

    delimiter: str = ","
    encoding: str = "utf-8"

    retry_attempts: int = Field(3, ge=0)
    process_interval_seconds: int = Field(60, gt=0)

    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"
    log_format: Literal["json", "text"] = "json"

    @field_validator("input_dir", "output_dir")
    @classmethod
    def check_directory(cls, v, info):
        return validate_directory_path(v, info.field_name)

    @field_validator("archive_dir_name")
    @classmethod
    def check_archive_dir_name(cls, v, info):
        return validate_directory_name(v, info.field_name)

    @field_validator("json_extension", "csv_extension")
    @classmethod
    def check_extension(cls, v, info):
        return validate_extension(v, info.field_name)

    @field_validator("delimiter")
    @classmethod
    def check_delimiter(cls, v):
        return validate_delimiter(v)

    @field_validator("encoding")
    @classmethod
    def check_encoding(cls, v):
        return validate_encoding(v)

    @field_validator("log_level", mode="before")
    @classmethod
    def normalize_log_level(cls, v):
        return v.upper() if isinstance(v, str) else v

    @model_validator(mode="after")
    def check_distinct_extensions(self):
        if self.json_extension == self.csv_extension:
            raise ValueError("json_extension and csv_extension must differ")
        return self

    @property
    def supported_extensions(self) -> tuple[str, str]:
        return (self.json_extension, self.csv_extension)
