"""
RunReport model written as JSON at the end of a successful run.
"""

import time
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

from .record import utc_now_iso


class RunReport(BaseModel):
    """
    Summary of one successful run.

    Serialized with camelCase keys (``model_dump(by_alias=True)``).

    Note: ``execution_time_epoch_ms`` (``executionTime`` on disk) is the
    instant the report was built, in epoch milliseconds. It is a point in
    time, not a duration; the measured run length is ``duration_seconds``.

    Attributes:
        timestamp: When the report was built (ISO-8601)
        total_records_processed: Records written across all category files
        output_directory: Where category files were written
        status: Always "SUCCESS"; failed runs never reach the report stage
        execution_time_epoch_ms: Report build instant in epoch milliseconds
        run_id: Identifier of the run
        duration_seconds: Elapsed wall time from run start to report
        records_read: Records parsed from input files
        duplicates_removed: Records collapsed by deduplication
        invalid_removed: Records dropped by validation
        categories: Category names in first-seen order
        output_files: Paths of the category files
        archived_files: Names of input files moved to the archive
    """

    model_config = ConfigDict(
        populate_by_name=True,
        json_schema_extra={
            "example": {
                "timestamp": "2026-10-19T08:15:31.004Z",
                "totalRecordsProcessed": 2,
                "outputDirectory": "./data/output",
                "status": "SUCCESS",
                "executionTime": 1792397731004,
                "runId": "5f0c0d3b9a1e4f7c8b2d6e1a3c9f0b7d",
                "durationSeconds": 0.042,
                "recordsRead": 3,
                "duplicatesRemoved": 1,
                "invalidRemoved": 0,
                "categories": ["Team"],
                "outputFiles": ["./data/output/team_1792397730962.csv"],
                "archivedFiles": ["team.json"],
            }
        },
    )

    timestamp: str = Field(default_factory=utc_now_iso)
    total_records_processed: int = Field(..., ge=0, alias="totalRecordsProcessed")
    output_directory: str = Field(..., alias="outputDirectory")
    status: Literal["SUCCESS"] = "SUCCESS"
    execution_time_epoch_ms: int = Field(
        default_factory=lambda: time.time_ns() // 1_000_000,
        alias="executionTime",
    )

    run_id: str = Field(..., alias="runId")
    duration_seconds: float = Field(..., ge=0.0, alias="durationSeconds")
    records_read: int = Field(0, ge=0, alias="recordsRead")
    duplicates_removed: int = Field(0, ge=0, alias="duplicatesRemoved")
    invalid_removed: int = Field(0, ge=0, alias="invalidRemoved")
    categories: list[str] = Field(default_factory=list)
    output_files: list[str] = Field(default_factory=list, alias="outputFiles")
    archived_files: list[str] = Field(default_factory=list, alias="archivedFiles")
