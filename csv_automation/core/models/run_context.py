"""
RunContext model carrying the state of a single pipeline run.
"""

import time
import uuid
from datetime import datetime, timezone
from enum import Enum

from pydantic import BaseModel, Field

from .output_file import OutputFile


class PipelineStage(str, Enum):
    """Stages of a run, in execution order, plus the FAILED terminal state."""

    INIT = "init"
    READ = "read"
    CLEAN = "clean"
    ORGANIZE = "organize"
    GENERATE = "generate"
    ARCHIVE = "archive"
    REPORT = "report"
    DONE = "done"
    FAILED = "failed"


def _epoch_ms() -> int:
    return time.time_ns() // 1_000_000


class RunContext(BaseModel):
    """
    Everything one run produces, threaded through the stages.

    A fresh context is created for every run so independent runs never
    share counters.

    Attributes:
        run_id: Unique run identifier (for logs)
        run_token: Epoch milliseconds at run start, used as the output file suffix
        started_at: When the run started
        stage: Current stage
        failed_stage: Stage that raised, when stage is FAILED
        error: Error message, when stage is FAILED
        input_files: Input files discovered by the READ stage
        records_read: Records parsed from input files
        duplicates_removed: Records collapsed by deduplication
        invalid_removed: Records dropped by validation
        categories: Category names in first-seen order
        output_files: Category files written
        archived_files: Names of input files moved to the archive
        processed_count: Total records written across all category files
        report_path: Path of the run report, if written
    """

    run_id: str = Field(default_factory=lambda: uuid.uuid4().hex)
    run_token: int = Field(default_factory=_epoch_ms)
    started_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
    stage: PipelineStage = PipelineStage.INIT
    failed_stage: PipelineStage | None = None
    error: str | None = None

    input_files: list[str] = Field(default_factory=list)
    records_read: int = 0
    duplicates_removed: int = 0
    invalid_removed: int = 0
    categories: list[str] = Field(default_factory=list)
    output_files: list[OutputFile] = Field(default_factory=list)
    archived_files: list[str] = Field(default_factory=list)
    processed_count: int = 0
    report_path: str | None = None

    @property
    def succeeded(self) -> bool:
        return self.stage == PipelineStage.DONE

    def elapsed_seconds(self) -> float:
        return (datetime.now(timezone.utc) - self.started_at).total_seconds()
