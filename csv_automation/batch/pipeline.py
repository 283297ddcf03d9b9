"""
Automation pipeline orchestration.

Coordinates the flow: init → read → clean → organize → generate → archive → report
"""

from pathlib import Path
from typing import Any, Callable

from csv_automation.core.models import PipelineConfig, PipelineStage, Record, RunContext
from csv_automation.batch.archiver import archive_files
from csv_automation.batch.cleaner import clean
from csv_automation.batch.organizer import organize
from csv_automation.batch.readers import FileReader
from csv_automation.batch.writers import CategoryCSVWriter, ReportWriter
from csv_automation.observability import metrics
from csv_automation.observability.logger import get_logger, log_operation


logger = get_logger(__name__)


class AutomationPipeline:
    """
    Orchestrates one automation run.

    Flow:
    1. Create input and output directories if missing
    2. Read records from every JSON/CSV file in the input directory
    3. Deduplicate (last wins) and drop records missing required fields
    4. Group records by category
    5. Write one CSV file per category
    6. Move consumed input files to the archive subdirectory
    7. Write the JSON run report

    Any failure marks the run FAILED and re-raises; nothing is retried
    and no report is written.
    """

    def __init__(self, config: PipelineConfig | None = None):
        """
        Initialize the pipeline.

        Args:
            config: Pipeline configuration (defaults apply when omitted)
        """
        self.config = config or PipelineConfig()

        self.file_reader = FileReader(self.config)
        self.csv_writer = CategoryCSVWriter(
            delimiter=self.config.delimiter,
            encoding=self.config.encoding,
        )
        self.report_writer = ReportWriter(encoding=self.config.encoding)

    @property
    def input_dir(self) -> Path:
        return Path(self.config.input_dir)

    @property
    def output_dir(self) -> Path:
        return Path(self.config.output_dir)

    def run(self, context: RunContext | None = None) -> RunContext:
        """
        Execute every stage in order.

        Args:
            context: Context to fill in (a fresh one is created when omitted;
                pass one in to inspect a failed run after the exception)

        Returns:
            The completed RunContext (stage DONE, processed_count set)

        Raises:
            Exception: Whatever the failing stage raised, unchanged
        """
        context = context or RunContext()
        logger.info(
            "Starting CSV automation workflow",
            extra={
                "run_id": context.run_id,
                "input_dir": str(self.input_dir),
                "output_dir": str(self.output_dir),
                "retry_attempts": self.config.retry_attempts,
            }
        )

        try:
            self._run_stage(context, PipelineStage.INIT, self._initialize_directories)
            records = self._run_stage(context, PipelineStage.READ, self._read_input_files, context)
            cleaned = self._run_stage(context, PipelineStage.CLEAN, self._clean_records, context, records)
            buckets = self._run_stage(context, PipelineStage.ORGANIZE, self._organize_records, context, cleaned)
            self._run_stage(context, PipelineStage.GENERATE, self._generate_output, context, buckets)

            if self.config.auto_archive:
                self._run_stage(context, PipelineStage.ARCHIVE, self._archive_inputs, context)
            else:
                logger.info("Auto-archive disabled, skipping", extra={"run_id": context.run_id})

            if self.config.generate_report:
                self._run_stage(context, PipelineStage.REPORT, self._generate_report, context)
            else:
                logger.info("Report generation disabled, skipping", extra={"run_id": context.run_id})

        except Exception as e:
            context.failed_stage = context.stage
            context.stage = PipelineStage.FAILED
            context.error = str(e)
            metrics.increment_counter(metrics.runs_total, status="failure")
            logger.error(
                f"Automation failed during {context.failed_stage.value}: {e}",
                extra={"run_id": context.run_id, "stage": context.failed_stage.value}
            )
            raise

        context.stage = PipelineStage.DONE
        metrics.increment_counter(metrics.runs_total, status="success")
        logger.info(
            "Automation completed successfully",
            extra={
                "run_id": context.run_id,
                "total_records_processed": context.processed_count,
                "duration_seconds": round(context.elapsed_seconds(), 3),
            }
        )
        return context

    def _run_stage(self, context: RunContext, stage: PipelineStage, step: Callable[..., Any], *args) -> Any:
        context.stage = stage
        with metrics.track_duration(metrics.stage_duration_seconds, stage=stage.value):
            with log_operation(f"{stage.value} stage", logger=logger, run_id=context.run_id):
                return step(*args)

    def _initialize_directories(self) -> None:
        for directory in (self.input_dir, self.output_dir):
            if not directory.exists():
                directory.mkdir(parents=True, exist_ok=True)
                logger.info(f"Created directory: {directory}")

    def _read_input_files(self, context: RunContext) -> list[Record]:
        files = self.file_reader.discover(self.input_dir)
        context.input_files = [str(path) for path in files]

        records = self.file_reader.read_all(files)
        context.records_read = len(records)
        metrics.increment_counter(metrics.records_read_total, len(records))

        logger.info(f"Read {len(records)} records from {len(files)} input files")
        return records

    def _clean_records(self, context: RunContext, records: list[Record]) -> list[Record]:
        result = clean(
            records,
            remove_duplicates=self.config.remove_duplicates,
            enable_cleaning=self.config.enable_cleaning,
        )
        context.duplicates_removed = result.duplicates_removed
        context.invalid_removed = result.invalid_removed
        return result.records

    def _organize_records(self, context: RunContext, records: list[Record]) -> dict[str, list[Record]]:
        buckets = organize(records)
        context.categories = list(buckets)
        logger.info(f"Organized into {len(buckets)} categories")
        return buckets

    def _generate_output(self, context: RunContext, buckets: dict[str, list[Record]]) -> None:
        for output in self.csv_writer.write_buckets(buckets, self.output_dir, context.run_token):
            context.output_files.append(output)
            context.processed_count += output.record_count

    def _archive_inputs(self, context: RunContext) -> None:
        context.archived_files = archive_files(
            context.input_files,
            self.input_dir,
            self.config.archive_dir_name,
        )

    def _generate_report(self, context: RunContext) -> None:
        context.report_path = str(self.report_writer.write(context, self.output_dir))
