"""
Run report writer.

Writes the JSON summary of a successful run next to its category files.
"""

import json
from pathlib import Path

from csv_automation.core.models import RunContext, RunReport
from csv_automation.observability.logger import get_logger

from .csv_writer import unique_filename


logger = get_logger(__name__)


class ReportWriter:
    """
    Builds RunReport models from a run context and writes them as JSON.
    """

    def __init__(self, encoding: str = "utf-8"):
        self.encoding = encoding

    def build(self, context: RunContext, output_dir: str | Path) -> RunReport:
        return RunReport(
            total_records_processed=context.processed_count,
            output_directory=str(output_dir),
            run_id=context.run_id,
            duration_seconds=round(context.elapsed_seconds(), 3),
            records_read=context.records_read,
            duplicates_removed=context.duplicates_removed,
            invalid_removed=context.invalid_removed,
            categories=list(context.categories),
            output_files=[output.path for output in context.output_files],
            archived_files=list(context.archived_files),
        )

    def write(self, context: RunContext, output_dir: str | Path) -> Path:
        """
        Write ``report_<run_token>.json`` to the output directory (with a
        counter suffix if that name is taken).

        Args:
            context: Context of the run being reported
            output_dir: Destination directory

        Returns:
            Path of the report file

        Raises:
            OSError: If the report cannot be written
        """
        report = self.build(context, output_dir)
        output_path = Path(output_dir)
        report_path = output_path / unique_filename(f"report_{context.run_token}.json", output_path)

        with open(report_path, "x", encoding=self.encoding) as f:
            json.dump(report.model_dump(mode="json", by_alias=True), f, indent=2)

        logger.info(f"Report saved to {report_path}", extra={"run_id": context.run_id})
        return report_path
