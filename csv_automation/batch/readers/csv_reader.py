"""
CSV record reader.

Delimited-text input is recognised (so CSV files are discovered and
archived) but not parsed: the column mapping for CSV inputs has not been
decided yet, so every CSV file yields zero records.
"""

from csv_automation.core.models import Record
from csv_automation.observability.logger import get_logger


logger = get_logger(__name__)


class CSVRecordReader:
    """
    Unsupported-format branch for delimited-text input.
    """

    def parse(self, content: str, filename: str) -> list[Record]:
        """
        Return no records for CSV content.

        Args:
            content: Raw file content (ignored)
            filename: Name of the source file

        Returns:
            An empty list
        """
        logger.warning(
            f"CSV input parsing is not supported; {filename} contributes no records",
            extra={"file": filename, "bytes": len(content)}
        )
        return []
