"""
Category CSV writer.

Writes one delimited-text file per category bucket.
"""

import re
from pathlib import Path

from csv_automation.core.models import OutputFile, Record
from csv_automation.observability import metrics
from csv_automation.observability.logger import get_logger


logger = get_logger(__name__)

HEADER_FIELDS = ("ID", "Name", "Category", "Timestamp", "Processed")

_UNSAFE_FILENAME_CHARS = re.compile(r"[/\\\x00]")


def to_csv(records: list[Record], delimiter: str = ",") -> str:
    """
    Render records as delimited text.

    Text fields are wrapped in double quotes as-is; embedded quotes and
    delimiters are not escaped. ``processed`` is written unquoted as
    ``true``/``false``. Rows are joined with newlines, no trailing newline.
    """
    lines = [delimiter.join(HEADER_FIELDS)]
    for record in records:
        lines.append(delimiter.join([
            f'"{record.id}"',
            f'"{record.name}"',
            f'"{record.category}"',
            f'"{record.timestamp}"',
            "true" if record.processed else "false",
        ]))
    return "\n".join(lines)


def unique_filename(filename: str, directory: Path, taken: set[str] | None = None) -> str:
    """Return filename, or filename with a _2, _3, ... counter if it is taken or exists on disk."""
    taken = taken or set()
    stem, _, suffix = filename.rpartition(".")
    candidate = filename
    counter = 2
    while candidate in taken or (directory / candidate).exists():
        candidate = f"{stem}_{counter}.{suffix}"
        counter += 1
    return candidate


def category_filename(category: str, run_token: int | str) -> str:
    """Base output file name for a category: ``<category lower-cased>_<run_token>.csv``."""
    stem = _UNSAFE_FILENAME_CHARS.sub("_", category.lower())
    return f"{stem}_{run_token}.csv"


class CategoryCSVWriter:
    """
    Writes category buckets to an output directory.
    """

    def __init__(self, delimiter: str = ",", encoding: str = "utf-8"):
        """
        Initialize category writer.

        Args:
            delimiter: Field delimiter
            encoding: Output text encoding
        """
        self.delimiter = delimiter
        self.encoding = encoding

    def write_buckets(
        self,
        buckets: dict[str, list[Record]],
        output_dir: str | Path,
        run_token: int | str,
    ) -> list[OutputFile]:
        """
        Write one file per bucket, in bucket order.

        Names that are already taken, in this run or on disk, get a
        ``_2``, ``_3``, ... suffix before the extension.

        Args:
            buckets: Category name to records
            output_dir: Destination directory (must exist)
            run_token: Run-unique suffix shared by all files of the run

        Returns:
            One OutputFile per bucket

        Raises:
            OSError: If a file cannot be written (earlier files are kept)
        """
        output_path = Path(output_dir)
        taken: set[str] = set()
        written: list[OutputFile] = []

        for category, records in buckets.items():
            filename = unique_filename(category_filename(category, run_token), output_path, taken)
            filepath = output_path / filename

            with open(filepath, "x", encoding=self.encoding, newline="") as f:
                f.write(to_csv(records, self.delimiter))

            taken.add(filename)
            written.append(OutputFile(category=category, path=str(filepath), record_count=len(records)))
            logger.info(f"Created {filename}", extra={"category": category, "records": len(records)})

            metrics.increment_counter(metrics.output_files_total)
            metrics.increment_counter(metrics.records_written_total, len(records))

        return written
