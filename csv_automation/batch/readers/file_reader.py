"""
Input file discovery and format dispatch.
"""

from pathlib import Path

from csv_automation.core.models import PipelineConfig, Record
from csv_automation.observability.logger import get_logger

from .csv_reader import CSVRecordReader
from .json_reader import JSONRecordReader


logger = get_logger(__name__)


class UnsupportedFormatError(ValueError):
    """Raised when a file extension has no registered reader."""
    pass


class FileReader:
    """
    Finds input files in a directory and turns them into Records.
    """

    def __init__(self, config: PipelineConfig | None = None):
        """
        Initialize file reader.

        Args:
            config: Pipeline configuration (extensions and encoding)
        """
        self.config = config or PipelineConfig()
        self.readers = {
            self.config.json_extension: JSONRecordReader(),
            self.config.csv_extension: CSVRecordReader(),
        }

    def discover(self, input_dir: str | Path) -> list[Path]:
        """
        List input files in a directory (non-recursive), sorted by name.

        Only regular files whose name ends with a supported extension
        (case-sensitive) are returned.
        """
        directory = Path(input_dir)
        files = [
            path for path in sorted(directory.iterdir(), key=lambda p: p.name)
            if path.is_file() and path.name.endswith(self.config.supported_extensions)
        ]
        logger.debug(f"Discovered {len(files)} input files in {directory}")
        return files

    def read_file(self, file_path: str | Path) -> list[Record]:
        """
        Read a whole file and parse it according to its extension.

        Raises:
            OSError: If the file cannot be read
            ParseError: If structured content is malformed
        """
        path = Path(file_path)
        content = path.read_text(encoding=self.config.encoding)
        return self.parse_content(content, path.name)

    def read_all(self, files: list[Path]) -> list[Record]:
        """Read files in order and concatenate their records."""
        records: list[Record] = []
        for path in files:
            parsed = self.read_file(path)
            logger.debug(f"Parsed {len(parsed)} records from {path.name}")
            records.extend(parsed)
        return records

    def parse_content(self, content: str, filename: str) -> list[Record]:
        """
        Parse raw content using the reader registered for the file's extension.

        Args:
            content: Raw file content
            filename: File name, used to pick the format

        Returns:
            Parsed records

        Raises:
            UnsupportedFormatError: If no reader handles the extension
        """
        for extension, reader in self.readers.items():
            if filename.endswith(extension):
                return reader.parse(content, filename)
        raise UnsupportedFormatError(f"Unsupported file format: {filename}")
