"""
Input file readers.
"""

from .csv_reader import CSVRecordReader
from .file_reader import FileReader, UnsupportedFormatError
from .json_reader import JSONRecordReader, ParseError

__all__ = [
    "CSVRecordReader",
    "FileReader",
    "JSONRecordReader",
    "ParseError",
    "UnsupportedFormatError",
]
