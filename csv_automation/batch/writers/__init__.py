"""
Output writers for category files and run reports.
"""

from .csv_writer import CategoryCSVWriter, category_filename, to_csv, unique_filename
from .report_writer import ReportWriter

__all__ = [
    "CategoryCSVWriter",
    "ReportWriter",
    "category_filename",
    "to_csv",
    "unique_filename",
]
