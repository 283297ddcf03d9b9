"""
Batch automation pipeline.
"""

from .pipeline import AutomationPipeline
from .readers import FileReader, ParseError
from .writers import CategoryCSVWriter, ReportWriter

__all__ = [
    "AutomationPipeline",
    "FileReader",
    "ParseError",
    "CategoryCSVWriter",
    "ReportWriter",
]
