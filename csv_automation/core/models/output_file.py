"""
OutputFile model describing one category file written by a run.
"""

from pydantic import BaseModel, Field


class OutputFile(BaseModel):
    """
    One delimited-text file produced for a category bucket.

    Attributes:
        category: Category name exactly as it appeared on the records
        path: Path of the written file
        record_count: Number of data rows in the file
    """

    category: str
    path: str
    record_count: int = Field(..., ge=0)
