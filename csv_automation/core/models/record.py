"""
Record model representing a single unit of data flowing through the pipeline (ephemeral).
"""

from datetime import datetime, timezone

from pydantic import BaseModel, ConfigDict, Field


def utc_now_iso() -> str:
    """Current UTC instant as ISO-8601 with millisecond precision and a Z suffix."""
    return datetime.now(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")


class Record(BaseModel):
    """
    A single data item read from an input file (ephemeral, never persisted
    except as a row of a category output file).

    Records are immutable: deduplication and validation build new
    sequences instead of changing records in place.

    Attributes:
        id: Identity key used for deduplication
        name: Free-form label
        category: Grouping key for output files
        timestamp: ISO-8601 instant assigned when the record was parsed
        processed: Processing flag, always False for records built by the pipeline
    """

    model_config = ConfigDict(
        frozen=True,
        json_schema_extra={
            "example": {
                "id": "1",
                "name": "Alice",
                "category": "Team",
                "timestamp": "2026-10-19T08:15:30.123Z",
                "processed": False,
            }
        },
    )

    id: str
    name: str
    category: str
    timestamp: str = Field(default_factory=utc_now_iso)
    processed: bool = False
