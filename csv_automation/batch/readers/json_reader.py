"""
JSON record reader.

Parses a JSON array of objects (or a single object) into Records.
"""

import json
from typing import Any

from csv_automation.core.models import Record, utc_now_iso

DEFAULT_NAME = "Unknown"
DEFAULT_CATEGORY = "Uncategorized"


class ParseError(ValueError):
    """Raised when structured input content cannot be parsed."""

    def __init__(self, filename: str, message: str, line: int | None = None, column: int | None = None):
        self.filename = filename
        self.message = message
        self.line = line
        self.column = column
        location = f":{line}:{column}" if line is not None else ""
        super().__init__(f"{filename}{location}: {message}")


class JSONRecordReader:
    """
    Maps JSON objects to Records.

    Falsy values (missing, null, "", 0, false) fall back to defaults:
    ``id`` to ``row_<index>`` (index within the file), ``name`` to
    "Unknown" and ``category`` to "Uncategorized".
    """

    def parse(self, content: str, filename: str) -> list[Record]:
        """
        Parse JSON content into Records.

        Args:
            content: Raw file content
            filename: Name of the source file (for error messages)

        Returns:
            Records in file order, all stamped with the same parse instant

        Raises:
            ParseError: If the content is not valid JSON or an element is not an object
        """
        try:
            parsed = json.loads(content)
        except json.JSONDecodeError as e:
            raise ParseError(filename, e.msg, line=e.lineno, column=e.colno) from e

        items = parsed if isinstance(parsed, list) else [parsed]
        timestamp = utc_now_iso()

        return [self._to_record(item, idx, filename, timestamp) for idx, item in enumerate(items)]

    def _to_record(self, item: Any, idx: int, filename: str, timestamp: str) -> Record:
        if not isinstance(item, dict):
            raise ParseError(
                filename,
                f"element {idx} must be an object, got {type(item).__name__}"
            )

        return Record(
            id=_text_or(item.get("id"), f"row_{idx}"),
            name=_text_or(item.get("name"), DEFAULT_NAME),
            category=_text_or(item.get("category"), DEFAULT_CATEGORY),
            timestamp=timestamp,
            processed=False,
        )


def _text_or(value: Any, fallback: str) -> str:
    if not value:
        return fallback
    if isinstance(value, str):
        return value
    if isinstance(value, bool):
        return "true"
    # 1.0 and 1 are the same JSON number
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)
