"""
Group records into category buckets.
"""

from csv_automation.core.models import Record


def organize(records: list[Record]) -> dict[str, list[Record]]:
    """
    Bucket records by their exact category value.

    Buckets appear in first-seen category order and keep record order.
    Categories are not normalized, so "Team" and "team" are separate buckets.
    """
    buckets: dict[str, list[Record]] = {}
    for record in records:
        buckets.setdefault(record.category, []).append(record)
    return buckets
