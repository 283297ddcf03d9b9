"""
Record cleaning: deduplication and required-field validation.
"""

from typing import NamedTuple

from csv_automation.core.models import Record
from csv_automation.core.validators import BaseValidator, RequiredFieldValidator
from csv_automation.observability import metrics
from csv_automation.observability.logger import get_logger


logger = get_logger(__name__)

REQUIRED_FIELDS = ("id", "name", "category")


class CleanResult(NamedTuple):
    records: list[Record]
    duplicates_removed: int
    invalid_removed: int


def deduplicate(records: list[Record]) -> list[Record]:
    """
    Keep one record per id.

    The last occurrence of an id wins, but it takes the position where the
    id was first seen.

    Args:
        records: Records in arrival order

    Returns:
        Deduplicated records
    """
    unique: dict[str, Record] = {}
    for record in records:
        unique[record.id] = record
    return list(unique.values())


def build_validators() -> list[BaseValidator]:
    return [RequiredFieldValidator(field_name) for field_name in REQUIRED_FIELDS]


def validate(records: list[Record], validators: list[BaseValidator] | None = None) -> list[Record]:
    """
    Drop records missing id, name or category; order is preserved.

    Args:
        records: Records to check
        validators: Field validators (defaults to required id, name, category)

    Returns:
        Records that passed every validator
    """
    validators = validators if validators is not None else build_validators()
    valid: list[Record] = []

    for record in records:
        payload = record.model_dump()
        failures = {}
        for validator in validators:
            message = validator.check(payload)
            if message:
                failures[validator.field_name] = message

        if failures:
            logger.debug(
                f"Dropping invalid record {record.id!r}",
                extra={"record_id": record.id, "failures": failures}
            )
            continue
        valid.append(record)

    return valid


def clean(
    records: list[Record],
    remove_duplicates: bool = True,
    enable_cleaning: bool = True,
) -> CleanResult:
    """
    Deduplicate then validate records.

    Args:
        records: Records in arrival order
        remove_duplicates: Run deduplication
        enable_cleaning: Run required-field validation

    Returns:
        CleanResult with the surviving records and how many were removed
    """
    unique = records
    if remove_duplicates:
        unique = deduplicate(records)
    else:
        logger.info("Duplicate removal disabled, skipping")

    validated = unique
    if enable_cleaning:
        validated = validate(unique)
    else:
        logger.info("Cleaning disabled, skipping required-field validation")

    duplicates_removed = len(records) - len(unique)
    invalid_removed = len(unique) - len(validated)

    metrics.increment_counter(metrics.records_removed_total, duplicates_removed, reason="duplicate")
    metrics.increment_counter(metrics.records_removed_total, invalid_removed, reason="invalid")

    logger.info(
        f"Cleaned {len(records)} → {len(validated)} records",
        extra={"duplicates_removed": duplicates_removed, "invalid_removed": invalid_removed}
    )

    return CleanResult(validated, duplicates_removed, invalid_removed)
