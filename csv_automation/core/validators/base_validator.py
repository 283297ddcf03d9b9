"""
Base validator interface for record field checks.

All validators must inherit from BaseValidator and implement the validate() method.
"""

from abc import ABC, abstractmethod
from typing import Any


class ValidationError(Exception):
    """Raised when a validation rule fails."""

    def __init__(self, rule_name: str, field_name: str, message: str):
        self.rule_name = rule_name
        self.field_name = field_name
        self.message = message
        super().__init__(f"[{rule_name}] {field_name}: {message}")


class BaseValidator(ABC):
    """
    Abstract base class for all validators.

    Each validator checks one field of a record payload.
    """

    def __init__(self, field_name: str):
        """
        Initialize validator.

        Args:
            field_name: Name of the field to validate
        """
        self.field_name = field_name

    @abstractmethod
    def validate(self, value: Any, record: dict[str, Any]) -> None:
        """
        Validate a value against this rule.

        Args:
            value: The field value to validate
            record: The entire record (for context-dependent validation)

        Raises:
            ValidationError: If validation fails
        """
        pass

    @property
    @abstractmethod
    def rule_type(self) -> str:
        """Return the rule type identifier."""
        pass

    def check(self, record: dict[str, Any]) -> str | None:
        """Validate ``record[field_name]`` and return the failure message, or None."""
        try:
            self.validate(record.get(self.field_name), record)
        except ValidationError as e:
            return e.message
        return None

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(field={self.field_name})"
