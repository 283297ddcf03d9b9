"""
Input validation utilities for pipeline configuration.

Provides reusable checks for directory paths, file extensions, the output
delimiter and the text encoding so a bad configuration is rejected at
startup rather than halfway through a run.
"""

import codecs
import re


class ValidationError(ValueError):
    """Raised when input validation fails."""
    pass


def validate_directory_path(dir_path: str, field_name: str = "directory") -> str:
    """
    Validate a directory path.

    Args:
        dir_path: The directory path to validate
        field_name: Name of the field (for error messages)

    Returns:
        The validated path (stripped of whitespace)

    Raises:
        ValidationError: If validation fails

    Examples:
        >>> validate_directory_path("./data/input")
        './data/input'
        >>> validate_directory_path("  /tmp/out ")
        '/tmp/out'
    """
    if not dir_path or not isinstance(dir_path, str):
        raise ValidationError(f"{field_name} must be a non-empty string")

    dir_path = dir_path.strip()

    if not dir_path:
        raise ValidationError(f"{field_name} cannot be empty or whitespace-only")

    if "\x00" in dir_path:
        raise ValidationError(f"{field_name} contains null bytes")

    if "*" in dir_path or "?" in dir_path:
        raise ValidationError(f"{field_name} contains wildcards (* or ?)")

    if len(dir_path) > 4096:  # Linux PATH_MAX
        raise ValidationError(f"{field_name} exceeds maximum length of 4096 characters")

    return dir_path


def validate_directory_name(name: str, field_name: str = "directory_name") -> str:
    """
    Validate a single path component such as the archive subdirectory name.

    Examples:
        >>> validate_directory_name("archive")
        'archive'
        >>> validate_directory_name("../archive")  # doctest: +SKIP
        ValidationError: directory_name must be a single path component
    """
    name = validate_directory_path(name, field_name)

    if "/" in name or "\\" in name or name in (".", ".."):
        raise ValidationError(f"{field_name} must be a single path component")

    return name


def validate_extension(extension: str, field_name: str = "extension") -> str:
    """
    Validate a file extension (leading dot required).

    Examples:
        >>> validate_extension(".json")
        '.json'
        >>> validate_extension("json")  # doctest: +SKIP
        ValidationError: extension must start with '.'
    """
    if not extension or not isinstance(extension, str):
        raise ValidationError(f"{field_name} must be a non-empty string")

    if not re.match(r'^\.[A-Za-z0-9_]+$', extension):
        raise ValidationError(
            f"{field_name} must start with '.' followed by alphanumeric characters, got {extension!r}"
        )

    return extension


def validate_delimiter(delimiter: str, field_name: str = "delimiter") -> str:
    """
    Validate a field delimiter for delimited-text output.

    Examples:
        >>> validate_delimiter(";")
        ';'
    """
    if not isinstance(delimiter, str) or len(delimiter) != 1:
        raise ValidationError(f"{field_name} must be a single character, got {delimiter!r}")

    if delimiter in ('"', "\n", "\r"):
        raise ValidationError(f"{field_name} cannot be a quote or line break")

    return delimiter


def validate_encoding(encoding: str, field_name: str = "encoding") -> str:
    """
    Validate that an encoding name is known to Python's codec registry.

    Examples:
        >>> validate_encoding("utf-8")
        'utf-8'
    """
    if not encoding or not isinstance(encoding, str):
        raise ValidationError(f"{field_name} must be a non-empty string")

    try:
        codecs.lookup(encoding)
    except LookupError:
        raise ValidationError(f"{field_name} '{encoding}' is not a known text encoding")

    return encoding
