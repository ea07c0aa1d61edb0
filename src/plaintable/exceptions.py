"""Exceptions for plaintable."""

from typing import Any

# ---------------------------------------------------------------------------
# Base Exception
# ---------------------------------------------------------------------------


class PlainTableError(Exception):
    """
    Base exception for all plaintable errors.

    All exceptions raised by this library inherit from this class,
    allowing callers to catch all library-specific errors with a single
    except clause.
    """

    pass


# ---------------------------------------------------------------------------
# Validation Exceptions
# ---------------------------------------------------------------------------


class ValidationError(PlainTableError):
    """
    Raised when a table configuration value is outside the supported contract.

    Rendering never raises; invalid values are rejected when the
    configuration snapshot is built.

    Attributes:
        field: Name of the offending configuration field
        value: The rejected value
        reason: Human-readable explanation
    """

    def __init__(self, field: str, value: Any, reason: str) -> None:
        self.field = field
        self.value = value
        self.reason = reason
        super().__init__(f"Invalid {field}: {reason}")
