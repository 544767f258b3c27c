"""Exception hierarchy for cffkit."""

from __future__ import annotations

from typing import Any, Sequence


class CffError(Exception):
    """Base class for all errors raised by this library."""


class UnknownFieldError(CffError, AttributeError):
    """Raised when reading or writing a field a model type does not allow."""

    def __init__(self, owner: str, field: str) -> None:
        super().__init__(f"{owner} has no field '{field}'")
        self.owner = owner
        self.field = field


class InvalidDateError(CffError, ValueError):
    """Raised when a date-valued field is assigned something unparsable."""

    def __init__(self, value: Any) -> None:
        super().__init__(f"invalid date: {value!r}")
        self.value = value


class ValidationError(CffError):
    """Raised by the strict validation entry points when a document fails.

    Carries every failure the validator found, and whether the backing file
    (if any) had the wrong name.
    """

    def __init__(self, errors: Sequence[Any], invalid_filename: bool = False) -> None:
        self.errors = list(errors)
        self.invalid_filename = invalid_filename
        super().__init__("Validation error")

    def __str__(self) -> str:
        details = [str(error) for error in self.errors]
        if self.invalid_filename:
            details.append("invalid filename")
        if not details:
            return "Validation error"
        return f"Validation error: {' '.join(details)}"
