"""DateFlow exception hierarchy.

All DateFlow-specific exceptions inherit from DateFlowError.
"""

from __future__ import annotations

from typing import Any


class DateFlowError(Exception):
    """Base exception for all DateFlow errors."""

    pass


class InvalidDateError(DateFlowError):
    """Input cannot be resolved to a valid instant.

    Raised when constructing a DateFlow (or resolving a comparison operand)
    from a value that does not describe a point in time.

    Attributes:
        value: The original input, kept for diagnostics.

    Examples:
        - Unparseable string such as "not-a-date"
        - NaN or infinite timestamp
        - Instant outside years 0001-9999
    """

    def __init__(self, value: Any, reason: str | None = None) -> None:
        self.value = value
        message = f"invalid date: {value!r}"
        if reason:
            message = f"{message} ({reason})"
        super().__init__(message)


class InvalidUnitError(DateFlowError):
    """Unit is not one of year, month, week, day, hour, minute, second, millisecond."""

    pass


class InvalidConfigError(DateFlowError):
    """Unknown format pattern, locale tag or equality mode."""

    pass


__all__ = [
    "DateFlowError",
    "InvalidDateError",
    "InvalidUnitError",
    "InvalidConfigError",
]
