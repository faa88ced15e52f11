"""Unit enumeration for DateFlow arithmetic, snapping and differences.

This module provides the Unit enum covering the eight units a DateFlow
operates on, from milliseconds up to years.
"""

from __future__ import annotations

from enum import Enum

from dateflow._internal.constants import (
    MILLIS_PER_DAY,
    MILLIS_PER_HOUR,
    MILLIS_PER_MINUTE,
    MILLIS_PER_SECOND,
    MILLIS_PER_WEEK,
)


class Unit(Enum):
    """Time units accepted by add, subtract, start_of, end_of and diff.

    Each unit knows its fixed length in milliseconds where it has one.

    Note:
        YEAR and MONTH do not have fixed lengths (leap years, different
        month lengths). to_millis() returns None for them.

    Examples:
        >>> Unit.HOUR.to_millis()
        3600000

        >>> Unit.MONTH.to_millis() is None
        True

        >>> Unit("week") is Unit.WEEK
        True
    """

    MILLISECOND = "millisecond"
    SECOND = "second"
    MINUTE = "minute"
    HOUR = "hour"
    DAY = "day"
    WEEK = "week"
    MONTH = "month"
    YEAR = "year"

    def to_millis(self) -> int | None:
        """Return the length of one unit in milliseconds.

        Returns:
            Milliseconds in one unit, or None for MONTH and YEAR.
        """
        return _UNIT_MILLIS[self]

    @property
    def is_calendar(self) -> bool:
        """True for units added on the calendar (YEAR, MONTH, WEEK, DAY).

        The remaining units are always added as real elapsed time.
        """
        return self in _CALENDAR_UNITS


_UNIT_MILLIS: dict[Unit, int | None] = {
    Unit.MILLISECOND: 1,
    Unit.SECOND: MILLIS_PER_SECOND,
    Unit.MINUTE: MILLIS_PER_MINUTE,
    Unit.HOUR: MILLIS_PER_HOUR,
    Unit.DAY: MILLIS_PER_DAY,
    Unit.WEEK: MILLIS_PER_WEEK,
    Unit.MONTH: None,  # Variable length
    Unit.YEAR: None,  # Variable length (leap years)
}

_CALENDAR_UNITS: frozenset[Unit] = frozenset(
    {Unit.YEAR, Unit.MONTH, Unit.WEEK, Unit.DAY}
)


__all__ = ["Unit"]
