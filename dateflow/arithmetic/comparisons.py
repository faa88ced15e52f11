"""Differences and calendar comparisons between instants.

Functions:
    diff: Difference between two instants in a unit.
    same_local_day: Whether two instants fall on the same local date.
"""

from __future__ import annotations

from dateflow._internal.calendar import local_datetime
from dateflow.units.unit import Unit


def diff(instant: int, other: int, unit: Unit) -> int:
    """Return instant - other expressed in unit.

    Fixed-length units floor-divide the millisecond difference, so partial
    units round toward negative infinity. MONTH and YEAR compare the local
    calendar month/year only, ignoring day and time of day.

    Args:
        instant: Milliseconds since the Unix epoch.
        other: Milliseconds since the Unix epoch.
        unit: The unit of the result.

    Returns:
        The difference as an integer.

    Examples:
        >>> diff(5_400_000, 0, Unit.HOUR)
        1
        >>> diff(0, 5_400_000, Unit.HOUR)
        -2
    """
    if unit is Unit.YEAR or unit is Unit.MONTH:
        this = local_datetime(instant)
        that = local_datetime(other)
        years = this.year - that.year
        if unit is Unit.YEAR:
            return years
        return years * 12 + (this.month - that.month)

    return (instant - other) // unit.to_millis()  # type: ignore[operator]


def same_local_day(instant: int, other: int) -> bool:
    """Return True if both instants have the same local year, month and day."""
    this = local_datetime(instant)
    that = local_datetime(other)
    return (this.year, this.month, this.day) == (that.year, that.month, that.day)


__all__ = ["diff", "same_local_day"]
