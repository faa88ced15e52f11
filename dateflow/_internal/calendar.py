"""Local-time calendar utilities for DateFlow.

DateFlow stores integer milliseconds since the Unix epoch. Every calendar
view of that instant (accessors, snapping, calendar arithmetic) goes through
the helpers here, which project the instant onto a naive wall-clock
``datetime`` and back.

"Local" always means the process's system timezone as seen by the C library
(``TZ`` / ``/etc/localtime``), which is what ``datetime.astimezone()`` uses.

This module is not part of the public API.
"""

from __future__ import annotations

from datetime import datetime, timedelta
from typing import cast

from dateflow._internal.constants import (
    EPOCH_NAIVE,
    EPOCH_UTC,
    ONE_MILLISECOND,
)


def utc_datetime(instant: int) -> datetime:
    """Return the aware UTC datetime for an instant.

    Args:
        instant: Milliseconds since the Unix epoch.

    Returns:
        An aware datetime in UTC.

    Raises:
        OverflowError: If the instant is outside the datetime range.
    """
    return EPOCH_UTC + timedelta(milliseconds=instant)


def local_datetime(instant: int) -> datetime:
    """Return the naive local wall clock for an instant.

    Examples:
        >>> local_datetime(0)  # with TZ=UTC
        datetime.datetime(1970, 1, 1, 0, 0)
    """
    return utc_datetime(instant).astimezone().replace(tzinfo=None)


def utc_offset(instant: int) -> timedelta:
    """Return the system timezone's UTC offset at an instant.

    Positive offsets are east of UTC (local time ahead of UTC).
    """
    # astimezone() always attaches a fixed-offset timezone
    return cast(timedelta, utc_datetime(instant).astimezone().utcoffset())


def local_to_instant(wall: datetime) -> int:
    """Map a naive local wall clock back to an instant.

    Wall clocks that fall inside a spring-forward gap are read with the
    offset in force before the transition, so they land after it. Wall
    clocks repeated by a fall-back transition resolve to the earlier instant.

    Args:
        wall: Naive datetime read as local system time.

    Returns:
        Milliseconds since the Unix epoch.
    """
    return (wall.astimezone() - EPOCH_UTC) // ONE_MILLISECOND


def instant_at(wall: datetime, offset: timedelta) -> int:
    """Return the instant of a naive wall clock read at a fixed UTC offset."""
    return (wall - offset - EPOCH_NAIVE) // ONE_MILLISECOND


def compose(
    year: int,
    month0: int,
    day: int,
    hour: int = 0,
    minute: int = 0,
    second: int = 0,
    millisecond: int = 0,
) -> datetime:
    """Build a naive wall clock from possibly out-of-range fields.

    Fields roll over into the next larger field instead of failing: month
    index 12 is January of the following year, day 0 is the last day of the
    previous month, day 31 of a 30-day month is the 1st of the next one, and
    so on for the time fields.

    Args:
        year: The year.
        month0: Zero-based month index (any integer).
        day: Day of the month (any integer).
        hour: Hour (any integer).
        minute: Minute (any integer).
        second: Second (any integer).
        millisecond: Millisecond (any integer).

    Returns:
        The normalized naive datetime.

    Raises:
        ValueError, OverflowError: If the result leaves years 1-9999.

    Examples:
        >>> compose(2023, 1, 31)  # "February 31st"
        datetime.datetime(2023, 3, 3, 0, 0)
        >>> compose(2024, 2, 0)  # day 0 of March
        datetime.datetime(2024, 2, 29, 0, 0)
    """
    year += month0 // 12
    month0 %= 12
    first = datetime(year, month0 + 1, 1)
    return first + timedelta(
        days=day - 1,
        hours=hour,
        minutes=minute,
        seconds=second,
        milliseconds=millisecond,
    )


def weekday(wall: datetime) -> int:
    """Return the day of week with Sunday=0 through Saturday=6."""
    # datetime.weekday() is Monday=0
    return (wall.weekday() + 1) % 7


__all__ = [
    "utc_datetime",
    "local_datetime",
    "utc_offset",
    "local_to_instant",
    "instant_at",
    "compose",
    "weekday",
]
