"""Snap an instant to the start or end of a unit, in local time.

    unit         start_of                   end_of
    YEAR         Jan 1, 00:00:00.000        Dec 31, 23:59:59.999
    MONTH        1st, 00:00:00.000          last day, 23:59:59.999
    WEEK         Sunday, 00:00:00.000       Saturday, 23:59:59.999
    DAY          00:00:00.000               23:59:59.999
    HOUR         :00:00.000                 :59:59.999
    MINUTE       :00.000                    :59.999
    SECOND       .000                       .999
    MILLISECOND  unchanged                  unchanged

Weeks always run Sunday to Saturday, whatever the locale.

Calendar units rebuild the local wall clock and map it back to an instant.
HOUR, MINUTE and SECOND snap the instant directly using the UTC offset in
force at it, so an instant inside a repeated (fall-back) hour snaps within
that same hour.
"""

from __future__ import annotations

from datetime import datetime
from typing import Callable

from dateflow._internal.calendar import (
    compose,
    local_datetime,
    local_to_instant,
    utc_offset,
    weekday,
)
from dateflow._internal.constants import (
    MILLIS_PER_HOUR,
    MILLIS_PER_MINUTE,
    MILLIS_PER_SECOND,
    ONE_MILLISECOND,
    SATURDAY,
)
from dateflow.units.unit import Unit

_FIXED_SIZES: dict[Unit, int] = {
    Unit.HOUR: MILLIS_PER_HOUR,
    Unit.MINUTE: MILLIS_PER_MINUTE,
    Unit.SECOND: MILLIS_PER_SECOND,
}

_CALENDAR_START: dict[Unit, Callable[[datetime], datetime]] = {
    Unit.YEAR: lambda w: compose(w.year, 0, 1),
    Unit.MONTH: lambda w: compose(w.year, w.month - 1, 1),
    Unit.WEEK: lambda w: compose(w.year, w.month - 1, w.day - weekday(w)),
    Unit.DAY: lambda w: compose(w.year, w.month - 1, w.day),
}

_CALENDAR_END: dict[Unit, Callable[[datetime], datetime]] = {
    Unit.YEAR: lambda w: compose(w.year, 11, 31, 23, 59, 59, 999),
    # Day 0 of the following month is the last day of this one
    Unit.MONTH: lambda w: compose(w.year, w.month, 0, 23, 59, 59, 999),
    Unit.WEEK: lambda w: compose(
        w.year, w.month - 1, w.day + SATURDAY - weekday(w), 23, 59, 59, 999
    ),
    Unit.DAY: lambda w: compose(w.year, w.month - 1, w.day, 23, 59, 59, 999),
}


def start_of(instant: int, unit: Unit) -> int:
    """Return the first millisecond of the unit containing instant.

    Examples:
        >>> start_of(90_061_001, Unit.MINUTE)  # 1970-01-02T01:01:01.001Z, TZ=UTC
        90060000
    """
    if unit is Unit.MILLISECOND:
        return instant

    size = _FIXED_SIZES.get(unit)
    if size is not None:
        local_millis = instant + utc_offset(instant) // ONE_MILLISECOND
        return instant - local_millis % size

    return local_to_instant(_CALENDAR_START[unit](local_datetime(instant)))


def end_of(instant: int, unit: Unit) -> int:
    """Return the last millisecond of the unit containing instant.

    Examples:
        >>> end_of(90_061_001, Unit.MINUTE)  # TZ=UTC
        90119999
    """
    if unit is Unit.MILLISECOND:
        return instant

    size = _FIXED_SIZES.get(unit)
    if size is not None:
        return start_of(instant, unit) + size - 1

    return local_to_instant(_CALENDAR_END[unit](local_datetime(instant)))


__all__ = ["start_of", "end_of"]
