"""Add and subtract units of time from an instant.

Calendar units (YEAR, MONTH, WEEK, DAY) are applied to the local wall clock,
rolling over like browser date setters do:

    2024-01-31 + 1 month -> 2024-03-02  ("February 31st")
    2023-01-31 + 1 month -> 2023-03-03
    2024-02-29 + 1 year  -> 2025-03-01

The shifted wall clock is resolved back to an instant in the system
timezone, so the local time of day survives DST transitions. Fixed units
(HOUR, MINUTE, SECOND, MILLISECOND) add real elapsed time.

With DST correction enabled, an elapsed-time result whose system UTC offset
differs from the original's is moved back by the difference, keeping the
local wall-clock hour and minute instead of the elapsed duration. The system
timezone decides the offsets even when a DateFlow's locale maps to another
zone.
"""

from __future__ import annotations

import logging

from dateflow._internal.calendar import (
    compose,
    local_datetime,
    local_to_instant,
    utc_offset,
)
from dateflow._internal.constants import MICROS_PER_MILLISECOND, ONE_MILLISECOND
from dateflow.units.unit import Unit

logger = logging.getLogger(__name__)

# Calendar unit -> (index into the compose() field list, multiplier)
_CALENDAR_FIELDS: dict[Unit, tuple[int, int]] = {
    Unit.YEAR: (0, 1),
    Unit.MONTH: (1, 1),
    Unit.WEEK: (2, 7),
    Unit.DAY: (2, 1),
}


def shift(instant: int, amount: int, unit: Unit, *, correct_dst: bool = False) -> int:
    """Return the instant shifted by amount units.

    Args:
        instant: Milliseconds since the Unix epoch.
        amount: Number of units to add (negative to subtract).
        unit: The unit to add.
        correct_dst: Preserve the local wall clock across DST transitions
            for the elapsed-time units. Calendar units always preserve it.

    Returns:
        The shifted instant.

    Raises:
        ValueError, OverflowError: If the result leaves years 1-9999.

    Examples:
        >>> shift(0, 2, Unit.HOUR)
        7200000
    """
    if unit.is_calendar:
        return _shift_calendar(instant, amount, unit)

    shifted = instant + amount * unit.to_millis()  # type: ignore[operator]
    if correct_dst:
        shifted = correct_dst_change(instant, shifted)
    return shifted


def _shift_calendar(instant: int, amount: int, unit: Unit) -> int:
    if not amount:
        # Re-resolving a repeated (fall-back) wall clock could pick the other instant
        return instant

    wall = local_datetime(instant)
    fields = [
        wall.year,
        wall.month - 1,
        wall.day,
        wall.hour,
        wall.minute,
        wall.second,
        wall.microsecond // MICROS_PER_MILLISECOND,
    ]
    index, multiplier = _CALENDAR_FIELDS[unit]
    fields[index] += amount * multiplier
    return local_to_instant(compose(*fields))


def correct_dst_change(original: int, shifted: int) -> int:
    """Undo the wall-clock drift caused by crossing a DST transition.

    Args:
        original: The instant before shifting.
        shifted: The shifted instant.

    Returns:
        shifted moved back by (offset at shifted - offset at original).
    """
    delta = utc_offset(shifted) - utc_offset(original)
    if not delta:
        return shifted

    logger.debug(
        "UTC offset changed by %s between %d and %d; keeping wall clock",
        delta,
        original,
        shifted,
    )
    return shifted - delta // ONE_MILLISECOND


__all__ = ["shift", "correct_dst_change"]
