"""Internal constants for DateFlow.

This module is not part of the public API.
"""

from __future__ import annotations

from datetime import datetime, timedelta, timezone

# Time unit conversions
MILLIS_PER_SECOND: int = 1_000
MILLIS_PER_MINUTE: int = 60 * MILLIS_PER_SECOND
MILLIS_PER_HOUR: int = 60 * MILLIS_PER_MINUTE
MILLIS_PER_DAY: int = 24 * MILLIS_PER_HOUR  # 86_400_000
MILLIS_PER_WEEK: int = 7 * MILLIS_PER_DAY  # 604_800_000

MICROS_PER_MILLISECOND: int = 1_000

ONE_MILLISECOND: timedelta = timedelta(milliseconds=1)

# Unix epoch, aware and naive
EPOCH_UTC: datetime = datetime(1970, 1, 1, tzinfo=timezone.utc)
EPOCH_NAIVE: datetime = datetime(1970, 1, 1)

# Last weekday index (weeks run Sunday=0 to Saturday=6)
SATURDAY: int = 6


__all__ = [
    "MILLIS_PER_SECOND",
    "MILLIS_PER_MINUTE",
    "MILLIS_PER_HOUR",
    "MILLIS_PER_DAY",
    "MILLIS_PER_WEEK",
    "MICROS_PER_MILLISECOND",
    "ONE_MILLISECOND",
    "EPOCH_UTC",
    "EPOCH_NAIVE",
    "SATURDAY",
]
