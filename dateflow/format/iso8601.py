"""ISO 8601 parsing and formatting for DateFlow instants.

This module converts between ISO 8601 strings and epoch milliseconds.

Functions:
    parse_instant: Parse a date/time string into epoch milliseconds.
    format_iso8601: Render epoch milliseconds as a UTC ISO 8601 string.

Accepted input (the date-time string format of web browsers' Date):

Date-only forms, read as UTC midnight:
    - YYYY
    - YYYY-MM
    - YYYY-MM-DD

Date-times, read as local time unless an offset is given:
    - YYYY-MM-DDTHH:mm
    - YYYY-MM-DDTHH:mm:ss
    - YYYY-MM-DDTHH:mm:ss.sss (any number of fraction digits, truncated
      to milliseconds)
    - any of the above followed by Z, +HH:mm, +HHmm or +HH
    - a space may replace the T
    - T24:00 is midnight at the end of the day

Legacy slash dates, read as local time:
    - YYYY/MM/DD
    - YYYY/MM/DD HH:mm[:ss[.sss]]

Examples:
    >>> parse_instant("1970-01-02")
    86400000
    >>> format_iso8601(86400000)
    '1970-01-02T00:00:00.000Z'
"""

from __future__ import annotations

import re
from datetime import datetime, timedelta

from dateflow._internal.calendar import instant_at, local_to_instant, utc_datetime
from dateflow._internal.constants import MICROS_PER_MILLISECOND
from dateflow.errors import InvalidDateError

_ISO_PATTERN = re.compile(
    r"(?P<year>\d{4})"
    r"(?:-(?P<month>\d{2})(?:-(?P<day>\d{2}))?)?"
    r"(?:[Tt ]"
    r"(?P<hour>\d{2}):(?P<minute>\d{2})"
    r"(?::(?P<second>\d{2})(?:[.,](?P<fraction>\d+))?)?"
    r"(?P<offset>[Zz]|[+-]\d{2}(?::?\d{2})?)?"
    r")?",
    re.ASCII,
)

_SLASH_PATTERN = re.compile(
    r"(?P<year>\d{4})/(?P<month>\d{1,2})/(?P<day>\d{1,2})"
    r"(?:[Tt ]"
    r"(?P<hour>\d{1,2}):(?P<minute>\d{2})"
    r"(?::(?P<second>\d{2})(?:\.(?P<fraction>\d+))?)?"
    r")?",
    re.ASCII,
)

_OFFSET_PATTERN = re.compile(
    r"(?P<sign>[+-])(?P<hours>\d{2}):?(?P<minutes>\d{2})?", re.ASCII
)


def parse_instant(text: str) -> int:
    """Parse a date/time string into milliseconds since the Unix epoch.

    Args:
        text: The string to parse. Surrounding whitespace is ignored.

    Returns:
        Milliseconds since the Unix epoch.

    Raises:
        InvalidDateError: If the string is not in a supported format or a
            component is out of range.

    Examples:
        >>> parse_instant("2024-01-01T00:00:00Z")
        1704067200000
        >>> parse_instant("2024-01-01T01:00:00+01:00")
        1704067200000
    """
    s = text.strip()

    match = _ISO_PATTERN.fullmatch(s)
    if match is None:
        match = _SLASH_PATTERN.fullmatch(s)
    if match is None:
        raise InvalidDateError(text, "unrecognized date format")

    parts = match.groupdict()
    try:
        wall = _wall_clock(parts)
        if parts["hour"] is None and "/" not in s:
            # Date-only ISO forms are UTC
            return instant_at(wall, timedelta(0))
        offset = parts.get("offset")
        if offset:
            return instant_at(wall, _parse_offset(offset))
        return local_to_instant(wall)
    except (ValueError, OverflowError, OSError) as exc:
        raise InvalidDateError(text, str(exc)) from exc


def _wall_clock(parts: dict[str, str | None]) -> datetime:
    """Build the naive wall clock described by the matched groups."""
    year = int(parts["year"])  # type: ignore[arg-type]
    month = int(parts["month"] or 1)
    day = int(parts["day"] or 1)
    hour = int(parts["hour"] or 0)
    minute = int(parts["minute"] or 0)
    second = int(parts["second"] or 0)
    fraction = parts["fraction"] or ""
    millisecond = int((fraction + "000")[:3])

    if hour == 24:
        if minute or second or millisecond:
            raise ValueError("hour 24 is only valid as 24:00:00.000")
        return datetime(year, month, day) + timedelta(days=1)

    return datetime(
        year,
        month,
        day,
        hour,
        minute,
        second,
        millisecond * MICROS_PER_MILLISECOND,
    )


def _parse_offset(offset: str) -> timedelta:
    """Parse Z, +HH:mm, +HHmm or +HH into a timedelta east of UTC."""
    if offset in ("Z", "z"):
        return timedelta(0)

    match = _OFFSET_PATTERN.fullmatch(offset)
    if match is None:
        raise ValueError(f"invalid UTC offset {offset!r}")

    hours = int(match.group("hours"))
    minutes = int(match.group("minutes") or 0)
    if hours > 23 or minutes > 59:
        raise ValueError(f"UTC offset out of range: {offset!r}")

    delta = timedelta(hours=hours, minutes=minutes)
    return -delta if match.group("sign") == "-" else delta


def format_iso8601(instant: int) -> str:
    """Render an instant as a UTC ISO 8601 string with milliseconds.

    The output is always ``YYYY-MM-DDTHH:mm:ss.sssZ``.

    Args:
        instant: Milliseconds since the Unix epoch.

    Returns:
        The ISO 8601 string.

    Examples:
        >>> format_iso8601(0)
        '1970-01-01T00:00:00.000Z'
        >>> format_iso8601(1735129845123)
        '2024-12-25T12:30:45.123Z'
    """
    dt = utc_datetime(instant)
    millisecond = dt.microsecond // MICROS_PER_MILLISECOND
    return (
        f"{dt.year:04d}-{dt.month:02d}-{dt.day:02d}"
        f"T{dt.hour:02d}:{dt.minute:02d}:{dt.second:02d}.{millisecond:03d}Z"
    )


__all__ = ["parse_instant", "format_iso8601"]
