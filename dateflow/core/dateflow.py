"""DateFlow: an immutable wrapper around a point in time.

This module provides the DateFlow class, which stores an instant as integer
milliseconds since the Unix epoch together with an optional default format
pattern and an optional default locale.
"""

from __future__ import annotations

import logging
import math
from datetime import date, datetime
from typing import TYPE_CHECKING, Any, NoReturn, Union

from dateflow._internal.calendar import (
    local_datetime,
    local_to_instant,
    utc_datetime,
    weekday,
)
from dateflow._internal.clock import SYSTEM_CLOCK, Clock
from dateflow._internal.constants import EPOCH_UTC, ONE_MILLISECOND
from dateflow._internal.validation import (
    EqualityMode,
    coerce_locale,
    coerce_pattern,
    coerce_unit,
    validate_mode,
)
from dateflow.arithmetic.comparisons import diff as _diff
from dateflow.arithmetic.comparisons import same_local_day
from dateflow.arithmetic.range_ops import end_of as _end_of
from dateflow.arithmetic.range_ops import start_of as _start_of
from dateflow.arithmetic.shift import shift
from dateflow.errors import InvalidDateError
from dateflow.format.intl import build_options, render
from dateflow.format.iso8601 import format_iso8601, parse_instant
from dateflow.format.manual import substitute_tokens
from dateflow.format.options import FormatArgument, FormatOptions
from dateflow.units.locale import Locale
from dateflow.units.pattern import FormatPattern
from dateflow.units.unit import Unit

if TYPE_CHECKING:
    DateInput = Union["DateFlow", datetime, date, int, float, str, None]

logger = logging.getLogger(__name__)

_RANGE_ERRORS = (OverflowError, OSError, ValueError)

_KEEP: Any = object()


def resolve_instant(value: DateInput, clock: Clock | None = None) -> int:
    """Resolve any accepted date input to epoch milliseconds.

    Args:
        value: None (now), a DateFlow, a datetime (naive means local time),
            a date (local midnight), a millisecond timestamp or a string.
        clock: Clock read when value is None. Defaults to the system clock.

    Returns:
        Milliseconds since the Unix epoch.

    Raises:
        InvalidDateError: If value does not describe an instant in years
            0001-9999.

    Examples:
        >>> resolve_instant(1.9)
        1
        >>> resolve_instant("1970-01-01T00:00:01Z")
        1000
    """
    try:
        instant = _to_millis(value, clock)
        # Both views must be representable for accessors and ISO output
        utc_datetime(instant)
        local_datetime(instant)
    except _RANGE_ERRORS as exc:
        logger.debug("rejecting date input %r: %s", value, exc)
        raise InvalidDateError(value, "out of range") from exc
    return instant


def _to_millis(value: DateInput, clock: Clock | None) -> int:
    if value is None:
        return (clock or SYSTEM_CLOCK).now_millis()
    if isinstance(value, DateFlow):
        return value._instant
    if isinstance(value, datetime):
        if value.utcoffset() is None:
            return local_to_instant(value)
        return (value - EPOCH_UTC) // ONE_MILLISECOND
    if isinstance(value, date):
        return local_to_instant(datetime(value.year, value.month, value.day))
    if isinstance(value, bool):
        _reject(value, "booleans are not timestamps")
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        if not math.isfinite(value):
            _reject(value, "timestamp is not finite")
        # Fractional milliseconds are dropped, truncating toward zero
        return int(value)
    if isinstance(value, str):
        return parse_instant(value)
    _reject(value, f"unsupported type {type(value).__name__}")


def _reject(value: object, reason: str) -> NoReturn:
    logger.debug("rejecting date input %r: %s", value, reason)
    raise InvalidDateError(value, reason)


class DateFlow:
    """An immutable point in time with optional formatting defaults.

    DateFlow wraps an instant (integer milliseconds since the Unix epoch).
    Calendar accessors, snapping and calendar arithmetic all read the
    instant in the local system timezone. Every operation that "changes" a
    DateFlow returns a new instance; the wrapped instant, default pattern and
    default locale never change.

    Attributes:
        year: The local year.
        month: The local month (1-12).
        day: The local day of the month (1-31).
        hour: The local hour (0-23).
        minute: The local minute (0-59).
        second: The local second (0-59).
        millisecond: The millisecond (0-999).
        date_format: The default pattern used by format(), or None.
        locale: The default locale used by format(), or None.

    Examples:
        >>> DateFlow("2024-12-25", date_format="DD/MM/YYYY").format()
        '25/12/2024'

        >>> start = DateFlow("2024-02-10")
        >>> end = DateFlow("2024-04-05")
        >>> end.diff(start, "day")
        55
        >>> end.diff(start, "month")
        2

        >>> DateFlow(0).add(1, "day").to_iso_string()
        '1970-01-02T00:00:00.000Z'
    """

    __slots__ = ("_instant", "_date_format", "_locale")

    _instant: int
    _date_format: FormatPattern | None
    _locale: Locale | None

    def __init__(
        self,
        date: DateInput = None,
        *,
        date_format: FormatPattern | str | None = None,
        locale: Locale | str | None = None,
        clock: Clock | None = None,
    ) -> None:
        """Create a DateFlow.

        Args:
            date: The instant to wrap. None reads the current time from
                clock; a DateFlow, datetime, date, millisecond timestamp or
                date/time string is resolved to its instant.
            date_format: Default pattern for format(), e.g. "DD/MM/YYYY".
            locale: Default locale for format(), e.g. "it-IT". Also enables
                DST correction in add() and subtract().
            clock: Clock source for "now". Defaults to the system clock.

        Raises:
            InvalidDateError: If date cannot be resolved to an instant.
            InvalidConfigError: If date_format or locale is not supported.
        """
        instant = resolve_instant(date, clock)
        object.__setattr__(self, "_instant", instant)
        object.__setattr__(self, "_date_format", coerce_pattern(date_format))
        object.__setattr__(self, "_locale", coerce_locale(locale))

    @classmethod
    def _from_internal(
        cls,
        instant: int,
        date_format: FormatPattern | None,
        locale: Locale | None,
    ) -> DateFlow:
        """Create a DateFlow from already-validated parts.

        Range-checks the instant, since arithmetic can leave the
        representable range.
        """
        instance = object.__new__(cls)
        object.__setattr__(instance, "_instant", resolve_instant(instant))
        object.__setattr__(instance, "_date_format", date_format)
        object.__setattr__(instance, "_locale", locale)
        return instance

    def _derive(self, instant: int) -> DateFlow:
        return DateFlow._from_internal(instant, self._date_format, self._locale)

    # Properties - local calendar fields

    @property
    def day(self) -> int:
        """Return the local day of the month (1-31)."""
        return local_datetime(self._instant).day

    @property
    def month(self) -> int:
        """Return the local month (1 for January, 12 for December)."""
        return local_datetime(self._instant).month

    @property
    def year(self) -> int:
        """Return the local year."""
        return local_datetime(self._instant).year

    @property
    def hour(self) -> int:
        """Return the local hour (0-23)."""
        return local_datetime(self._instant).hour

    @property
    def minute(self) -> int:
        """Return the local minute (0-59)."""
        return local_datetime(self._instant).minute

    @property
    def second(self) -> int:
        """Return the local second (0-59)."""
        return local_datetime(self._instant).second

    @property
    def millisecond(self) -> int:
        """Return the millisecond within the second (0-999)."""
        return self._instant % 1000

    @property
    def weekday(self) -> int:
        """Return the local day of week, Sunday=0 through Saturday=6."""
        return weekday(local_datetime(self._instant))

    # Properties - configuration

    @property
    def date_format(self) -> FormatPattern | None:
        return self._date_format

    @property
    def locale(self) -> Locale | None:
        return self._locale

    @property
    def timezone(self) -> str | None:
        """Return the IANA timezone mapped from the locale, or None."""
        return self._locale.timezone if self._locale is not None else None

    # Arithmetic

    def add(self, amount: int, unit: Unit | str) -> DateFlow:
        """Return a new DateFlow with amount units added.

        Years, months, weeks and days are calendar arithmetic on the local
        wall clock with rollover (Jan 31 + 1 month is Mar 2 or Mar 3), so the
        local time of day is kept across DST transitions. Hours and smaller
        units add elapsed time; when a locale is set, an elapsed shift across
        a DST transition also keeps the local wall-clock time.

        Args:
            amount: Number of units (any integer, including negative).
            unit: The unit, as a Unit or its name.

        Returns:
            A new DateFlow with the same date_format and locale.

        Raises:
            TypeError: If amount is not an integer.
            InvalidUnitError: If unit is unknown.
            InvalidDateError: If the result leaves years 0001-9999.

        Examples:
            >>> DateFlow("2023-01-31").add(1, "month").to_iso_string()
            '2023-03-03T00:00:00.000Z'
        """
        if not isinstance(amount, int) or isinstance(amount, bool):
            raise TypeError(f"amount must be an integer, got {type(amount).__name__}")
        resolved = coerce_unit(unit)

        try:
            instant = shift(
                self._instant,
                amount,
                resolved,
                correct_dst=self._locale is not None,
            )
        except _RANGE_ERRORS as exc:
            raise InvalidDateError(
                f"{self.to_iso_string()} + {amount} {resolved.value}",
                "out of range",
            ) from exc
        return self._derive(instant)

    def subtract(self, amount: int, unit: Unit | str) -> DateFlow:
        """Return a new DateFlow with amount units subtracted.

        Equivalent to add(-amount, unit).
        """
        if not isinstance(amount, int) or isinstance(amount, bool):
            raise TypeError(f"amount must be an integer, got {type(amount).__name__}")
        return self.add(-amount, unit)

    # Range snapping

    def start_of(self, unit: Unit | str) -> DateFlow:
        """Return a new DateFlow at the start of the containing unit.

        Weeks start on Sunday.

        Examples:
            >>> DateFlow("2024-05-15T10:20:30Z").start_of("week").to_iso_string()
            '2024-05-12T00:00:00.000Z'
        """
        return self._derive(_start_of(self._instant, coerce_unit(unit)))

    def end_of(self, unit: Unit | str) -> DateFlow:
        """Return a new DateFlow at the end of the containing unit.

        Weeks end on Saturday.

        Examples:
            >>> DateFlow("2024-02-10").end_of("month").to_iso_string()
            '2024-02-29T23:59:59.999Z'
        """
        return self._derive(_end_of(self._instant, coerce_unit(unit)))

    # Comparison

    def is_before(self, other: DateInput) -> bool:
        """Return True if this instant is strictly earlier than other."""
        return self._instant < resolve_instant(other)

    def is_after(self, other: DateInput) -> bool:
        """Return True if this instant is strictly later than other."""
        return self._instant > resolve_instant(other)

    def equal(self, other: DateInput, mode: EqualityMode = "strict") -> bool:
        """Compare with another date.

        Args:
            other: Anything accepted by the constructor.
            mode: "strict" compares instants exactly; "short" compares only
                the local year, month and day.

        Raises:
            InvalidConfigError: If mode is not "strict" or "short".

        Examples:
            >>> a = DateFlow("2024-01-01T00:00:00Z")
            >>> b = DateFlow("2024-01-01T12:00:00Z")
            >>> a.equal(b, "short"), a.equal(b, "strict")
            (True, False)
        """
        validate_mode(mode)
        instant = resolve_instant(other)
        if mode == "strict":
            return self._instant == instant
        return same_local_day(self._instant, instant)

    def diff(self, other: DateInput, unit: Unit | str) -> int:
        """Return self - other in the given unit.

        Fixed units floor the result (toward negative infinity). Months and
        years compare calendar fields only.
        """
        return _diff(self._instant, resolve_instant(other), coerce_unit(unit))

    # Formatting

    def format(self, options: FormatArgument = None) -> str:
        """Format this DateFlow as a string.

        Args:
            options: None, a pattern ("DD/MM/YYYY" or a FormatPattern), a
                FormatOptions, or a mapping with "date_format" and/or
                "locale". Given values override the instance defaults.

        Returns:
            - With a locale: the date (and time) localized by Babel in the
              locale's timezone, with fields chosen by the pattern.
            - With only a pattern: the pattern with its tokens replaced by
              local time fields.
            - With neither: the UTC ISO 8601 string.

        Raises:
            InvalidConfigError: If a pattern or locale is not supported.

        Examples:
            >>> DateFlow("2024-12-25T08:05:09Z").format("YYYY/MM/DD HH:mm:ss")
            '2024/12/25 08:05:09'
            >>> DateFlow(0).format()
            '1970-01-01T00:00:00.000Z'
        """
        resolved = FormatOptions.from_argument(options).with_defaults(
            self._date_format, self._locale
        )

        if resolved.locale is not None:
            intl_options = build_options(resolved.date_format, resolved.locale)
            return render(self._instant, intl_options, resolved.locale)

        if resolved.date_format is None:
            return self.to_iso_string()

        return substitute_tokens(
            resolved.date_format.value, local_datetime(self._instant)
        )

    # Utilities

    def clone(self) -> DateFlow:
        """Return a distinct DateFlow with the same instant and configuration."""
        return self._derive(self._instant)

    def with_config(
        self,
        *,
        date_format: FormatPattern | str | None = _KEEP,
        locale: Locale | str | None = _KEEP,
    ) -> DateFlow:
        """Return a copy with different defaults.

        Omitted arguments keep the current value; None clears it.

        Examples:
            >>> DateFlow(0, locale="it-IT").with_config(locale=None).locale is None
            True
        """
        return DateFlow._from_internal(
            self._instant,
            self._date_format if date_format is _KEEP else coerce_pattern(date_format),
            self._locale if locale is _KEEP else coerce_locale(locale),
        )

    def value_of(self) -> int:
        """Return the instant as milliseconds since the Unix epoch."""
        return self._instant

    def to_iso_string(self) -> str:
        """Return the instant as a UTC ISO 8601 string with milliseconds.

        The result never depends on date_format or locale.
        """
        return format_iso8601(self._instant)

    def to_datetime(self) -> datetime:
        """Return the instant as an aware UTC datetime."""
        return utc_datetime(self._instant)

    # Immutability

    def __setattr__(self, name: str, value: object) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __delattr__(self, name: str) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __copy__(self) -> DateFlow:
        return self

    def __deepcopy__(self, memo: dict) -> DateFlow:
        return self

    def __reduce__(self) -> tuple:
        return (
            DateFlow._from_internal,
            (self._instant, self._date_format, self._locale),
        )

    # Comparison operators

    def __eq__(self, other: object) -> bool:
        """Two DateFlows are equal if they wrap the same instant."""
        if not isinstance(other, DateFlow):
            return NotImplemented
        return self._instant == other._instant

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, DateFlow):
            return NotImplemented
        return self._instant < other._instant

    def __le__(self, other: object) -> bool:
        if not isinstance(other, DateFlow):
            return NotImplemented
        return self._instant <= other._instant

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, DateFlow):
            return NotImplemented
        return self._instant > other._instant

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, DateFlow):
            return NotImplemented
        return self._instant >= other._instant

    def __hash__(self) -> int:
        return hash(self._instant)

    def __int__(self) -> int:
        return self._instant

    def __repr__(self) -> str:
        """Return a detailed string representation."""
        parts = [repr(self.to_iso_string())]
        if self._date_format is not None:
            parts.append(f"date_format={self._date_format.value!r}")
        if self._locale is not None:
            parts.append(f"locale={self._locale.value!r}")
        return f"DateFlow({', '.join(parts)})"

    def __str__(self) -> str:
        """Return the UTC ISO 8601 representation."""
        return self.to_iso_string()


__all__ = ["DateFlow", "resolve_instant"]
