"""DateFlow: an immutable date/time value wrapper.

DateFlow wraps a single point in time (milliseconds since the Unix epoch)
together with an optional default format pattern and locale, and exposes
accessors, arithmetic, range snapping, comparison, differences and
formatting without ever mutating the wrapped value.

Core Types:
    DateFlow: The immutable instant
    FormatOptions: Pattern and locale passed to DateFlow.format()

Units:
    Unit: year, month, week, day, hour, minute, second, millisecond
    Locale: Supported locale tags and their mapped timezones
    FormatPattern: The 16 supported format patterns

Clocks:
    Clock: Protocol for "now" sources
    SystemClock: The operating system clock (default)
    FixedClock: A clock frozen at one instant

Exceptions:
    DateFlowError: Base exception
    InvalidDateError: Input cannot be resolved to an instant
    InvalidUnitError: Unknown unit
    InvalidConfigError: Unknown pattern, locale or equality mode

Example:
    >>> from dateflow import DateFlow
    >>> christmas = DateFlow("2024-12-25", date_format="DD/MM/YYYY")
    >>> christmas.format()
    '25/12/2024'
    >>> christmas.add(1, "week").format()
    '01/01/2025'
"""

from __future__ import annotations

import logging

__version__ = "0.1.0"

# Core types
from dateflow.core.dateflow import DateFlow
from dateflow.format.options import FormatOptions

# Units
from dateflow.units.locale import Locale, timezone_for_locale
from dateflow.units.pattern import FormatPattern
from dateflow.units.unit import Unit

# Clocks
from dateflow._internal.clock import Clock, FixedClock, SystemClock

# Exceptions
from dateflow.errors import (
    DateFlowError,
    InvalidConfigError,
    InvalidDateError,
    InvalidUnitError,
)

# Format functions
from dateflow.format import IntlOptions, format_iso8601, parse_instant

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__: list[str] = [
    "__version__",
    # Core types
    "DateFlow",
    "FormatOptions",
    # Units
    "FormatPattern",
    "Locale",
    "Unit",
    "timezone_for_locale",
    # Clocks
    "Clock",
    "FixedClock",
    "SystemClock",
    # Exceptions
    "DateFlowError",
    "InvalidDateError",
    "InvalidUnitError",
    "InvalidConfigError",
    # Format functions
    "IntlOptions",
    "parse_instant",
    "format_iso8601",
]
