"""DateFlow units and enumerations.

This module provides:
    - Unit: Arithmetic/snapping units (YEAR, MONTH, ..., MILLISECOND)
    - Locale: Supported locale tags and their mapped timezones
    - FormatPattern: The 16 supported format patterns
"""

from __future__ import annotations

from dateflow.units.locale import Locale, timezone_for_locale
from dateflow.units.pattern import FormatPattern
from dateflow.units.unit import Unit

__all__: list[str] = [
    "FormatPattern",
    "Locale",
    "Unit",
    "timezone_for_locale",
]
