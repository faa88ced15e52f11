"""Validation utilities for DateFlow.

Units, patterns and locales are accepted either as enum members or as their
string values. These helpers normalize them to enum members and raise the
matching DateFlow error for anything else.

This module is not part of the public API.
"""

from __future__ import annotations

from typing import Literal

from dateflow.errors import InvalidConfigError, InvalidUnitError
from dateflow.units.locale import Locale
from dateflow.units.pattern import FormatPattern
from dateflow.units.unit import Unit

EqualityMode = Literal["strict", "short"]

_EQUALITY_MODES: frozenset[str] = frozenset({"strict", "short"})


def coerce_unit(unit: Unit | str) -> Unit:
    """Return unit as a Unit member.

    Raises:
        InvalidUnitError: If unit is not a known unit.

    Examples:
        >>> coerce_unit("day")
        <Unit.DAY: 'day'>
    """
    if isinstance(unit, Unit):
        return unit
    try:
        return Unit(unit)
    except ValueError:
        valid = ", ".join(u.value for u in Unit)
        raise InvalidUnitError(
            f"unit must be one of {valid}, got {unit!r}"
        ) from None


def coerce_pattern(pattern: FormatPattern | str | None) -> FormatPattern | None:
    """Return pattern as a FormatPattern member (None passes through).

    Raises:
        InvalidConfigError: If pattern is not one of the 16 patterns.
    """
    if pattern is None or isinstance(pattern, FormatPattern):
        return pattern
    try:
        return FormatPattern(pattern)
    except ValueError:
        raise InvalidConfigError(f"unsupported date format {pattern!r}") from None


def coerce_locale(locale: Locale | str | None) -> Locale | None:
    """Return locale as a Locale member (None passes through).

    Raises:
        InvalidConfigError: If locale is not a supported tag.
    """
    if locale is None or isinstance(locale, Locale):
        return locale
    try:
        return Locale(locale)
    except ValueError:
        raise InvalidConfigError(f"unsupported locale {locale!r}") from None


def validate_mode(mode: str) -> None:
    """Validate an equality mode ("strict" or "short").

    Raises:
        InvalidConfigError: If mode is anything else.
    """
    if mode not in _EQUALITY_MODES:
        raise InvalidConfigError(
            f"mode must be 'strict' or 'short', got {mode!r}"
        )


__all__ = [
    "EqualityMode",
    "coerce_unit",
    "coerce_pattern",
    "coerce_locale",
    "validate_mode",
]
