"""Locale-aware formatting for DateFlow.

When a locale is resolved, a DateFlow is rendered in the IANA timezone
mapped from that locale using CLDR data from Babel. The pattern (if any) is
not substituted literally; its coarse shape only decides which fields are
shown and how wide:

    - "/" date separator: numeric month and day, otherwise 2-digit
    - "HH:mm:ss": hour, minute and second
    - "HH:mm": hour and minute
    - "HH": hour only

Without a pattern the full date (2-digit month and day) and the 24-hour
time with seconds are shown. Hours are always 24-hour.

Functions:
    build_options: Resolve a pattern and locale to an IntlOptions record.
    render: Render an instant with an IntlOptions record.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from datetime import datetime
from zoneinfo import ZoneInfo

from babel import Locale as BabelLocale
from babel.dates import (
    format_datetime,
    get_datetime_format,
    match_skeleton,
    tokenize_pattern,
    untokenize_pattern,
)

from dateflow._internal.calendar import utc_datetime
from dateflow.units.locale import Locale
from dateflow.units.pattern import FormatPattern

NUMERIC = "numeric"
TWO_DIGIT = "2-digit"

# An escaped apostrophe, a quoted literal, or a {0}/{1} placeholder
_GLUE_TOKEN = re.compile(r"''|'((?:[^']|'')+)'|\{([01])\}")


@dataclass(frozen=True)
class IntlOptions:
    """Field-presence and width hints for locale-aware rendering.

    Field values are None (omitted), "numeric" or "2-digit".

    Attributes:
        time_zone: IANA timezone the instant is rendered in.
        year: Year presence/width.
        month: Month presence/width.
        day: Day presence/width.
        hour: Hour presence.
        minute: Minute presence.
        second: Second presence.
        hour12: False for 24-hour clocks, None when no hour is shown.
    """

    time_zone: str
    year: str | None = None
    month: str | None = None
    day: str | None = None
    hour: str | None = None
    minute: str | None = None
    second: str | None = None
    hour12: bool | None = None

    @property
    def date_skeleton(self) -> str:
        """CLDR skeleton for the date fields, e.g. "yMMdd"."""
        return "".join(
            _SKELETON_SYMBOLS[(field, width)]
            for field, width in (
                ("year", self.year),
                ("month", self.month),
                ("day", self.day),
            )
            if width is not None
        )

    @property
    def time_skeleton(self) -> str:
        """CLDR skeleton for the time fields, e.g. "Hms"."""
        return "".join(
            _SKELETON_SYMBOLS[(field, width)]
            for field, width in (
                ("hour", self.hour),
                ("minute", self.minute),
                ("second", self.second),
            )
            if width is not None
        )

    @property
    def skeleton(self) -> str:
        return self.date_skeleton + self.time_skeleton


_SKELETON_SYMBOLS: dict[tuple[str, str], str] = {
    ("year", NUMERIC): "y",
    ("month", NUMERIC): "M",
    ("month", TWO_DIGIT): "MM",
    ("day", NUMERIC): "d",
    ("day", TWO_DIGIT): "dd",
    ("hour", NUMERIC): "H",
    ("minute", NUMERIC): "m",
    ("second", NUMERIC): "s",
}

# Date separator -> month/day width
_DATE_WIDTHS: dict[str, str] = {
    "/": NUMERIC,
    "-": TWO_DIGIT,
}

# Time suffix -> time fields shown
_TIME_FIELDS: dict[str, tuple[str, ...]] = {
    "HH:mm:ss": ("hour", "minute", "second"),
    "HH:mm": ("hour", "minute"),
    "HH": ("hour",),
    "": (),
}

_DEFAULT_FIELDS: dict[str, str | bool | None] = {
    "year": NUMERIC,
    "month": TWO_DIGIT,
    "day": TWO_DIGIT,
    "hour": NUMERIC,
    "minute": NUMERIC,
    "second": NUMERIC,
    "hour12": False,
}


def _pattern_fields(pattern: FormatPattern) -> dict[str, str | bool | None]:
    width = _DATE_WIDTHS[pattern.date_separator]
    fields: dict[str, str | bool | None] = {
        "year": NUMERIC,
        "month": width,
        "day": width,
    }
    time_fields = _TIME_FIELDS[pattern.time_part]
    for field in time_fields:
        fields[field] = NUMERIC
    if time_fields:
        fields["hour12"] = False
    return fields


_PATTERN_FIELDS: dict[FormatPattern, dict[str, str | bool | None]] = {
    pattern: _pattern_fields(pattern) for pattern in FormatPattern
}


def build_options(pattern: FormatPattern | None, locale: Locale) -> IntlOptions:
    """Build the rendering options for a pattern and locale.

    Args:
        pattern: The resolved pattern, or None for the default layout.
        locale: The resolved locale.

    Returns:
        The IntlOptions record.

    Examples:
        >>> build_options(FormatPattern.DMY_SLASH_HM, Locale.IT_IT).skeleton
        'yMdHm'
        >>> build_options(None, Locale.JA_JP).skeleton
        'yMMddHms'
    """
    fields = _DEFAULT_FIELDS if pattern is None else _PATTERN_FIELDS[pattern]
    return IntlOptions(time_zone=locale.timezone, **fields)  # type: ignore[arg-type]


def render(instant: int, options: IntlOptions, locale: Locale) -> str:
    """Render an instant in the options' timezone with the locale's conventions.

    Date and time are rendered from their own skeletons and joined with the
    locale's date-time glue pattern.

    Args:
        instant: Milliseconds since the Unix epoch.
        options: Field hints from build_options.
        locale: Locale whose CLDR data drives the output.

    Returns:
        The localized string.
    """
    babel_locale = BabelLocale.parse(locale.babel_identifier)
    tz = ZoneInfo(options.time_zone)
    moment = utc_datetime(instant)

    parts = [
        _format_skeleton(moment, skeleton, tz, babel_locale)
        for skeleton in (options.date_skeleton, options.time_skeleton)
        if skeleton
    ]
    if len(parts) == 1:
        return parts[0]

    date_text, time_text = parts
    glue = get_datetime_format("medium", locale=babel_locale)
    return _apply_glue(str(glue), date_text, time_text)


def _apply_glue(glue: str, date_text: str, time_text: str) -> str:
    """Fill a CLDR date-time glue pattern such as "{1}, {0}".

    Quoted text is literal (so a quoted "{0}" stays as typed) and "''" is
    an apostrophe.

    Examples:
        >>> _apply_glue("{1} 'at' {0}", "Jan 5", "09:00")
        'Jan 5 at 09:00'
    """
    values = {"0": time_text, "1": date_text}

    def substitute(match: re.Match[str]) -> str:
        quoted, placeholder = match.group(1), match.group(2)
        if placeholder is not None:
            return values[placeholder]
        if quoted is not None:
            return quoted.replace("''", "'")
        return "'"

    return _GLUE_TOKEN.sub(substitute, glue)


def _format_skeleton(
    moment: datetime,
    skeleton: str,
    tz: ZoneInfo,
    babel_locale: BabelLocale,
) -> str:
    """Format with the locale pattern closest to a skeleton.

    Numeric month and day fields narrower than the skeleton asks for are
    widened; locales that always pad (en-GB) keep their padding.
    """
    available = babel_locale.datetime_skeletons
    key = skeleton if skeleton in available else match_skeleton(skeleton, available)
    pattern = str(available[key]) if key is not None else skeleton

    requested = {
        char: width
        for kind, (char, width) in tokenize_pattern(skeleton)
        if kind == "field" and char in "Md"
    }
    tokens = []
    for kind, value in tokenize_pattern(pattern):
        if kind == "field":
            char, width = value
            if char in requested and width < requested[char]:
                value = (char, requested[char])
        tokens.append((kind, value))

    return format_datetime(
        moment,
        untokenize_pattern(tokens),
        tzinfo=tz,
        locale=babel_locale,
    )


__all__ = [
    "IntlOptions",
    "build_options",
    "render",
    "NUMERIC",
    "TWO_DIGIT",
]
