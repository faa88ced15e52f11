"""DateFlow formatting and parsing.

This module provides the string conversions behind DateFlow:
    - ISO 8601 parsing of string input and UTC ISO 8601 output
    - Manual token substitution for patterns without a locale
    - Locale-aware rendering through Babel

Functions:
    parse_instant: Parse a date/time string into epoch milliseconds.
    format_iso8601: Render epoch milliseconds as a UTC ISO 8601 string.
    substitute_tokens: Replace YYYY/MM/DD/HH/mm/ss tokens in a pattern.
    build_options: Resolve a pattern and locale to rendering hints.
    render: Render an instant with rendering hints and a locale.

Types:
    FormatOptions: Resolved format() argument (pattern and locale).
"""

from __future__ import annotations

from dateflow.format.intl import IntlOptions, build_options, render
from dateflow.format.iso8601 import format_iso8601, parse_instant
from dateflow.format.manual import substitute_tokens
from dateflow.format.options import FormatOptions

__all__: list[str] = [
    # ISO 8601
    "parse_instant",
    "format_iso8601",
    # Manual patterns
    "substitute_tokens",
    # Locale-aware
    "IntlOptions",
    "build_options",
    "render",
    # Argument resolution
    "FormatOptions",
]
