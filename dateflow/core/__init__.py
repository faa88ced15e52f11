"""Core DateFlow types.

This module provides:
    - DateFlow: Immutable instant with default format and locale
    - resolve_instant: Resolve any accepted date input to epoch milliseconds
"""

from __future__ import annotations

from dateflow.core.dateflow import DateFlow, resolve_instant

__all__: list[str] = [
    "DateFlow",
    "resolve_instant",
]
