"""Internal utilities for DateFlow.

This module contains private implementation details:
    - constants: Unit lengths and epoch references
    - calendar: Local-time projections and field rollover
    - clock: Clock sources for "now"
    - validation: Unit, pattern, locale and mode validation

The submodules are imported directly; only the clocks are re-exported here.

Note: This module is not part of the public API.
"""

from __future__ import annotations

from dateflow._internal.clock import Clock, FixedClock, SystemClock

__all__: list[str] = [
    "Clock",
    "FixedClock",
    "SystemClock",
]
