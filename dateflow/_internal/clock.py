"""Clock sources for DateFlow.

A DateFlow constructed without input reads the current time exactly once
from a clock. The default is the system clock; tests pass a FixedClock.

This module is not part of the public API; Clock, SystemClock and
FixedClock are re-exported from the package root.
"""

from __future__ import annotations

import time
from typing import Protocol


class Clock(Protocol):
    """Anything that can report the current time in epoch milliseconds."""

    def now_millis(self) -> int: ...


class SystemClock:
    """Clock backed by the operating system's wall clock."""

    __slots__ = ()

    def now_millis(self) -> int:
        return time.time_ns() // 1_000_000

    def __repr__(self) -> str:
        return "SystemClock()"


class FixedClock:
    """Clock that always reports the same instant.

    Examples:
        >>> FixedClock(0).now_millis()
        0
    """

    __slots__ = ("_instant",)

    def __init__(self, instant: int) -> None:
        self._instant = int(instant)

    def now_millis(self) -> int:
        return self._instant

    def __repr__(self) -> str:
        return f"FixedClock({self._instant})"


SYSTEM_CLOCK: Clock = SystemClock()


__all__ = [
    "Clock",
    "SystemClock",
    "FixedClock",
    "SYSTEM_CLOCK",
]
