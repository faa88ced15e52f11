"""Instant arithmetic for DateFlow.

The functions in this module operate on raw epoch milliseconds and are the
implementations behind the DateFlow methods of the same purpose.

Shift Operations (from dateflow.arithmetic.shift):
    - shift: Add an amount of a unit, with optional DST correction
    - correct_dst_change: Keep the wall clock across a DST transition

Range Operations (from dateflow.arithmetic.range_ops):
    - start_of: First millisecond of the containing unit
    - end_of: Last millisecond of the containing unit

Comparison Operations (from dateflow.arithmetic.comparisons):
    - diff: Difference in a unit
    - same_local_day: Same local calendar date
"""

from __future__ import annotations

from dateflow.arithmetic.comparisons import diff, same_local_day
from dateflow.arithmetic.range_ops import end_of, start_of
from dateflow.arithmetic.shift import correct_dst_change, shift

__all__ = [
    # Shift operations
    "shift",
    "correct_dst_change",
    # Range operations
    "start_of",
    "end_of",
    # Comparison operations
    "diff",
    "same_local_day",
]
