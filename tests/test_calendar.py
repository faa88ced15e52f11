"""Tests for the local-time calendar helpers."""

from __future__ import annotations

from datetime import datetime, timedelta

import pytest

from dateflow._internal.calendar import (
    compose,
    instant_at,
    local_datetime,
    local_to_instant,
    utc_offset,
    weekday,
)


class TestCompose:
    """Test field rollover in compose."""

    def test_day_overflow(self) -> None:
        """Days past the month end roll into the next month."""
        assert compose(2023, 1, 31) == datetime(2023, 3, 3)
        assert compose(2024, 1, 31) == datetime(2024, 3, 2)
        assert compose(2024, 3, 31) == datetime(2024, 5, 1)

    def test_day_zero(self) -> None:
        """Day 0 is the last day of the previous month."""
        assert compose(2024, 2, 0) == datetime(2024, 2, 29)
        assert compose(2024, 0, 0) == datetime(2023, 12, 31)

    def test_month_overflow(self) -> None:
        """Month indexes outside 0-11 carry into the year."""
        assert compose(2024, 12, 1) == datetime(2025, 1, 1)
        assert compose(2024, -1, 1) == datetime(2023, 12, 1)
        assert compose(2024, 25, 1) == datetime(2026, 2, 1)

    def test_time_overflow(self) -> None:
        """Time fields carry into larger fields."""
        assert compose(2024, 11, 31, 23, 59, 59, 1000) == datetime(2025, 1, 1)
        assert compose(2024, 0, 1, -1) == datetime(2023, 12, 31, 23)

    def test_milliseconds(self) -> None:
        """Milliseconds become microseconds."""
        assert compose(2024, 0, 1, 0, 0, 0, 999).microsecond == 999_000

    def test_out_of_range(self) -> None:
        """Results outside years 1-9999 raise."""
        with pytest.raises((ValueError, OverflowError)):
            compose(10000, 0, 1)
        with pytest.raises((ValueError, OverflowError)):
            compose(1, 0, 0)


class TestLocalViews:
    """Test projections between instants and wall clocks."""

    def test_local_datetime_utc(self) -> None:
        """With TZ=UTC the wall clock is the UTC time."""
        assert local_datetime(0) == datetime(1970, 1, 1)

    def test_offset_and_round_trip(self, system_timezone) -> None:
        """Offsets follow DST; local_to_instant inverts local_datetime."""
        system_timezone("Europe/Rome")
        winter = 1_704_067_200_000  # 2024-01-01T00:00Z
        summer = 1_719_792_000_000  # 2024-07-01T00:00Z
        assert utc_offset(winter) == timedelta(hours=1)
        assert utc_offset(summer) == timedelta(hours=2)
        for instant in (winter, summer, winter + 123):
            assert local_to_instant(local_datetime(instant)) == instant

    def test_instant_at_fixed_offset(self) -> None:
        """instant_at reads a wall clock at a fixed UTC offset."""
        offset = timedelta(hours=-5, minutes=-30)
        wall = datetime(1970, 1, 12, 8, 16, 40, 7_000)
        assert instant_at(wall, offset) == 1_000_000_007
        assert instant_at(datetime(1970, 1, 1, 1), timedelta(hours=1)) == 0

    def test_weekday(self) -> None:
        """Sunday is 0 and Saturday is 6."""
        assert weekday(datetime(2024, 5, 12)) == 0
        assert weekday(datetime(2024, 5, 13)) == 1
        assert weekday(datetime(2024, 5, 18)) == 6
