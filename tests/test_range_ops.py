"""Tests for start_of and end_of snapping."""

from __future__ import annotations

import pytest

from dateflow import DateFlow, InvalidUnitError, Unit
from dateflow.arithmetic import end_of, start_of


def iso(d: DateFlow) -> str:
    return d.to_iso_string()


SAMPLE = DateFlow("2024-05-15T10:20:30.456Z")  # a Wednesday


class TestStartOf:
    """Test start_of in UTC."""

    def test_each_unit(self) -> None:
        """Each unit zeroes everything below it."""
        expected = {
            "year": "2024-01-01T00:00:00.000Z",
            "month": "2024-05-01T00:00:00.000Z",
            "week": "2024-05-12T00:00:00.000Z",
            "day": "2024-05-15T00:00:00.000Z",
            "hour": "2024-05-15T10:00:00.000Z",
            "minute": "2024-05-15T10:20:00.000Z",
            "second": "2024-05-15T10:20:30.000Z",
            "millisecond": "2024-05-15T10:20:30.456Z",
        }
        for unit, value in expected.items():
            assert iso(SAMPLE.start_of(unit)) == value, unit

    def test_week_starts_sunday(self) -> None:
        """Weeks start on Sunday even across month and year boundaries."""
        assert iso(DateFlow("2024-06-01T12:00:00Z").start_of("week")) == "2024-05-26T00:00:00.000Z"
        assert iso(DateFlow("2025-01-01T12:00:00Z").start_of("week")) == "2024-12-29T00:00:00.000Z"

    def test_sunday_is_its_own_week_start(self) -> None:
        """A Sunday snaps to its own midnight."""
        assert iso(DateFlow("2024-06-02T18:00:00Z").start_of("week")) == "2024-06-02T00:00:00.000Z"

    def test_start_of_is_idempotent(self) -> None:
        """Snapping twice is the same as snapping once."""
        for unit in Unit:
            once = SAMPLE.start_of(unit)
            assert once.start_of(unit) == once

    def test_before_epoch(self) -> None:
        """Negative instants snap down, not toward zero."""
        d = DateFlow("1969-12-31T23:59:59.500Z")
        assert iso(d.start_of("second")) == "1969-12-31T23:59:59.000Z"
        assert iso(d.start_of("hour")) == "1969-12-31T23:00:00.000Z"


class TestEndOf:
    """Test end_of in UTC."""

    def test_each_unit(self) -> None:
        """Each unit fills everything below it with its maximum."""
        expected = {
            "year": "2024-12-31T23:59:59.999Z",
            "month": "2024-05-31T23:59:59.999Z",
            "week": "2024-05-18T23:59:59.999Z",
            "day": "2024-05-15T23:59:59.999Z",
            "hour": "2024-05-15T10:59:59.999Z",
            "minute": "2024-05-15T10:20:59.999Z",
            "second": "2024-05-15T10:20:30.999Z",
            "millisecond": "2024-05-15T10:20:30.456Z",
        }
        for unit, value in expected.items():
            assert iso(SAMPLE.end_of(unit)) == value, unit

    def test_end_of_february(self) -> None:
        """Month end honors leap years."""
        assert iso(DateFlow("2024-02-10").end_of("month")) == "2024-02-29T23:59:59.999Z"
        assert iso(DateFlow("2023-02-10").end_of("month")) == "2023-02-28T23:59:59.999Z"

    def test_end_of_thirty_day_month(self) -> None:
        """April has 30 days."""
        assert iso(DateFlow("2024-04-30T23:00:00Z").end_of("month")) == "2024-04-30T23:59:59.999Z"

    def test_week_ends_saturday(self) -> None:
        """Weeks end on Saturday even across a year boundary."""
        assert iso(DateFlow("2024-12-30").end_of("week")) == "2025-01-04T23:59:59.999Z"
        assert iso(DateFlow("2024-06-01").end_of("week")) == "2024-06-01T23:59:59.999Z"


class TestSnappingResults:
    """Test what start_of and end_of return."""

    def test_original_unchanged(self) -> None:
        """The receiver never changes."""
        d = DateFlow("2024-05-15T10:20:30.456Z")
        d.start_of("year")
        d.end_of("year")
        assert iso(d) == "2024-05-15T10:20:30.456Z"

    def test_config_carried(self) -> None:
        """The new instance keeps date_format and locale."""
        d = DateFlow(0, date_format="YYYY-MM-DD", locale="es-ES").start_of("month")
        assert d.date_format is not None
        assert d.locale is not None

    def test_unknown_unit(self) -> None:
        """Unknown units raise InvalidUnitError."""
        with pytest.raises(InvalidUnitError):
            SAMPLE.start_of("quarter")  # type: ignore[arg-type]
        with pytest.raises(InvalidUnitError):
            SAMPLE.end_of("decade")  # type: ignore[arg-type]

    def test_raw_functions(self) -> None:
        """The instant-level functions match the methods."""
        assert start_of(90_061_001, Unit.MINUTE) == 90_060_000
        assert end_of(90_061_001, Unit.MINUTE) == 90_119_999


class TestSnappingInLocalTime:
    """Test snapping in a system timezone with DST."""

    def test_day_bounds_on_spring_forward(self, system_timezone) -> None:
        """The 23-hour day starts at CET midnight and ends in CEST."""
        system_timezone("Europe/Rome")
        d = DateFlow("2024-03-31T12:00:00")
        assert iso(d.start_of("day")) == "2024-03-30T23:00:00.000Z"
        assert iso(d.end_of("day")) == "2024-03-31T21:59:59.999Z"

    def test_day_bounds_on_fall_back(self, system_timezone) -> None:
        """The 25-hour day starts in CEST and ends in CET."""
        system_timezone("Europe/Rome")
        d = DateFlow("2024-10-27T12:00:00")
        assert iso(d.start_of("day")) == "2024-10-26T22:00:00.000Z"
        assert iso(d.end_of("day")) == "2024-10-27T22:59:59.999Z"

    def test_repeated_hour_first_pass(self, system_timezone) -> None:
        """02:30 CEST snaps within the first 02:00 hour."""
        system_timezone("Europe/Rome")
        d = DateFlow("2024-10-27T00:30:00Z")
        assert d.hour == 2
        assert iso(d.start_of("hour")) == "2024-10-27T00:00:00.000Z"
        assert iso(d.end_of("hour")) == "2024-10-27T00:59:59.999Z"

    def test_repeated_hour_second_pass(self, system_timezone) -> None:
        """02:30 CET snaps within the second 02:00 hour."""
        system_timezone("Europe/Rome")
        d = DateFlow("2024-10-27T01:30:00Z")
        assert d.hour == 2
        assert iso(d.start_of("hour")) == "2024-10-27T01:00:00.000Z"
        assert iso(d.end_of("hour")) == "2024-10-27T01:59:59.999Z"

    def test_month_in_new_york(self, system_timezone) -> None:
        """Month bounds are local midnights."""
        system_timezone("America/New_York")
        d = DateFlow("2024-03-01T02:00:00Z")  # Feb 29, 21:00 local
        assert iso(d.start_of("month")) == "2024-02-01T05:00:00.000Z"
        assert iso(d.end_of("month")) == "2024-03-01T04:59:59.999Z"


class TestBracketInvariant:
    """start_of(u) <= d <= end_of(u) for every unit."""

    INSTANTS = (
        "2024-05-15T10:20:30.456Z",
        "2024-03-31T01:30:00Z",
        "2024-10-27T00:30:00Z",
        "2024-10-27T01:30:00Z",
        "2024-03-10T07:15:00Z",
        "2024-11-03T05:30:00Z",
        "2024-11-03T06:30:00Z",
        "1969-12-31T23:59:59.999Z",
        "2024-12-31T23:59:59.999Z",
    )

    @pytest.mark.parametrize("zone", ["UTC", "Europe/Rome", "America/New_York", "Asia/Tokyo"])
    def test_bracket(self, system_timezone, zone: str) -> None:
        """Every instant lies within its own snapped unit."""
        system_timezone(zone)
        for text in self.INSTANTS:
            d = DateFlow(text)
            for unit in Unit:
                start = d.start_of(unit)
                end = d.end_of(unit)
                assert start <= d <= end, (zone, text, unit)
                assert not start.is_after(end)
