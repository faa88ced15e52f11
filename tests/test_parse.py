"""Tests for date/time string parsing and ISO 8601 output."""

from __future__ import annotations

import pytest

from dateflow import InvalidDateError, format_iso8601, parse_instant

NEW_YEAR_2024 = 1_704_067_200_000  # 2024-01-01T00:00:00.000Z
HOUR = 3_600_000


class TestDateOnly:
    """Test date-only forms, which are UTC."""

    def test_full_date(self) -> None:
        """YYYY-MM-DD is UTC midnight."""
        assert parse_instant("2024-01-01") == NEW_YEAR_2024

    def test_year_month(self) -> None:
        """YYYY-MM is the first of the month."""
        assert parse_instant("2024-06") == 1_717_200_000_000

    def test_year(self) -> None:
        """YYYY is January 1st."""
        assert parse_instant("2024") == NEW_YEAR_2024

    def test_utc_in_any_timezone(self, system_timezone) -> None:
        """Date-only forms ignore the system timezone."""
        system_timezone("Asia/Tokyo")
        assert parse_instant("2024-01-01") == NEW_YEAR_2024


class TestDateTime:
    """Test date-time forms."""

    def test_utc_designator(self) -> None:
        """Z and z mean UTC."""
        assert parse_instant("2024-01-01T00:00:00Z") == NEW_YEAR_2024
        assert parse_instant("2024-01-01t00:00:00z") == NEW_YEAR_2024

    def test_minutes_only(self) -> None:
        """Seconds are optional."""
        assert parse_instant("2024-01-01T01:30Z") == NEW_YEAR_2024 + HOUR + 30 * 60_000

    def test_fraction_truncated(self) -> None:
        """Fractions beyond milliseconds are truncated."""
        assert parse_instant("2024-01-01T00:00:00.1Z") == NEW_YEAR_2024 + 100
        assert parse_instant("2024-01-01T00:00:00.123456Z") == NEW_YEAR_2024 + 123
        assert parse_instant("2024-01-01T00:00:00,5Z") == NEW_YEAR_2024 + 500

    def test_offsets(self) -> None:
        """Offsets in +HH:mm, +HHmm and +HH forms are honored."""
        assert parse_instant("2024-01-01T01:00:00+01:00") == NEW_YEAR_2024
        assert parse_instant("2024-01-01T05:30:00+0530") == NEW_YEAR_2024
        assert parse_instant("2023-12-31T16:00:00-08") == NEW_YEAR_2024

    def test_space_separator(self) -> None:
        """A space may replace the T."""
        assert parse_instant("2024-01-01 00:00:00Z") == NEW_YEAR_2024

    def test_local_without_offset(self, system_timezone) -> None:
        """Without an offset the system timezone applies."""
        system_timezone("Europe/Rome")
        assert parse_instant("2024-01-01T01:00:00") == NEW_YEAR_2024

    def test_hour_24(self) -> None:
        """T24:00 is midnight at the end of the day."""
        assert parse_instant("2023-12-31T24:00:00Z") == NEW_YEAR_2024
        assert parse_instant("2023-12-31T24:00Z") == NEW_YEAR_2024

    def test_whitespace_stripped(self) -> None:
        """Surrounding whitespace is ignored."""
        assert parse_instant("  2024-01-01T00:00:00Z\n") == NEW_YEAR_2024


class TestLocalTransitions:
    """Test local wall clocks that do not map to exactly one instant."""

    def test_gap_moves_forward(self, system_timezone) -> None:
        """A wall clock in the spring-forward gap lands after it."""
        system_timezone("America/New_York")
        assert format_iso8601(parse_instant("2024-03-10T02:30:00")) == "2024-03-10T07:30:00.000Z"

    def test_repeated_hour_takes_earlier(self, system_timezone) -> None:
        """A repeated wall clock resolves to its first occurrence."""
        system_timezone("Europe/Rome")
        assert format_iso8601(parse_instant("2024-10-27T02:30:00")) == "2024-10-27T00:30:00.000Z"


class TestSlashDates:
    """Test legacy slash-separated dates, which are local."""

    def test_slash_date_is_local(self, system_timezone) -> None:
        """YYYY/MM/DD is local midnight."""
        assert parse_instant("2024/01/01") == NEW_YEAR_2024
        system_timezone("Europe/Rome")
        assert parse_instant("2024/01/01") == NEW_YEAR_2024 - HOUR

    def test_slash_date_time(self) -> None:
        """A time may follow a slash date."""
        assert parse_instant("2024/1/1 01:00") == NEW_YEAR_2024 + HOUR
        assert parse_instant("2024/01/01 1:00:00.5") == NEW_YEAR_2024 + HOUR + 500


class TestInvalid:
    """Test rejected strings."""

    def test_unrecognized(self) -> None:
        """Strings in no supported format are rejected."""
        for text in ("", "   ", "yesterday", "01/02/2024", "2024-1-1", "20240101", "2024-01-01T"):
            with pytest.raises(InvalidDateError, match="unrecognized"):
                parse_instant(text)

    def test_out_of_range_components(self) -> None:
        """Components outside their ranges are rejected."""
        for text in (
            "2024-00-10",
            "2024-13-01",
            "2023-02-29",
            "2024-01-32",
            "2024-01-01T23:60",
            "2024-01-01T23:59:60",
            "2024-01-01T24:00:01",
            "2024-01-01T00:00+24:00",
        ):
            with pytest.raises(InvalidDateError):
                parse_instant(text)

    def test_non_ascii_digits(self) -> None:
        """Only ASCII digits are accepted."""
        with pytest.raises(InvalidDateError):
            parse_instant("٢٠٢٤-01-01")

    def test_cause_is_chained(self) -> None:
        """Range errors keep the underlying exception as the cause."""
        with pytest.raises(InvalidDateError) as exc_info:
            parse_instant("2024-02-30")
        assert isinstance(exc_info.value.__cause__, ValueError)


class TestFormatIso8601:
    """Test UTC ISO 8601 output."""

    def test_epoch(self) -> None:
        """The epoch renders with milliseconds and Z."""
        assert format_iso8601(0) == "1970-01-01T00:00:00.000Z"

    def test_milliseconds(self) -> None:
        """Milliseconds are zero-padded to three digits."""
        assert format_iso8601(1_735_129_845_123) == "2024-12-25T12:30:45.123Z"
        assert format_iso8601(NEW_YEAR_2024 + 7) == "2024-01-01T00:00:00.007Z"

    def test_independent_of_system_timezone(self, system_timezone) -> None:
        """Output is always UTC."""
        system_timezone("Asia/Tokyo")
        assert format_iso8601(NEW_YEAR_2024) == "2024-01-01T00:00:00.000Z"
