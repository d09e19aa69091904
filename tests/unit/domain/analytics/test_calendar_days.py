"""Test calendar day helpers."""

from datetime import date, datetime, timezone
from zoneinfo import ZoneInfo

import pytest

from src.domain.analytics.exceptions import InvalidDateFormatError
from src.domain.analytics.services.calendar_days import (
    compare_days,
    day_to_iso,
    format_day,
    iso_to_day,
    month_bounds,
    parse_day,
    start_of_week,
)


class TestDayFormatting:
    """Test formatting and parsing of day keys."""

    def test_format_truncates_time_of_day(self):
        """Test formatting drops the time of day."""
        assert format_day(datetime(2023, 5, 7, 23, 59, 59)) == "07.05.2023"

    def test_format_converts_aware_timestamps(self):
        """Test aware timestamps are formatted in the requested zone."""
        moment = datetime(2023, 5, 7, 22, 0, tzinfo=timezone.utc)

        assert format_day(moment, tz=ZoneInfo("Europe/Berlin")) == "08.05.2023"
        assert format_day(moment, tz=timezone.utc) == "07.05.2023"

    def test_parse_day(self):
        """Test parsing returns the calendar date."""
        assert parse_day("29.02.2024") == date(2024, 2, 29)

    @pytest.mark.parametrize("value", ["2023-01-01", "32.01.2023", "", None])
    def test_parse_invalid_day(self, value):
        """Test invalid day keys raise a date format error."""
        with pytest.raises(InvalidDateFormatError):
            parse_day(value)


class TestCompareDays:
    """Test chronological comparison of day keys."""

    @pytest.mark.parametrize(
        "first,second,expected",
        [
            ("01.01.2023", "02.01.2023", -1),
            ("02.01.2023", "01.01.2023", 1),
            ("15.06.2023", "15.06.2023", 0),
            ("01.12.2022", "05.01.2023", -1),
            ("31.01.2023", "01.02.2023", -1),
        ],
    )
    def test_compare(self, first, second, expected):
        """Test comparison uses calendar order."""
        assert compare_days(first, second) == expected


class TestIsoConversion:
    """Test conversion between day keys and ISO instants."""

    def test_day_to_iso_in_utc_zone(self):
        """Test local midnight in UTC is rendered with a Z suffix."""
        assert day_to_iso("15.03.2023", tz=timezone.utc) == "2023-03-15T00:00:00.000Z"

    def test_day_to_iso_in_offset_zone(self):
        """Test local midnight east of UTC falls on the previous UTC day."""
        berlin = ZoneInfo("Europe/Berlin")

        assert day_to_iso("15.03.2023", tz=berlin) == "2023-03-14T23:00:00.000Z"

    @pytest.mark.parametrize("zone", [None, "UTC", "Asia/Tokyo", "America/Los_Angeles"])
    @pytest.mark.parametrize("day", ["01.01.2023", "26.03.2023", "29.10.2023", "31.12.2024"])
    def test_round_trip_recovers_day(self, zone, day):
        """Test converting a day to ISO and back yields the same day."""
        tz = ZoneInfo(zone) if zone else None

        assert iso_to_day(day_to_iso(day, tz=tz), tz=tz) == day

    def test_invalid_iso_instant(self):
        """Test malformed instants raise a date format error."""
        with pytest.raises(InvalidDateFormatError):
            iso_to_day("yesterday")


class TestCalendarBoundaries:
    """Test week and month boundaries."""

    def test_week_starts_on_sunday_by_default(self):
        """Test the default week starts on Sunday."""
        # Wednesday
        assert start_of_week(date(2023, 3, 15)) == date(2023, 3, 12)
        # Sunday is its own week start
        assert start_of_week(date(2023, 3, 12)) == date(2023, 3, 12)

    def test_week_starting_on_monday(self):
        """Test a Monday week start."""
        assert start_of_week(date(2023, 3, 12), week_starts_on=0) == date(2023, 3, 6)

    def test_month_bounds(self):
        """Test month bounds cover the whole month to the last millisecond."""
        start, end = month_bounds(datetime(2023, 2, 14, 13, 30))

        assert start == datetime(2023, 2, 1)
        assert end == datetime(2023, 2, 28, 23, 59, 59, 999000)

    def test_month_bounds_in_december(self):
        """Test December bounds end on the last day of the year."""
        start, end = month_bounds(datetime(2023, 12, 5))

        assert start == datetime(2023, 12, 1)
        assert end == datetime(2023, 12, 31, 23, 59, 59, 999000)
