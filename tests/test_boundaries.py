"""Tests for start_of_day / week / month / quarter.

Run with: pytest tests/test_boundaries.py -v
"""

from datetime import datetime, timedelta, timezone

import pytest
from dateutil import tz

from cyclecheck.period.periodboundary import (
    start_of_day,
    start_of_week,
    start_of_month,
    start_of_quarter,
)
from cyclecheck.utils.zones import first_instant


UTC = timezone.utc

ZONES = [
    "UTC",
    "America/New_York",
    "Europe/London",
    "Australia/Sydney",
    "Asia/Kolkata",
    "Asia/Beirut",
]


def _samples(zone_name):
    """Instants spread over 2024 at varying wall-clock hours."""
    zone = tz.gettz(zone_name)
    base = datetime(2024, 1, 1, 0, 17, 42, 250000, tzinfo=tz.UTC)
    return [(base + timedelta(hours=h)).astimezone(zone) for h in range(0, 366 * 24, 61)]


def _wall(dt):
    return dt.replace(tzinfo=None)


# ============================================================================
# Fixed examples
# ============================================================================

class TestStartOfDay:
    """Test start_of_day"""

    def test_midday(self):
        """Strips hours, minutes, seconds and microseconds"""
        result = start_of_day(datetime(2025, 3, 14, 9, 30, 15, 123456, tzinfo=UTC))
        assert result == datetime(2025, 3, 14, 0, 0, 0, tzinfo=UTC)
        assert result.microsecond == 0

    def test_already_midnight(self):
        """Midnight maps to itself"""
        midnight = datetime(2025, 3, 14, tzinfo=UTC)
        assert start_of_day(midnight) == midnight

    def test_last_second_of_day(self):
        """23:59:59 stays on the same date"""
        result = start_of_day(datetime(2025, 12, 31, 23, 59, 59, tzinfo=UTC))
        assert result == datetime(2025, 12, 31, tzinfo=UTC)

    def test_naive_uses_default_zone(self):
        """Naive datetimes are bound to the default zone (UTC)"""
        result = start_of_day(datetime(2025, 3, 14, 9, 30))
        assert result.utcoffset() == timedelta(0)
        assert result == datetime(2025, 3, 14, tzinfo=UTC)

    def test_keeps_zone(self):
        """Result is in the input's zone"""
        tokyo = tz.gettz("Asia/Tokyo")
        result = start_of_day(datetime(2025, 3, 14, 1, 0, tzinfo=tokyo))
        assert result.tzinfo is tokyo
        assert _wall(result) == datetime(2025, 3, 14)

    def test_input_not_mutated(self):
        """Input is left untouched"""
        original = datetime(2025, 3, 14, 9, 30, tzinfo=UTC)
        copy = original.replace()
        start_of_day(original)
        assert original == copy
        assert original.hour == 9

    def test_rejects_non_datetime(self):
        """Plain dates are not zoned timestamps"""
        from datetime import date
        with pytest.raises(TypeError):
            start_of_day(date(2025, 3, 14))


class TestStartOfWeek:
    """Test start_of_week (Monday start)"""

    def test_wednesday(self):
        """Wednesday rolls back to Monday"""
        result = start_of_week(datetime(2025, 10, 1, 15, 0, tzinfo=UTC))
        assert result == datetime(2025, 9, 29, tzinfo=UTC)

    def test_monday_is_same_day(self):
        """Monday returns the start of the same day"""
        result = start_of_week(datetime(2025, 9, 29, 18, 45, tzinfo=UTC))
        assert result == datetime(2025, 9, 29, tzinfo=UTC)

    def test_sunday(self):
        """Sunday belongs to the week that started six days earlier"""
        result = start_of_week(datetime(2025, 10, 5, 23, 59, 59, tzinfo=UTC))
        assert result == datetime(2025, 9, 29, tzinfo=UTC)

    def test_crosses_year(self):
        """New Year's Day 2025 (Wednesday) belongs to the week of Dec 30, 2024"""
        result = start_of_week(datetime(2025, 1, 1, 8, 0, tzinfo=UTC))
        assert result == datetime(2024, 12, 30, tzinfo=UTC)

    def test_crosses_month(self):
        """Week start can fall in the previous month"""
        result = start_of_week(datetime(2025, 3, 2, 12, 0, tzinfo=UTC))  # Sunday
        assert result == datetime(2025, 2, 24, tzinfo=UTC)


class TestStartOfMonth:
    """Test start_of_month"""

    def test_end_of_month(self):
        result = start_of_month(datetime(2025, 3, 31, 23, 59, tzinfo=UTC))
        assert result == datetime(2025, 3, 1, tzinfo=UTC)

    def test_first_of_month(self):
        result = start_of_month(datetime(2025, 3, 1, 0, 0, 1, tzinfo=UTC))
        assert result == datetime(2025, 3, 1, tzinfo=UTC)

    def test_leap_day(self):
        result = start_of_month(datetime(2024, 2, 29, 12, 0, tzinfo=UTC))
        assert result == datetime(2024, 2, 1, tzinfo=UTC)


class TestStartOfQuarter:
    """Test start_of_quarter"""

    @pytest.mark.parametrize("month,expected_month", [
        (1, 1), (2, 1), (3, 1),
        (4, 4), (5, 4), (6, 4),
        (7, 7), (8, 7), (9, 7),
        (10, 10), (11, 10), (12, 10),
    ])
    def test_all_months(self, month, expected_month):
        """Every month maps to the first month of its quarter"""
        result = start_of_quarter(datetime(2025, month, 15, 10, 0, tzinfo=UTC))
        assert result == datetime(2025, expected_month, 1, tzinfo=UTC)

    def test_last_instant_of_quarter(self):
        result = start_of_quarter(datetime(2025, 3, 31, 23, 59, 59, tzinfo=UTC))
        assert result == datetime(2025, 1, 1, tzinfo=UTC)

    def test_first_instant_of_quarter(self):
        result = start_of_quarter(datetime(2025, 4, 1, tzinfo=UTC))
        assert result == datetime(2025, 4, 1, tzinfo=UTC)

    def test_end_of_long_month(self):
        """Day 31 in the last month of a quarter does not skip a month"""
        result = start_of_quarter(datetime(2025, 12, 31, 12, 0, tzinfo=UTC))
        assert result == datetime(2025, 10, 1, tzinfo=UTC)


# ============================================================================
# Properties over many zones and instants
# ============================================================================

@pytest.mark.parametrize("zone_name", ZONES)
class TestBoundaryProperties:
    """Invariants that hold for every timestamp"""

    def test_start_of_day(self, zone_name):
        """Same civil date, first instant of that date"""
        for dt in _samples(zone_name):
            result = start_of_day(dt)
            assert result.date() == dt.date()
            assert result == first_instant(dt.date(), dt.tzinfo)
            assert result.astimezone(tz.UTC) <= dt.astimezone(tz.UTC)
            if zone_name != "Asia/Beirut":
                assert (result.hour, result.minute, result.second, result.microsecond) == (0, 0, 0, 0)

    def test_start_of_week(self, zone_name):
        """Monday, not after dt, less than seven civil days before dt"""
        for dt in _samples(zone_name):
            result = start_of_week(dt)
            assert result.weekday() == 0
            assert result.astimezone(tz.UTC) <= dt.astimezone(tz.UTC)
            assert _wall(dt) - _wall(result) < timedelta(days=7)

    def test_start_of_month(self, zone_name):
        """Day 1 of the same month and year"""
        for dt in _samples(zone_name):
            result = start_of_month(dt)
            assert result.day == 1
            assert (result.year, result.month) == (dt.year, dt.month)

    def test_start_of_quarter(self, zone_name):
        """Day 1 of the latest quarter month not after dt"""
        for dt in _samples(zone_name):
            result = start_of_quarter(dt)
            assert result.day == 1
            assert result.month in (1, 4, 7, 10)
            assert result.year == dt.year
            assert 0 <= dt.month - result.month < 3

    def test_idempotent(self, zone_name):
        """Applying a boundary twice changes nothing"""
        for dt in _samples(zone_name):
            for func in (start_of_day, start_of_week, start_of_month, start_of_quarter):
                once = func(dt)
                assert func(once) == once
                assert func(once).utcoffset() == once.utcoffset()

    def test_nesting(self, zone_name):
        """Quarter <= month <= week-or-month <= day"""
        for dt in _samples(zone_name):
            day = start_of_day(dt).astimezone(tz.UTC)
            week = start_of_week(dt).astimezone(tz.UTC)
            month = start_of_month(dt).astimezone(tz.UTC)
            quarter = start_of_quarter(dt).astimezone(tz.UTC)
            assert quarter <= month <= day
            assert week <= day
