"""Period Boundaries
-----------------

Start-of-day / week / month / quarter for zoned timestamps.

All arithmetic is relative to the zone of the supplied datetime. Naive
datetimes are bound to the configured default zone first.

Key Design Principles:
  1. start_of_day subtracts the elapsed wall-clock time from the instant,
     then corrects the one-hour skew a DST transition leaves behind
  2. Weeks start on Monday (ISO 8601, isoweek library)
  3. Month and quarter starts replace calendar fields (relativedelta),
     never subtract whole days of seconds
  4. Results are always resolved: wall fields match the instant
"""

from __future__ import annotations

import logging
from datetime import date, datetime

try:
    from dateutil import tz
    from dateutil.relativedelta import relativedelta
except ImportError as e:
    raise ImportError("python-dateutil not installed. pip install python-dateutil") from e

try:
    from isoweek import Week
except ImportError as e:
    raise ImportError("isoweek not installed. pip install isoweek") from e

from cyclecheck.utils.zones import ensure_zoned, first_instant, on_date, shift

logger = logging.getLogger(__name__)

SECONDS_IN_MINUTE = 60
SECONDS_IN_HOUR = 3600
SECONDS_IN_DAY = 86400


class DSTAdjustmentError(AssertionError):
    """Raised when a computed midnight is off by more than one DST hour.

    This signals a bug in the boundary arithmetic, not bad input.
    """


# ---- Internal helpers ----

def _inconsistent(day: datetime, intended: date, reason: str) -> DSTAdjustmentError:
    logger.error(f"Cannot normalize {day.isoformat()} to midnight of {intended}: {reason}")
    return DSTAdjustmentError(
        f"Cannot normalize {day.isoformat()} to midnight of {intended}: {reason}"
    )


def _adjust_dst(day: datetime, intended: date) -> datetime:
    """
    Correct a computed midnight for a DST transition.

    Assumes the elapsed time since midnight has already been subtracted.
    Across a spring-forward the subtraction overshoots into 23:00 of the
    previous day; across a fall-back it stops at 01:00.

    The corrected value is then checked against the first instant of the
    intended date. When midnight happens twice the earlier one wins, and a
    transition that is not a whole hour (Australia/Lord_Howe moves by 30
    minutes) lands on the first instant rather than 00:30.

    Args:
        day: Resolved datetime that should be midnight
        intended: Civil date the midnight belongs to

    Returns:
        First instant of the intended date

    Raises:
        DSTAdjustmentError: If the hour is not 0, 1 or 23, or the
            correction leaves the intended date
    """
    if day.hour == 0:
        adjusted = day
    elif day.hour == 1:
        adjusted = shift(day, -SECONDS_IN_HOUR)
        if adjusted.date() != intended:
            # Midnight itself was skipped; the day starts at the end of the gap
            adjusted = first_instant(intended, day.tzinfo)
    elif day.hour == 23:
        adjusted = shift(day, SECONDS_IN_HOUR)
    else:
        raise _inconsistent(day, intended, f"expected hour 0, 1 or 23, got {day.hour}")

    if adjusted.date() != intended:
        raise _inconsistent(day, intended, f"correction landed on {adjusted.date()}")

    expected = first_instant(intended, day.tzinfo)
    if adjusted.astimezone(tz.UTC) != expected.astimezone(tz.UTC):
        adjusted = expected

    if adjusted is not day:
        logger.debug(f"DST adjustment for {intended}: {day.isoformat()} -> {adjusted.isoformat()}")
    return adjusted


# ---- Boundary functions ----

def start_of_day(dt: datetime) -> datetime:
    """
    Roll a timestamp back to the start of its civil day.

    Args:
        dt: Timestamp (naive values use the default zone)

    Returns:
        Midnight (00:00:00) of dt's date in dt's zone. If the zone skips
        midnight on that date, the first instant of the date.

    Examples:
        >>> ny = get_zone("America/New_York")
        >>> start_of_day(datetime(2024, 3, 10, 15, 45, tzinfo=ny))
        datetime.datetime(2024, 3, 10, 0, 0, tzinfo=tzfile('.../America/New_York'))
    """
    dt = ensure_zoned(dt)
    elapsed = (
        dt.hour * SECONDS_IN_HOUR
        + dt.minute * SECONDS_IN_MINUTE
        + dt.second
        + dt.microsecond / 1_000_000
    )
    day = shift(dt, -elapsed)
    return _adjust_dst(day, dt.date())


def start_of_week(dt: datetime) -> datetime:
    """
    Get the start of the Monday on or before a timestamp.

    If the timestamp is on a Monday, returns the start of the same day.

    Examples:
        >>> start_of_week(datetime(2025, 1, 1, 8, tzinfo=timezone.utc))  # Wednesday
        datetime.datetime(2024, 12, 30, 0, 0, tzinfo=datetime.timezone.utc)
    """
    dt = ensure_zoned(dt)
    monday = Week.withdate(dt.date()).monday()
    return start_of_day(on_date(monday, dt.tzinfo))


def start_of_month(dt: datetime) -> datetime:
    """
    Roll a timestamp back to the start of its month.

    Examples:
        >>> start_of_month(datetime(2025, 3, 31, 23, 59, tzinfo=timezone.utc))
        datetime.datetime(2025, 3, 1, 0, 0, tzinfo=datetime.timezone.utc)
    """
    dt = ensure_zoned(dt)
    first = start_of_day(dt).date() + relativedelta(day=1)
    return start_of_day(on_date(first, dt.tzinfo))


def start_of_quarter(dt: datetime) -> datetime:
    """
    Get the start of the calendar quarter containing a timestamp.

    Q1 = Jan-Mar, Q2 = Apr-Jun, Q3 = Jul-Sep, Q4 = Oct-Dec

    Examples:
        >>> start_of_quarter(datetime(2025, 8, 19, tzinfo=timezone.utc))
        datetime.datetime(2025, 7, 1, 0, 0, tzinfo=datetime.timezone.utc)
    """
    dt = ensure_zoned(dt)
    quarter_month = dt.month - (dt.month - 1) % 3
    first = dt.date() + relativedelta(month=quarter_month, day=1)
    return start_of_day(on_date(first, dt.tzinfo))


__all__ = [
    "SECONDS_IN_MINUTE",
    "SECONDS_IN_HOUR",
    "SECONDS_IN_DAY",
    "DSTAdjustmentError",
    "start_of_day",
    "start_of_week",
    "start_of_month",
    "start_of_quarter",
]
