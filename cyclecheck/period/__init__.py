"""Period module for recurring business-cycle checks.

This module computes calendar-period boundaries for zoned timestamps and
answers whether a timestamp already falls within the current period.

Public API:
    start_of_day(dt), start_of_week(dt), start_of_month(dt), start_of_quarter(dt)
        Period boundaries in dt's zone (DST-corrected)

    in_period(dt, period, clock=None) -> bool
        Has dt already happened in the current week/month/quarter?

    current_period(period, zone=None, clock=None) -> dict
        Describe the period containing now

    in_period_series(series, period, clock=None) -> pandas.Series
        Vectorized in_period

Examples:
    >>> from datetime import datetime, timezone
    >>> from cyclecheck.period import in_period, start_of_week, Period
    >>>
    >>> # Weeks start on Monday
    >>> start_of_week(datetime(2025, 10, 2, 15, tzinfo=timezone.utc))
    datetime.datetime(2025, 9, 29, 0, 0, tzinfo=datetime.timezone.utc)
    >>>
    >>> # Did the weekly report already go out?
    >>> in_period(last_report_ts, Period.WEEK)
    True
"""

from cyclecheck.period.periodnormalize import (
    Period,
    InvalidPeriodError,
    parse_period,
)
from cyclecheck.period.periodboundary import (
    SECONDS_IN_MINUTE,
    SECONDS_IN_HOUR,
    SECONDS_IN_DAY,
    DSTAdjustmentError,
    start_of_day,
    start_of_week,
    start_of_month,
    start_of_quarter,
)
from cyclecheck.period.periodapi import (
    start_of_period,
    next_period_start,
    period_bounds,
    in_period,
    current_period,
    format_period_display,
)
from cyclecheck.period.periodframe import (
    in_period_series,
)

__all__ = [
    "Period",
    "InvalidPeriodError",
    "parse_period",
    "SECONDS_IN_MINUTE",
    "SECONDS_IN_HOUR",
    "SECONDS_IN_DAY",
    "DSTAdjustmentError",
    "start_of_day",
    "start_of_week",
    "start_of_month",
    "start_of_quarter",
    "start_of_period",
    "next_period_start",
    "period_bounds",
    "in_period",
    "current_period",
    "format_period_display",
    "in_period_series",
]
