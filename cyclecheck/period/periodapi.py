"""Period checking API.

Public API for "has this already happened this week / month / quarter?".
Boundaries are computed in the zone of the timestamp being checked.
"""

import logging
from datetime import datetime, tzinfo
from typing import Optional, Tuple, Union

try:
    from dateutil import tz
    from dateutil.relativedelta import relativedelta
except ImportError as e:
    raise ImportError("python-dateutil not installed. pip install python-dateutil") from e

try:
    from isoweek import Week
except ImportError as e:
    raise ImportError("isoweek not installed. pip install isoweek") from e

from cyclecheck.period.periodboundary import (
    start_of_day,
    start_of_week,
    start_of_month,
    start_of_quarter,
)
from cyclecheck.period.periodnormalize import Period, parse_period
from cyclecheck.utils.clock import Clock, SystemClock
from cyclecheck.utils.zones import default_zone, ensure_zoned, on_date

logger = logging.getLogger(__name__)

_STARTS = {
    Period.WEEK: start_of_week,
    Period.MONTH: start_of_month,
    Period.QUARTER: start_of_quarter,
}

_STEPS = {
    Period.WEEK: relativedelta(weeks=1),
    Period.MONTH: relativedelta(months=1),
    Period.QUARTER: relativedelta(months=3),
}


def start_of_period(dt: datetime, period: Union[Period, str]) -> datetime:
    """
    Get the start of the period containing a timestamp.

    Args:
        dt: Timestamp (naive values use the default zone)
        period: Period member or "week" / "month" / "quarter"

    Returns:
        First instant of the week (Monday), month or quarter

    Raises:
        InvalidPeriodError: If period is not supported
    """
    period = parse_period(period)
    return _STARTS[period](dt)


def next_period_start(dt: datetime, period: Union[Period, str]) -> datetime:
    """
    Get the start of the period after the one containing a timestamp.

    Examples:
        >>> next_period_start(datetime(2025, 11, 20, tzinfo=timezone.utc), "quarter")
        datetime.datetime(2026, 1, 1, 0, 0, tzinfo=datetime.timezone.utc)
    """
    period = parse_period(period)
    start = start_of_period(dt, period)
    following = start.date() + _STEPS[period]
    return start_of_day(on_date(following, start.tzinfo))


def period_bounds(dt: datetime, period: Union[Period, str]) -> Tuple[datetime, datetime]:
    """
    Get the half-open [start, end) window of the period containing a timestamp.

    Returns:
        (start, end) where end is the start of the following period
    """
    return start_of_period(dt, period), next_period_start(dt, period)


def in_period(
    dt: datetime,
    period: Union[Period, str],
    *,
    clock: Optional[Clock] = None,
) -> bool:
    """
    Determine if a timestamp falls within the current period.

    For example, if the period is "week", check whether the timestamp is in
    the current week (weeks start on Monday). Use it to test whether a
    recurring occurrence has already happened this period.

    This is a history check: all future timestamps return True. A timestamp
    exactly at the start of the period is not in it.

    Args:
        dt: Timestamp to check (naive values use the default zone)
        period: Period member or "week" / "month" / "quarter"
        clock: Source of "now" (default: SystemClock()). Read once per call.

    Returns:
        True if dt is after the start of the current period

    Raises:
        InvalidPeriodError: If period is not supported

    Examples:
        >>> clock = FixedClock(datetime(2025, 10, 2, 12, tzinfo=timezone.utc))
        >>> in_period(datetime(2025, 9, 30, tzinfo=timezone.utc), "week", clock=clock)
        True
        >>> in_period(datetime(2025, 9, 30, tzinfo=timezone.utc), "month", clock=clock)
        False
    """
    period = parse_period(period)
    dt = ensure_zoned(dt)

    now = (clock or SystemClock()).now(dt.tzinfo)
    boundary = start_of_period(now, period)

    logger.debug(f"Checking {dt.isoformat()} against {period} starting {boundary.isoformat()}")
    return dt.astimezone(tz.UTC) > boundary.astimezone(tz.UTC)


def _period_id(start: datetime, period: Period) -> str:
    if period is Period.WEEK:
        week = Week.withdate(start.date())
        return f"{week.year}-W{week.week:02d}"
    if period is Period.MONTH:
        return f"{start.year}-{start.month:02d}"
    return f"{start.year}Q{(start.month - 1) // 3 + 1}"


def current_period(
    period: Union[Period, str],
    *,
    zone: Optional[tzinfo] = None,
    clock: Optional[Clock] = None,
) -> dict:
    """
    Describe the period containing the present instant.

    Args:
        period: Period member or "week" / "month" / "quarter"
        zone: Civil zone for the boundaries (default: the configured zone,
            even when the clock reports another)
        clock: Source of "now" (default: SystemClock())

    Returns:
        Period dict with structure:
        {
            "period_type": "week|month|quarter",
            "period_id": str,      # "2025-W40", "2025-10", "2025Q4"
            "start_ts": datetime,  # First instant of the period
            "end_ts": datetime,    # First instant of the next period (exclusive)
            "year": int,           # ISO year for weeks
            "quarter": int,
            "month": int | None,   # None for quarters
            "asof_ts": datetime,   # The "now" the period was computed for
            "timezone": str,       # Zone abbreviation at asof_ts
        }

    Examples:
        >>> clock = FixedClock(datetime(2025, 10, 2, tzinfo=timezone.utc))
        >>> current_period("quarter", clock=clock)["period_id"]
        '2025Q4'
    """
    period = parse_period(period)
    now = (clock or SystemClock()).now(zone or default_zone())
    start, end = period_bounds(now, period)

    year = Week.withdate(start.date()).year if period is Period.WEEK else start.year

    return {
        "period_type": period.value,
        "period_id": _period_id(start, period),
        "start_ts": start,
        "end_ts": end,
        "year": year,
        "quarter": (start.month - 1) // 3 + 1,
        "month": None if period is Period.QUARTER else start.month,
        "asof_ts": now,
        "timezone": now.tzname(),
    }


def format_period_display(period: dict) -> str:
    """
    Format period dict for human-readable display.

    Examples:
        >>> format_period_display(current_period("week", clock=clock))
        'W40 2025 (Sep 29 - Oct 5, 2025)'

        >>> format_period_display(current_period("quarter", clock=clock))
        'Q4 2025 (Oct 1 - Dec 31, 2025)'

        >>> format_period_display(current_period("month", clock=clock))
        'October 2025'
    """
    if not period:
        return ""

    period_type = period["period_type"]
    start = period["start_ts"].date()
    last = period["end_ts"].date() - relativedelta(days=1)
    window = f"({start:%b} {start.day} - {last:%b} {last.day}, {last.year})"

    if period_type == "week":
        week_num = period["period_id"].split("-W")[1]
        return f"W{week_num} {period['year']} {window}"

    elif period_type == "quarter":
        return f"Q{period['quarter']} {period['year']} {window}"

    elif period_type == "month":
        return f"{start:%B %Y}"

    return period.get("period_id", "")


__all__ = [
    "start_of_period",
    "next_period_start",
    "period_bounds",
    "in_period",
    "current_period",
    "format_period_display",
]
