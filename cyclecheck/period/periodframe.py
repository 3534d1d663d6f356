"""Vectorized period checks over pandas Series.

Useful when the "last fired" timestamps for many recurring events live in
a DataFrame column and each one needs an in_period answer.
"""

import logging
from typing import Optional, Union

import pandas as pd

from cyclecheck.period.periodapi import start_of_period
from cyclecheck.period.periodnormalize import Period, parse_period
from cyclecheck.utils.clock import Clock, SystemClock
from cyclecheck.utils.zones import default_zone

logger = logging.getLogger(__name__)


def in_period_series(
    values: pd.Series,
    period: Union[Period, str],
    *,
    clock: Optional[Clock] = None,
) -> pd.Series:
    """
    Apply in_period to every timestamp in a Series.

    The series must hold a single zone. Naive series are localized to the
    default zone; wall times that are ambiguous in that zone become NaT.
    Missing values (NaT / None) are never in period.

    Args:
        values: Series of datetimes (or strings pandas can parse)
        period: Period member or "week" / "month" / "quarter"
        clock: Source of "now" (default: SystemClock()). Read once.

    Returns:
        Boolean Series aligned with values

    Raises:
        InvalidPeriodError: If period is not supported

    Examples:
        >>> df = pd.DataFrame({"task": ["backup", "audit"],
        ...                    "last_run": ["2025-09-30 10:00", "2025-10-01 08:00"]})
        >>> in_period_series(df["last_run"], "month", clock=clock).tolist()
        [False, True]
    """
    period = parse_period(period)
    stamps = pd.to_datetime(values)

    if stamps.dt.tz is None:
        zone = default_zone()
        stamps = stamps.dt.tz_localize(zone, ambiguous="NaT", nonexistent="shift_forward")
        dropped = int(stamps.isna().sum() - pd.isna(values).sum())
        if dropped:
            logger.warning(f"{dropped} ambiguous wall times could not be localized and were treated as missing")
    else:
        zone = stamps.dt.tz

    now = (clock or SystemClock()).now(zone)
    boundary = pd.Timestamp(start_of_period(now, period)).tz_convert(stamps.dt.tz)

    result = (stamps > boundary).fillna(False).astype(bool)
    result.name = values.name
    return result


__all__ = [
    "in_period_series",
]
