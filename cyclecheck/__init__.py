"""cyclecheck - Business-cycle period checks

Public API for checking whether a recurring event (weekly, monthly,
quarterly) has already happened in the current cycle.

Usage:
    from cyclecheck import in_period, start_of_week, parse_duration, Period

    # Has the weekly sync already run this week?
    in_period(last_sync_ts, Period.WEEK)  # Returns: True / False

    # Period boundaries in the timestamp's own zone, DST-corrected
    start_of_week(ts)      # Monday 00:00
    start_of_quarter(ts)   # Jan/Apr/Jul/Oct 1st 00:00

    # Compact durations
    parse_duration("2h30m")  # Returns: 9000
"""

__version__ = "0.0.1"

# ============================================================================
# Period Boundaries & Checks
# ============================================================================

from .period.periodnormalize import (
    Period,               # WEEK / MONTH / QUARTER
    InvalidPeriodError,   # Unrecognized period value
    parse_period,         # Coerce string to Period
)

from .period.periodboundary import (
    SECONDS_IN_MINUTE,
    SECONDS_IN_HOUR,
    SECONDS_IN_DAY,
    DSTAdjustmentError,   # Internal DST inconsistency (bug, not bad input)
    start_of_day,         # Midnight of the civil date
    start_of_week,        # Monday on or before
    start_of_month,       # Day 1 of the month
    start_of_quarter,     # Day 1 of the quarter
)

from .period.periodapi import (
    in_period,              # Primary API - already happened this period?
    start_of_period,        # Dispatch on Period
    next_period_start,      # Start of the following period
    period_bounds,          # Half-open [start, end) window
    current_period,         # Describe the period containing now
    format_period_display,  # Format period for display
)

from .period.periodframe import (
    in_period_series,       # Vectorized in_period over a pandas Series
)

# ============================================================================
# Durations
# ============================================================================

from .duration.durationapi import (
    InvalidDurationError,
    parse_duration,         # "2h30m" -> 9000
    format_duration,        # 9000 -> "2h30m"
)

# ============================================================================
# Clocks & Zones
# ============================================================================

from .utils.clock import (
    Clock,
    SystemClock,
    FixedClock,
)

from .utils.zones import (
    get_zone,
    default_zone,
)

__all__ = [
    # Version
    "__version__",

    # ========================================================================
    # PRIMARY APIS - Start here!
    # ========================================================================
    "in_period",          # Already happened this week/month/quarter?
    "start_of_day",       # Midnight of the civil date
    "start_of_week",      # Monday on or before
    "start_of_month",     # Day 1 of the month
    "start_of_quarter",   # Day 1 of the quarter
    "parse_duration",     # "2h30m" -> seconds

    # ========================================================================
    # Periods
    # ========================================================================
    "Period",
    "InvalidPeriodError",
    "DSTAdjustmentError",
    "parse_period",
    "start_of_period",
    "next_period_start",
    "period_bounds",
    "current_period",
    "format_period_display",
    "in_period_series",
    "SECONDS_IN_MINUTE",
    "SECONDS_IN_HOUR",
    "SECONDS_IN_DAY",

    # ========================================================================
    # Durations
    # ========================================================================
    "InvalidDurationError",
    "format_duration",

    # ========================================================================
    # Clocks & Zones
    # ========================================================================
    "Clock",
    "SystemClock",
    "FixedClock",
    "get_zone",
    "default_zone",
]
