"""Shared utilities for cyclecheck."""

from cyclecheck.utils.zones import (
    TIMEZONE_ENV_VAR,
    get_zone,
    default_zone,
    resolve,
    ensure_zoned,
    shift,
    first_instant,
    on_date,
)
from cyclecheck.utils.clock import (
    Clock,
    SystemClock,
    FixedClock,
)

__all__ = [
    # Zones
    "TIMEZONE_ENV_VAR",
    "get_zone",
    "default_zone",
    "resolve",
    "ensure_zoned",
    "shift",
    "first_instant",
    "on_date",
    # Clocks
    "Clock",
    "SystemClock",
    "FixedClock",
]
