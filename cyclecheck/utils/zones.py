"""
Zone Utilities
--------------

Helpers for binding datetimes to civil time zones and doing arithmetic on
the underlying instant.

Python's aware-datetime arithmetic is wall-clock arithmetic: adding a
timedelta keeps the wall fields and re-reads the offset afterwards. The
boundary calculations need instant arithmetic instead, so every helper
here goes through UTC and hands back a *resolved* datetime (wall fields
re-derived from the instant in its zone).

Functions:
  - get_zone: Look up a zone by IANA name (dateutil.tz)
  - default_zone: Zone from zoneconfig.yaml / CYCLECHECK_TIMEZONE
  - ensure_zoned: Bind a naive datetime to the default zone
  - resolve: Re-derive wall fields from the instant
  - shift: Move a datetime by a number of seconds of real time
  - first_instant: First existing instant of a civil date
  - on_date: Noon of a civil date, an anchor for boundary lookups
"""

import logging
import os
from datetime import date, datetime, time, timedelta, tzinfo
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

try:
    from dateutil import tz
except ImportError as e:
    raise ImportError("python-dateutil not installed. pip install python-dateutil") from e

logger = logging.getLogger(__name__)

TIMEZONE_ENV_VAR = "CYCLECHECK_TIMEZONE"


def _load_config() -> Dict[str, Any]:
    """Load zone configuration from YAML file.

    Returns:
        Dictionary with configuration keys (empty if the file is missing)
    """
    config_path = Path(__file__).parent / "zoneconfig.yaml"

    if not config_path.exists():
        return {}

    with open(config_path, 'r') as f:
        return yaml.safe_load(f) or {}


# Cache config on module load
_CONFIG = _load_config()


def get_zone(name: str) -> tzinfo:
    """
    Look up a civil time zone by name.

    Args:
        name: IANA zone name (e.g., "Europe/London", "America/New_York", "UTC")

    Returns:
        dateutil tzinfo for the zone

    Raises:
        ValueError: If the name is empty or not a known zone

    Examples:
        >>> get_zone("America/New_York")
        tzfile('/usr/share/zoneinfo/America/New_York')

        >>> get_zone("Mars/Olympus_Mons")
        Traceback (most recent call last):
        ValueError: Unknown time zone: 'Mars/Olympus_Mons'
    """
    if not name or not name.strip():
        raise ValueError("Time zone name must be a non-empty string")

    zone = tz.gettz(name.strip())
    if zone is None:
        raise ValueError(f"Unknown time zone: {name!r}")
    return zone


def default_zone() -> tzinfo:
    """
    Return the zone used for naive datetimes.

    Lookup order:
      1. CYCLECHECK_TIMEZONE environment variable
      2. default_timezone in zoneconfig.yaml
      3. UTC
    """
    env_name = os.environ.get(TIMEZONE_ENV_VAR)
    if env_name:
        source, name = TIMEZONE_ENV_VAR, env_name
    else:
        source, name = "zoneconfig.yaml", _CONFIG.get("default_timezone", "UTC")

    try:
        zone = get_zone(name)
    except ValueError:
        logger.warning(f"Invalid time zone {name!r} from {source}, falling back to UTC")
        return tz.UTC

    logger.debug(f"Using default time zone {name!r} from {source}")
    return zone


def resolve(dt: datetime) -> datetime:
    """
    Re-derive the wall-clock fields of an aware datetime from its instant.

    A datetime built by wall-clock arithmetic may name a wall time that does
    not exist in its zone (inside a spring-forward gap). Resolving maps it to
    the instant its offset implies and reads the fields back.
    """
    return dt.astimezone(tz.UTC).astimezone(dt.tzinfo)


def ensure_zoned(dt: datetime, zone: Optional[tzinfo] = None) -> datetime:
    """
    Bind a datetime to a civil zone.

    Aware datetimes are resolved and returned in their own zone. Naive
    datetimes are interpreted as wall time in ``zone`` (default: the
    configured default zone).

    Args:
        dt: Datetime to bind
        zone: Zone for naive input (default: default_zone())

    Returns:
        Resolved, timezone-aware datetime

    Raises:
        TypeError: If dt is not a datetime

    Examples:
        >>> ensure_zoned(datetime(2025, 3, 14, 9, 30)).tzinfo
        tzutc()
    """
    if not isinstance(dt, datetime):
        raise TypeError(f"Expected datetime, got {type(dt).__name__}")

    if dt.tzinfo is None or dt.utcoffset() is None:
        dt = dt.replace(tzinfo=zone or default_zone())
    return resolve(dt)


def shift(dt: datetime, seconds: float) -> datetime:
    """
    Move a datetime by elapsed real time and resolve it in its own zone.

    Unlike ``dt + timedelta(...)``, which keeps the wall fields, this adds
    seconds to the instant, so the wall hour changes across DST transitions.

    Examples:
        >>> ny = get_zone("America/New_York")
        >>> shift(datetime(2024, 3, 10, 12, tzinfo=ny), -12 * 3600).hour
        23
    """
    moved = dt.astimezone(tz.UTC) + timedelta(seconds=seconds)
    return moved.astimezone(dt.tzinfo)


def first_instant(day: date, zone: tzinfo) -> datetime:
    """
    Return the first existing instant of a civil date in a zone.

    Normally midnight. In zones that skip midnight on a spring-forward
    day (clocks go 00:00 -> 01:00) this is the end of the gap. If midnight
    happens twice (clocks go 01:00 -> 00:00) this is the earlier one.
    """
    midnight = datetime.combine(day, time(0), tzinfo=zone)
    return resolve(tz.resolve_imaginary(midnight))


def on_date(day: date, zone: tzinfo) -> datetime:
    """Noon of a civil date in a zone.

    Calendar arithmetic produces dates; the boundary functions take
    timestamps. Noon lies outside DST gaps and overlaps.
    """
    return resolve(datetime.combine(day, time(12), tzinfo=zone))


__all__ = [
    "TIMEZONE_ENV_VAR",
    "get_zone",
    "default_zone",
    "resolve",
    "ensure_zoned",
    "shift",
    "first_instant",
    "on_date",
]
