"""Clock abstraction for reading "now" in a civil zone.

Functions that compare against the current time take a ``clock`` argument
instead of calling ``datetime.now`` directly. Pass a FixedClock in tests.
"""

from datetime import datetime, tzinfo
from typing import Optional, Protocol

from cyclecheck.utils.zones import default_zone, ensure_zoned


class Clock(Protocol):
    """Anything that can report the current instant in a given zone."""

    def now(self, zone: Optional[tzinfo] = None) -> datetime: ...


class SystemClock:
    """Clock backed by the real system time."""

    def now(self, zone: Optional[tzinfo] = None) -> datetime:
        return datetime.now(zone or default_zone())

    def __repr__(self) -> str:
        return "SystemClock()"


class FixedClock:
    """
    Clock frozen at a single instant.

    The instant is reported in whatever zone the caller asks for, so one
    FixedClock can drive checks for timestamps in different zones.

    Args:
        instant: The frozen time. Naive values are bound to the default zone.

    Examples:
        >>> clock = FixedClock(datetime(2025, 10, 2, 9, 0, tzinfo=timezone.utc))
        >>> clock.now(get_zone("Europe/Paris")).hour
        11
    """

    def __init__(self, instant: datetime):
        self.instant = ensure_zoned(instant)

    def now(self, zone: Optional[tzinfo] = None) -> datetime:
        return self.instant.astimezone(zone or self.instant.tzinfo)

    def __repr__(self) -> str:
        return f"FixedClock({self.instant.isoformat()})"


__all__ = [
    "Clock",
    "SystemClock",
    "FixedClock",
]
