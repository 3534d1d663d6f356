"""Shared test fixtures and utilities for cyclecheck tests."""

from datetime import datetime, tzinfo
from typing import Optional

import pytest
from dateutil import tz

from cyclecheck.utils.clock import FixedClock
from cyclecheck.utils.zones import TIMEZONE_ENV_VAR


class CountingClock:
    """FixedClock that records how many times "now" was read."""

    def __init__(self, instant: datetime):
        self.inner = FixedClock(instant)
        self.calls = 0

    def now(self, zone: Optional[tzinfo] = None) -> datetime:
        self.calls += 1
        return self.inner.now(zone)


@pytest.fixture(autouse=True)
def _no_timezone_override(monkeypatch):
    """Keep a developer's CYCLECHECK_TIMEZONE from leaking into tests."""
    monkeypatch.delenv(TIMEZONE_ENV_VAR, raising=False)


@pytest.fixture
def new_york():
    """America/New_York: springs forward 02:00 -> 03:00, falls back 02:00 -> 01:00.

    2024 transitions: Mar 10 and Nov 3.
    """
    return tz.gettz("America/New_York")


@pytest.fixture
def beirut():
    """Asia/Beirut: transitions at midnight.

    2024-03-31 00:00 does not exist (clocks jump to 01:00).
    """
    return tz.gettz("Asia/Beirut")


@pytest.fixture
def havana():
    """America/Havana: falls back 01:00 -> 00:00, so midnight happens twice.

    Repeated midnights: 2024-11-03 and 2026-11-01 (00:00 CDT, then 00:00 CST).
    """
    return tz.gettz("America/Havana")


@pytest.fixture
def lord_howe():
    """Australia/Lord_Howe: DST moves clocks by 30 minutes.

    2024-04-07 02:00 (+11) -> 01:30 (+10:30); 2024-10-06 02:00 (+10:30) -> 02:30 (+11).
    """
    return tz.gettz("Australia/Lord_Howe")


@pytest.fixture
def fixed_clock():
    """Factory for clocks frozen at a given instant."""
    return FixedClock


@pytest.fixture
def counting_clock():
    """Factory for clocks that count reads of "now"."""
    return CountingClock
