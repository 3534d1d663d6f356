"""Duration parsing for compact "#h#m" strings."""

from cyclecheck.duration.durationapi import (
    InvalidDurationError,
    parse_duration,
    format_duration,
)

__all__ = [
    "InvalidDurationError",
    "parse_duration",
    "format_duration",
]
