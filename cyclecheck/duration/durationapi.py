"""Compact duration strings.

Parses and renders the "#h#m" form used to configure how long a recurring
task may take, e.g. "2h30m", "45m", "3h".
"""

import re
from typing import Optional

SECONDS_IN_MINUTE = 60

_DURATION_RE = re.compile(r"(?:(\d+)\s*h)?\s*(?:(\d+)\s*m)?", re.IGNORECASE)


class InvalidDurationError(ValueError):
    """Raised when text does not match the #h#m duration form."""


def parse_duration(text: Optional[str]) -> int:
    """
    Parse a compact duration string to seconds.

    Hours and minutes are both optional and default to 0. Empty input is a
    zero duration. Anything else that does not match is rejected.

    Args:
        text: Duration such as "2h30m", "45m", "3h", "1H 5M" or ""

    Returns:
        Total seconds: (hours * 60 + minutes) * 60

    Raises:
        InvalidDurationError: If text is not a string in #h#m form

    Examples:
        >>> parse_duration("2h30m")
        9000

        >>> parse_duration("45m")
        2700

        >>> parse_duration("")
        0

        >>> parse_duration("90s")
        Traceback (most recent call last):
        InvalidDurationError: Invalid duration '90s', expected a form like '2h30m', '45m' or '3h'
    """
    if text is None:
        return 0
    if not isinstance(text, str):
        raise InvalidDurationError(
            f"Duration must be a string, got {type(text).__name__}"
        )

    match = _DURATION_RE.fullmatch(text.strip())
    if match is None:
        raise InvalidDurationError(
            f"Invalid duration {text!r}, expected a form like '2h30m', '45m' or '3h'"
        )

    hours = int(match.group(1) or 0)
    minutes = int(match.group(2) or 0)
    return (hours * 60 + minutes) * SECONDS_IN_MINUTE


def format_duration(seconds: int) -> str:
    """
    Render seconds in compact #h#m form.

    Seconds below a whole minute are dropped.

    Examples:
        >>> format_duration(9000)
        '2h30m'

        >>> format_duration(10800)
        '3h'

        >>> format_duration(0)
        '0m'
    """
    if seconds < 0:
        raise ValueError(f"Duration must be non-negative, got {seconds}")

    hours, minutes = divmod(int(seconds) // SECONDS_IN_MINUTE, 60)
    if hours and minutes:
        return f"{hours}h{minutes}m"
    if hours:
        return f"{hours}h"
    return f"{minutes}m"


__all__ = [
    "InvalidDurationError",
    "parse_duration",
    "format_duration",
]
