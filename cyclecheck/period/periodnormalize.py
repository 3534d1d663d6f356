"""Period Normalization
--------------------

The closed set of recurrence periods and the helpers that coerce caller
input into it.

Examples:
  >>> parse_period("week")
  <Period.WEEK: 'week'>

  >>> parse_period(" Quarter ")
  <Period.QUARTER: 'quarter'>

  >>> parse_period("weak")
  Traceback (most recent call last):
  InvalidPeriodError: Unrecognized period, 'weak'. Did you mean 'week'?
"""

import re
import unicodedata
from enum import Enum
from typing import Optional, Union

try:
    from rapidfuzz import fuzz, process
except ImportError as e:
    raise ImportError("rapidfuzz not installed. pip install rapidfuzz") from e


class Period(str, Enum):
    """Supported recurrence periods."""

    WEEK = "week"
    MONTH = "month"
    QUARTER = "quarter"

    def __str__(self) -> str:
        return self.value


class InvalidPeriodError(ValueError):
    """Raised when a value is not one of the supported periods."""

    def __init__(self, value, suggestion: Optional[str] = None):
        self.value = value
        self.suggestion = suggestion
        message = f"Unrecognized period, {value!r}."
        if suggestion:
            message += f" Did you mean {suggestion!r}?"
        super().__init__(message)


# Minimum rapidfuzz ratio for a "did you mean" hint
SUGGESTION_CUTOFF = 70


def normalize_period_text(text: str) -> str:
    """
    Normalize period text for lookup.

    Transformations:
      - Normalize Unicode (NFC)
      - Strip whitespace
      - Lowercase
      - Collapse inner whitespace

    Examples:
        >>> normalize_period_text("  MONTH ")
        'month'
    """
    if not text:
        return ""

    text = unicodedata.normalize("NFC", text)
    text = text.strip().lower()
    return re.sub(r"\s+", " ", text)


def suggest_period(text: str) -> Optional[str]:
    """
    Find the closest supported period name for a misspelled value.

    Returns:
        Period value string, or None if nothing is close enough

    Examples:
        >>> suggest_period("mnth")
        'month'

        >>> suggest_period("decade")
        None
    """
    choices = [p.value for p in Period]
    match = process.extractOne(
        normalize_period_text(text),
        choices,
        scorer=fuzz.ratio,
        score_cutoff=SUGGESTION_CUTOFF,
    )
    return match[0] if match else None


def parse_period(value: Union[Period, str]) -> Period:
    """
    Coerce a Period member or its string value to a Period.

    Matching is case-insensitive and ignores surrounding whitespace. There
    is no fuzzy acceptance: a near miss is rejected, with a suggestion.

    Args:
        value: Period member or string such as "week", "Month"

    Returns:
        Period member

    Raises:
        InvalidPeriodError: If value is not a supported period
    """
    if isinstance(value, Period):
        return value

    if not isinstance(value, str):
        raise InvalidPeriodError(value)

    text = normalize_period_text(value)
    try:
        return Period(text)
    except ValueError:
        raise InvalidPeriodError(value, suggest_period(text)) from None


__all__ = [
    "Period",
    "InvalidPeriodError",
    "normalize_period_text",
    "suggest_period",
    "parse_period",
]
