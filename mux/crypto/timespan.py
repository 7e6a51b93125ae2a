"""Conversion of time-span options into NumericDate claim values."""

import re
from datetime import datetime, timedelta

from mux.crypto.types import TimeValue

MINUTE = 60
HOUR = MINUTE * 60
DAY = HOUR * 24
WEEK = DAY * 7
YEAR = int(DAY * 365.25)

_TIMESPAN_RE = re.compile(
    r"^(\+|-)? ?(\d+|\d+\.\d+) ?"
    r"(seconds?|secs?|s|minutes?|mins?|m|hours?|hrs?|h|days?|d|weeks?|w|years?|yrs?|y)"
    r"(?: (ago|from now))?$",
    re.IGNORECASE,
)


def _unit_seconds(unit: str) -> int:
    if unit in ("m", "min", "mins", "minute", "minutes"):
        return MINUTE
    if unit in ("h", "hr", "hrs", "hour", "hours"):
        return HOUR
    if unit in ("d", "day", "days"):
        return DAY
    if unit in ("w", "week", "weeks"):
        return WEEK
    if unit in ("y", "yr", "yrs", "year", "years"):
        return YEAR
    return 1


def parse_timespan(value: str) -> int:
    """Parse a span like ``"7d"``, ``"30 minutes"`` or ``"2h ago"`` into seconds.

    A leading ``-`` or a trailing ``ago`` makes the span negative.
    """
    match = _TIMESPAN_RE.match(value.strip())
    if match is None:
        raise ValueError(f"Invalid time period format: {value!r}")
    sign, amount, unit, direction = match.groups()
    seconds = round(float(amount) * _unit_seconds(unit.lower()))
    if sign == "-" or (direction or "").lower() == "ago":
        return -seconds
    return seconds


def to_numeric_date(value: TimeValue, now: int) -> int:
    """Resolve a time option to epoch seconds.

    Integers are absolute timestamps. Strings and timedeltas are offsets
    from ``now``.
    """
    if isinstance(value, datetime):
        return int(value.timestamp())
    if isinstance(value, timedelta):
        return now + int(value.total_seconds())
    if isinstance(value, str):
        return now + parse_timespan(value)
    return int(value)
