"""Clock-time arithmetic.

All values are times of day without a calendar date. Durations are
computed as if both times fall on the same day, so an end time earlier than
the start time yields a negative duration instead of wrapping past midnight:

    >>> duration_between("2300", "0100")
    Duration(formatted='2200', minutes=-1320)
"""

from __future__ import annotations

from datetime import time
from typing import NamedTuple

from timr_cli.exceptions import InvalidTimeFormatError

MINUTES_PER_HOUR = 60


class Duration(NamedTuple):
    """Difference between two clock times.

    Attributes:
        formatted: Absolute hours and minutes, zero-padded ``HHMM``
        minutes: Signed minute difference (end minus start)
    """

    formatted: str
    minutes: int


def parse_clock_time(value: str | time) -> time:
    """Parse a 24-hour ``HHMM`` string into a time of day.

    Args:
        value: Exactly four digits, or an existing ``time`` (seconds dropped)

    Returns:
        time with hour and minute set

    Raises:
        InvalidTimeFormatError: If the value is not a valid ``HHMM`` time
    """
    if isinstance(value, time):
        return value.replace(second=0, microsecond=0)
    if not isinstance(value, str) or len(value) != 4 or not value.isascii():
        raise InvalidTimeFormatError(value)
    if not value.isdigit():
        raise InvalidTimeFormatError(value)

    hour, minute = int(value[:2]), int(value[2:])
    if hour > 23 or minute > 59:
        raise InvalidTimeFormatError(value)
    return time(hour, minute)


def format_clock_time(value: time) -> str:
    """Render a time of day as ``HHMM``."""
    return f"{value.hour:02d}{value.minute:02d}"


def canonical_clock_time(value: str | time) -> str:
    """Validate a clock time and return its ``HHMM`` form."""
    return format_clock_time(parse_clock_time(value))


def minutes_since_midnight(value: str | time) -> int:
    parsed = parse_clock_time(value)
    return parsed.hour * MINUTES_PER_HOUR + parsed.minute


def format_minutes(minutes: int) -> str:
    """Render the absolute value of a minute count as ``HHMM``."""
    hours, mins = divmod(abs(minutes), MINUTES_PER_HOUR)
    return f"{hours:02d}{mins:02d}"


def duration_between(start: str | time, end: str | time) -> Duration:
    """Compute ``end - start`` for two times on the same day.

    Args:
        start: Start time (``HHMM`` or ``time``)
        end: End time (``HHMM`` or ``time``)

    Returns:
        Duration with the absolute ``HHMM`` rendering and signed minutes

    Raises:
        InvalidTimeFormatError: If either time is malformed
    """
    minutes = minutes_since_midnight(end) - minutes_since_midnight(start)
    return Duration(format_minutes(minutes), minutes)


def describe_minutes(minutes: int) -> str:
    """Render a minute count as ``"H hours, M minutes"`` (absolute value)."""
    hours, mins = divmod(abs(minutes), MINUTES_PER_HOUR)
    return f"{hours} hours, {mins} minutes"


def describe_signed_minutes(minutes: int) -> str:
    """Like ``describe_minutes`` but prefixed with ``-`` for negative counts."""
    sign = "-" if minutes < 0 else ""
    return f"{sign}{describe_minutes(minutes)}"
