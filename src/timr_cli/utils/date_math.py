"""Calendar-date arithmetic for task records.

Dates are stored as zero-padded ``YYYY-MM-DD`` strings.
"""

from __future__ import annotations

import re
from datetime import date, datetime, timedelta

from timr_cli.exceptions import InvalidDateFormatError

DATE_FORMAT = "%Y-%m-%d"

# Sentinel returned by days_between when a date is missing.
INCOMPARABLE = -1

_DATE_RE = re.compile(r"^\d{4}-\d{2}-\d{2}$")
_MONTH_DAY_RE = re.compile(r"^\d{4}$")


def parse_date(value: str | date) -> date:
    """Parse a ``YYYY-MM-DD`` string.

    Raises:
        InvalidDateFormatError: If the string is not a valid zero-padded date
    """
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if not isinstance(value, str) or not _DATE_RE.match(value):
        raise InvalidDateFormatError(value)
    try:
        return datetime.strptime(value, DATE_FORMAT).date()
    except ValueError as e:
        raise InvalidDateFormatError(value) from e


def format_date(value: date) -> str:
    return value.strftime(DATE_FORMAT)


def canonical_date(value: str | date) -> str:
    """Validate a date and return its ``YYYY-MM-DD`` form."""
    return format_date(parse_date(value))


def days_between(first: str, second: str) -> int:
    """Absolute number of whole days between two dates.

    Returns ``INCOMPARABLE`` (-1) when either date is empty. Real results are
    never negative, so the sentinel cannot be mistaken for a distance.

    Raises:
        InvalidDateFormatError: If a non-empty date is malformed
    """
    if not first or not second:
        return INCOMPARABLE
    return abs((parse_date(first) - parse_date(second)).days)


def monday_of_iso_week(day: date) -> date:
    """Return the Monday of the ISO 8601 week containing ``day``."""
    return day - timedelta(days=day.weekday())


def monday_of_current_iso_week(today: date | None = None) -> date:
    """Return the Monday of the current ISO week in local time."""
    return monday_of_iso_week(today or date.today())


def resolve_month_day(value: str, today: date | None = None) -> date:
    """Resolve an ``MMDD`` string to that day of the current year.

    Raises:
        InvalidDateFormatError: If the value is not a valid ``MMDD``
    """
    if not _MONTH_DAY_RE.match(value):
        raise InvalidDateFormatError(value, expected="MMDD")
    year = (today or date.today()).year
    try:
        return date(year, int(value[:2]), int(value[2:]))
    except ValueError as e:
        raise InvalidDateFormatError(value, expected="MMDD") from e
