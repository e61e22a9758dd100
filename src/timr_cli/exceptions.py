"""Exceptions raised by the timr core.

Every error carries the exit code the CLI should terminate with; the core
itself never exits.
"""

from __future__ import annotations

from timr_cli.utils import exit_codes


class TimrError(Exception):
    """Base exception for all timr errors."""

    exit_code: int = exit_codes.ERROR_GENERAL


class InvalidTimeFormatError(TimrError, ValueError):
    """Raised when a clock time is not a valid 4-digit ``HHMM`` string."""

    exit_code = exit_codes.ERROR_INVALID_ARGS

    def __init__(self, value: object):
        super().__init__(
            f"Invalid time '{value}': expected 24-hour HHMM (e.g. 0930)"
        )
        self.value = value


class InvalidDateFormatError(TimrError, ValueError):
    """Raised when a date is not a valid ``YYYY-MM-DD`` string."""

    exit_code = exit_codes.ERROR_INVALID_ARGS

    def __init__(self, value: object, expected: str = "YYYY-MM-DD"):
        super().__init__(f"Invalid date '{value}': expected {expected}")
        self.value = value


class TaskNotFoundError(TimrError):
    """Raised when no task matches the requested name or selection."""

    exit_code = exit_codes.ERROR_NOT_FOUND


class RecordMismatchError(TimrError):
    """Raised when no stored record matches the identity used for an update."""

    exit_code = exit_codes.ERROR_CONFLICT

    def __init__(self, identity: tuple[str, str, str]):
        name, date, time_start = identity
        super().__init__(
            f"No stored record for '{name}' started {date} at {time_start}"
        )
        self.identity = identity


class CorruptRecordError(TimrError):
    """Raised when a stored line cannot be decoded into a task."""

    exit_code = exit_codes.ERROR_STORE

    def __init__(self, reason: str, line_number: int | None = None):
        where = f"line {line_number}: " if line_number is not None else ""
        super().__init__(f"Corrupt task record ({where}{reason})")
        self.reason = reason
        self.line_number = line_number


class StoreIOError(TimrError):
    """Raised when the task store file cannot be opened, read or written."""

    exit_code = exit_codes.ERROR_STORE
