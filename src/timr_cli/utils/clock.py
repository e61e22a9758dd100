"""Wall-clock providers.

The service layer asks a ``Clock`` for "now" instead of calling
``datetime.now()`` directly, so tests can pin the current date and time.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from datetime import date, datetime, time


class Clock(ABC):
    """Source of the current local date and time."""

    @abstractmethod
    def now(self) -> datetime:
        raise NotImplementedError("Clock.now() must be implemented")

    def today(self) -> date:
        return self.now().date()

    def current_time(self) -> time:
        """Current local time truncated to minutes."""
        return self.now().time().replace(second=0, microsecond=0)


class SystemClock(Clock):
    """Clock backed by the operating system's local time."""

    def now(self) -> datetime:
        return datetime.now()


class FixedClock(Clock):
    """Clock frozen at a given moment."""

    def __init__(self, moment: datetime):
        self.moment = moment

    def now(self) -> datetime:
        return self.moment
