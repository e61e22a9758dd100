"""Task data models."""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, Field, field_validator

from timr_cli.utils.date_math import canonical_date
from timr_cli.utils.time_math import canonical_clock_time

# (task_name, date, time_start)
TaskIdentity = tuple[str, str, str]


class Task(BaseModel):
    """A tracked task.

    Attributes:
        date: Day the task was started (``YYYY-MM-DD``)
        task_name: Free-text label, unique among open tasks by convention
        time_start: Clock time the task began (``HHMM``)
        time_end: Clock time the task ended (``HHMM``), None while open
        time_total: Signed minutes from start to end, 0 while open
    """

    date: str
    task_name: str = Field(min_length=1)
    time_start: str
    time_end: Optional[str] = None
    time_total: int = 0

    @field_validator("date")
    @classmethod
    def _check_date(cls, value: str) -> str:
        return canonical_date(value)

    @field_validator("task_name")
    @classmethod
    def _check_name(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("task name must not be blank")
        return value

    @field_validator("time_start", "time_end")
    @classmethod
    def _check_time(cls, value: Optional[str]) -> Optional[str]:
        if value is None:
            return value
        return canonical_clock_time(value)

    @property
    def is_open(self) -> bool:
        return self.time_end is None

    @property
    def identity(self) -> TaskIdentity:
        """Composite key used to find this record again on update."""
        return (self.task_name, self.date, self.time_start)

    def matches(self, identity: TaskIdentity) -> bool:
        return self.identity == identity
