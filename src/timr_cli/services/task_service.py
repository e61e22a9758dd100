"""Task service - Business logic for time tracking.

This service layer sits between commands and the task store, providing
a clean API for the task lifecycle (start, end, amend), listing and the
time arithmetic the CLI exposes.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from datetime import date, time
from pathlib import Path

from platformdirs import user_data_dir

from timr_cli.adapters.jsonl import JsonlTaskStore
from timr_cli.config import get_config_manager
from timr_cli.exceptions import TaskNotFoundError
from timr_cli.models import Task
from timr_cli.repositories import TaskStore
from timr_cli.utils.clock import Clock, SystemClock
from timr_cli.utils.date_math import (
    INCOMPARABLE,
    days_between,
    format_date,
    monday_of_current_iso_week,
    parse_date,
)
from timr_cli.utils.time_math import (
    Duration,
    duration_between,
    format_clock_time,
    parse_clock_time,
)

logger = logging.getLogger(__name__)

DEFAULT_STORE_NAME = "timr.jsonl"


def sum_task_total_time(first: Task, second: Task) -> int:
    """Add the recorded minutes of two records of the same task.

    Returns -1 when the records belong to different tasks.
    """
    if first.task_name != second.task_name:
        return -1
    return first.time_total + second.time_total


def calc_diff(
    start: str | time, end: str | time | None = None, clock: Clock | None = None
) -> Duration:
    """Duration between two clock times; ``end`` defaults to the current time."""
    if end is None:
        end = (clock or SystemClock()).current_time()
    return duration_between(start, end)


class TaskService:
    """Service for task business logic.

    This service recomputes ``time_total`` from start and end on every
    update, reports duplicate open tasks to the caller and orchestrates
    reads and writes through the task store.
    """

    def __init__(self, store: TaskStore, clock: Clock | None = None):
        """Initialize the task service.

        Args:
            store: TaskStore implementation for persistence
            clock: Source of the current date and time (local system clock
                by default)
        """
        self.store = store
        self.clock = clock or SystemClock()

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------

    def _resolve_time(self, at: str | time | None) -> str:
        if at is None:
            return format_clock_time(self.clock.current_time())
        return format_clock_time(parse_clock_time(at))

    def find_open_task(self, name: str) -> Task | None:
        """Return the most recently started open task with this name."""
        return self.store.find(lambda t: t.is_open and t.task_name == name)

    def has_open_conflict(self, name: str) -> bool:
        """Check whether starting ``name`` would duplicate an open task.

        The caller decides whether to proceed; this never prompts.
        """
        return self.find_open_task(name) is not None

    def start_task(self, name: str, at: str | time | None = None) -> Task:
        """Start a task and record it as open.

        Args:
            name: Task name
            at: Start time (``HHMM``); defaults to the current time

        Returns:
            The created open Task
        """
        task = Task(
            date=format_date(self.clock.today()),
            task_name=name,
            time_start=self._resolve_time(at),
        )
        self.store.prepend(task)
        logger.info("started %r at %s on %s", name, task.time_start, task.date)
        return task

    def end_task(self, name: str, at: str | time | None = None) -> Task:
        """Close the most recent open task with this name.

        Args:
            name: Task name
            at: End time (``HHMM``); defaults to the current time

        Returns:
            The closed Task with ``time_total`` computed

        Raises:
            TaskNotFoundError: If no open task has this name
            RecordMismatchError: If the record vanished before the rewrite
        """
        time_end = self._resolve_time(at)
        task = self.find_open_task(name)
        if task is None:
            raise TaskNotFoundError(f"No open task named '{name}'")

        closed = task.model_copy(
            update={
                "time_end": time_end,
                "time_total": duration_between(task.time_start, time_end).minutes,
            }
        )
        self.store.replace_by_identity(closed, identity=task.identity)
        logger.info(
            "ended %r at %s (%d min)", name, closed.time_end, closed.time_total
        )
        return closed

    def amend_task(
        self,
        task: Task,
        *,
        time_start: str | time | None = None,
        time_end: str | time | None = None,
    ) -> Task:
        """Overwrite the start and/or end time of a stored task.

        ``time_total`` is recomputed from the resulting times; an amended
        task that is still open keeps a total of 0.

        Raises:
            RecordMismatchError: If ``task`` is no longer in the store
        """
        updates: dict[str, object] = {}
        if time_start is not None:
            updates["time_start"] = format_clock_time(parse_clock_time(time_start))
        if time_end is not None:
            updates["time_end"] = format_clock_time(parse_clock_time(time_end))

        amended = task.model_copy(update=updates)
        amended.time_total = (
            0
            if amended.is_open
            else duration_between(amended.time_start, amended.time_end).minutes
        )
        self.store.replace_by_identity(amended, identity=task.identity)
        logger.info("amended %s -> %s", task.identity, amended.identity)
        return amended

    def amend_by_index(
        self,
        days: int,
        index: int,
        *,
        time_start: str | time | None = None,
        time_end: str | time | None = None,
    ) -> Task:
        """Amend the task at ``index`` of ``list_for_day_range(days)``.

        Raises:
            TaskNotFoundError: If the index is outside the listed range
        """
        candidates = self.list_for_day_range(days)
        if not 0 <= index < len(candidates):
            raise TaskNotFoundError(
                f"No task at index {index} (found {len(candidates)} "
                f"task(s) within {days} day(s))"
            )
        return self.amend_task(
            candidates[index], time_start=time_start, time_end=time_end
        )

    # ------------------------------------------------------------------
    # Listing
    # ------------------------------------------------------------------

    def list_all(self) -> list[Task]:
        return self.store.read_all()

    def list_incomplete(self) -> list[Task]:
        """List tasks that have not been ended yet."""
        return self.store.filter(lambda t: t.is_open)

    def list_for_day_range(self, days: int) -> list[Task]:
        """List tasks dated within ``days`` days of today.

        The distance is absolute, so this is a window around today rather
        than strictly the past ``days`` days.
        """
        today = format_date(self.clock.today())

        def within(task: Task) -> bool:
            distance = days_between(task.date, today)
            return distance != INCOMPARABLE and distance <= days

        return self.store.filter(within)

    def list_today(self) -> list[Task]:
        return self.list_for_day_range(0)

    def list_this_week(self) -> list[Task]:
        """List tasks dated on or after Monday of the current ISO week."""
        monday = monday_of_current_iso_week(self.clock.today())
        return self.store.filter(lambda t: parse_date(t.date) >= monday)

    def list_for_date(self, day: str | date) -> list[Task]:
        """List tasks recorded on one specific date."""
        target = format_date(parse_date(day))
        return self.store.filter(lambda t: days_between(t.date, target) == 0)

    # ------------------------------------------------------------------
    # Arithmetic
    # ------------------------------------------------------------------

    def calc_diff(
        self, start: str | time, end: str | time | None = None
    ) -> Duration:
        """Duration between two clock times; ``end`` defaults to now."""
        return calc_diff(start, end, clock=self.clock)

    def total_minutes_for(self, name: str, days: int | None = None) -> int:
        """Sum ``time_total`` over the closed records of a task.

        Args:
            name: Task name
            days: Only count records within this many days of today

        Raises:
            TaskNotFoundError: If no closed record has this name
        """
        tasks: Iterable[Task] = (
            self.list_all() if days is None else self.list_for_day_range(days)
        )
        closed = [t for t in tasks if t.task_name == name and not t.is_open]
        if not closed:
            raise TaskNotFoundError(f"No completed task named '{name}'")
        return sum(t.time_total for t in closed)


def default_store_path() -> Path:
    return Path(user_data_dir("timr-cli")) / DEFAULT_STORE_NAME


def resolve_store_path(
    profile: str = "default", store_path: str | Path | None = None
) -> Path:
    """Pick the store file: explicit override, then config, then default."""
    if store_path is None:
        store_path = get_config_manager(profile).get("store.path")
    return Path(store_path).expanduser() if store_path else default_store_path()


def get_task_service(
    profile: str = "default",
    store_path: str | Path | None = None,
    clock: Clock | None = None,
) -> TaskService:
    """Build a TaskService for the configured (or overridden) store file."""
    path = resolve_store_path(profile, store_path)
    logger.debug("using task store %s (profile=%s)", path, profile)
    return TaskService(JsonlTaskStore(path), clock=clock)
