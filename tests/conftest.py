"""Shared test fixtures and configuration.

Provides infrastructure to isolate tests from the real config, data and log
directories, plus a task store in a temporary directory and a frozen clock.
"""

from __future__ import annotations

from datetime import datetime
from unittest.mock import patch

import pytest

from timr_cli.adapters.jsonl import JsonlTaskStore
from timr_cli.models import Task
from timr_cli.services.task_service import TaskService
from timr_cli.utils.clock import FixedClock

# Wednesday; the ISO week starts on Monday 2024-01-15.
NOW = datetime(2024, 1, 17, 10, 30, 45)
TODAY = "2024-01-17"


# ---------------------------------------------------------------------------
# Directory isolation
# ---------------------------------------------------------------------------


@pytest.fixture(autouse=True)
def isolated_dirs(tmp_path):
    """Point platformdirs lookups at *tmp_path* and reset module singletons."""
    import timr_cli.config as config_module
    from timr_cli.utils.logger import reset_logger

    config_dir = str(tmp_path / "config")
    data_dir = str(tmp_path / "data")
    log_dir = str(tmp_path / "logs")

    reset_logger()
    config_module._config_manager = None
    with patch("timr_cli.config.user_config_dir", return_value=config_dir):
        with patch("timr_cli.services.task_service.user_data_dir", return_value=data_dir):
            with patch("timr_cli.utils.logger.user_log_dir", return_value=log_dir):
                yield tmp_path
    reset_logger()
    config_module._config_manager = None


@pytest.fixture(autouse=True)
def wide_console():
    """Keep Rich from wrapping long temp paths in captured output."""
    from timr_cli.utils.ui.console import get_console

    console = get_console()
    original = console._width
    console.width = 200
    yield console
    console._width = original
    console.no_color = False


@pytest.fixture()
def frozen_now():
    """Freeze the clock the CLI commands see at NOW."""
    with patch("timr_cli.services.task_service.SystemClock", return_value=FixedClock(NOW)):
        yield NOW


# ---------------------------------------------------------------------------
# Store / service
# ---------------------------------------------------------------------------


@pytest.fixture()
def store_path(tmp_path):
    return tmp_path / "timr.jsonl"


@pytest.fixture()
def store(store_path) -> JsonlTaskStore:
    return JsonlTaskStore(store_path)


@pytest.fixture()
def clock() -> FixedClock:
    return FixedClock(NOW)


@pytest.fixture()
def service(store, clock) -> TaskService:
    return TaskService(store, clock=clock)


def make_task(
    task_name: str = "debugging",
    date: str = TODAY,
    time_start: str = "0900",
    time_end: str | None = None,
    time_total: int | None = None,
) -> Task:
    """Build a Task whose total is consistent with its times by default."""
    if time_total is None:
        if time_end is None:
            time_total = 0
        else:
            start = int(time_start[:2]) * 60 + int(time_start[2:])
            end = int(time_end[:2]) * 60 + int(time_end[2:])
            time_total = end - start
    return Task(
        date=date,
        task_name=task_name,
        time_start=time_start,
        time_end=time_end,
        time_total=time_total,
    )


@pytest.fixture()
def task_factory():
    """Expose make_task to tests that prefer fixture injection."""
    return make_task
