"""Start command - Start tracking a task."""

import typer

from timr_cli.config import resolve_output_format
from timr_cli.services.task_service import get_task_service
from timr_cli.utils.time_math import canonical_clock_time
from timr_cli.utils.ui.formatters import (
    format_info,
    format_success,
    format_task,
    format_warning,
)

from .decorators import command_wrapper


@command_wrapper
def start(
    name: str = typer.Argument(..., help="Name of the task (e.g. 'code review #175')"),
    at: str | None = typer.Argument(
        None, help="Start time, 24-hour HHMM (default: now)"
    ),
    yes: bool = typer.Option(
        False, "--yes", "-y", help="Start even if the task is already running"
    ),
    output: str | None = typer.Option(
        None, "--output", "-o", help="table, json or yaml (default: output.format)"
    ),
    profile: str = typer.Option("default", "--profile", help="Profile name"),
    store: str | None = typer.Option(None, "--store", help="Task store file"),
) -> None:
    """Start a task."""
    output = resolve_output_format(output, profile)
    if at is not None:
        at = canonical_clock_time(at)

    service = get_task_service(profile, store)
    if service.has_open_conflict(name) and not yes:
        format_warning(f"'{name}' is already running.")
        if not typer.confirm("Start another one anyway?", default=False):
            format_info("Cancelled.")
            raise typer.Exit(0)

    task = service.start_task(name, at)
    if output == "table":
        format_success(f"{task.task_name} started at {task.time_start}")
    else:
        format_task(task, output)
