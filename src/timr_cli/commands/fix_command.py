"""Fix command - Amend the times of a recorded task."""

import typer

from timr_cli.config import resolve_output_format
from timr_cli.services.task_service import get_task_service
from timr_cli.utils.exit_codes import ERROR_INVALID_ARGS
from timr_cli.utils.time_math import canonical_clock_time
from timr_cli.utils.ui.formatters import (
    format_error,
    format_info,
    format_success,
    format_task,
    format_tasks,
)

from .decorators import command_wrapper


@command_wrapper
def fix(
    days: int = typer.Option(
        0, "--days", "-d", min=0, help="Choose among tasks within N days of today"
    ),
    index: int | None = typer.Option(
        None, "--index", "-n", min=0, help="Index of the task in the listing"
    ),
    start: str | None = typer.Option(None, "--start", help="New start time (HHMM)"),
    end: str | None = typer.Option(None, "--end", help="New end time (HHMM)"),
    output: str | None = typer.Option(
        None, "--output", "-o", help="table, json or yaml (default: output.format)"
    ),
    profile: str = typer.Option("default", "--profile", help="Profile name"),
    store: str | None = typer.Option(None, "--store", help="Task store file"),
) -> None:
    """Amend the start and/or end time of a task."""
    output = resolve_output_format(output, profile)
    if start is None and end is None:
        format_error("Nothing to change: pass --start and/or --end")
        raise typer.Exit(ERROR_INVALID_ARGS)
    start = canonical_clock_time(start) if start is not None else None
    end = canonical_clock_time(end) if end is not None else None

    service = get_task_service(profile, store)
    if index is None:
        candidates = service.list_for_day_range(days)
        if not candidates:
            format_info(f"No tasks within {days} day(s).")
            raise typer.Exit(0)
        format_tasks(candidates, title="Tasks", show_index=True)
        index = typer.prompt("Index of the task to amend", type=int)

    task = service.amend_by_index(days, index, time_start=start, time_end=end)
    if output == "table":
        format_success(f"Amended {task.task_name} ({task.date})")
    format_task(task, output)
