"""End command - Stop tracking a running task."""

import typer

from timr_cli.config import resolve_output_format
from timr_cli.services.task_service import get_task_service
from timr_cli.utils.time_math import describe_signed_minutes
from timr_cli.utils.ui.formatters import format_success, format_task, warn_if_negative

from .decorators import command_wrapper


@command_wrapper
def end(
    name: str = typer.Argument(..., help="Name of the running task"),
    at: str | None = typer.Argument(None, help="End time, 24-hour HHMM (default: now)"),
    output: str | None = typer.Option(
        None, "--output", "-o", help="table, json or yaml (default: output.format)"
    ),
    profile: str = typer.Option("default", "--profile", help="Profile name"),
    store: str | None = typer.Option(None, "--store", help="Task store file"),
) -> None:
    """End a task."""
    output = resolve_output_format(output, profile)
    service = get_task_service(profile, store)
    task = service.end_task(name, at)
    if output == "table":
        format_success(
            f"{task.task_name} ended at {task.time_end} "
            f"({describe_signed_minutes(task.time_total)})"
        )
        warn_if_negative(task.time_total)
    else:
        format_task(task, output)
