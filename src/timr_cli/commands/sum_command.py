"""Sum command - Total time recorded for a task."""

import typer

from timr_cli.config import resolve_output_format
from timr_cli.services.task_service import get_task_service
from timr_cli.utils.time_math import describe_signed_minutes, format_minutes
from timr_cli.utils.ui.console import get_console
from timr_cli.utils.ui.formatters import format_output, warn_if_negative

from .decorators import command_wrapper

console = get_console()


@command_wrapper
def sum_task(
    name: str = typer.Argument(..., help="Name of the task"),
    days: int | None = typer.Option(
        None, "--days", "-d", min=0, help="Only count tasks within N days of today"
    ),
    output: str | None = typer.Option(
        None, "--output", "-o", help="table, json or yaml (default: output.format)"
    ),
    profile: str = typer.Option("default", "--profile", help="Profile name"),
    store: str | None = typer.Option(None, "--store", help="Task store file"),
) -> None:
    """Sum the time spent on completed runs of a task."""
    output = resolve_output_format(output, profile)
    service = get_task_service(profile, store)
    minutes = service.total_minutes_for(name, days=days)

    if output == "table":
        console.print(
            f"[cyan]{name}[/cyan]: {describe_signed_minutes(minutes)} "
            f"[dim]({format_minutes(minutes)})[/dim]"
        )
        warn_if_negative(minutes)
    else:
        format_output({"task_name": name, "days": days, "minutes": minutes}, output)
