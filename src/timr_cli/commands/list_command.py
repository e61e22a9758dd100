"""List command - List recorded tasks."""

import typer

from timr_cli.config import resolve_output_format
from timr_cli.services.task_service import get_task_service
from timr_cli.utils.date_math import canonical_date, resolve_month_day
from timr_cli.utils.exit_codes import ERROR_INVALID_ARGS
from timr_cli.utils.ui.formatters import format_error, format_tasks

from .decorators import command_wrapper


@command_wrapper
def list_tasks(
    today: bool = typer.Option(False, "--today", "-t", help="Only today's tasks"),
    week: bool = typer.Option(False, "--week", "-w", help="Tasks since Monday"),
    days: int | None = typer.Option(
        None, "--days", "-d", min=0, help="Tasks within N days of today"
    ),
    on: str | None = typer.Option(
        None, "--date", help="Tasks of one day (MMDD this year, or YYYY-MM-DD)"
    ),
    incomplete: bool = typer.Option(
        False, "--incomplete", "-i", help="Only tasks that are still running"
    ),
    output: str | None = typer.Option(
        None, "--output", "-o", help="table, json or yaml (default: output.format)"
    ),
    profile: str = typer.Option("default", "--profile", help="Profile name"),
    store: str | None = typer.Option(None, "--store", help="Task store file"),
) -> None:
    """List tasks (all of them unless a filter is given)."""
    output = resolve_output_format(output, profile)
    selected = [today, week, days is not None, on is not None, incomplete]
    if sum(selected) > 1:
        format_error("Use only one of --today, --week, --days, --date, --incomplete")
        raise typer.Exit(ERROR_INVALID_ARGS)

    service = get_task_service(profile, store)
    if today:
        tasks, title = service.list_today(), "Today"
    elif week:
        tasks, title = service.list_this_week(), "This week"
    elif days is not None:
        tasks, title = service.list_for_day_range(days), f"Within {days} day(s)"
    elif on is not None:
        day = (
            resolve_month_day(on, service.clock.today())
            if len(on) == 4
            else canonical_date(on)
        )
        tasks, title = service.list_for_date(day), str(day)
    elif incomplete:
        tasks, title = service.list_incomplete(), "Running"
    else:
        tasks, title = service.list_all(), "All tasks"

    format_tasks(tasks, output, title=title)
