"""Calc command - Difference between two clock times."""

import typer

from timr_cli.config import resolve_output_format
from timr_cli.services.task_service import calc_diff
from timr_cli.utils.time_math import canonical_clock_time, describe_minutes
from timr_cli.utils.ui.console import get_console
from timr_cli.utils.ui.formatters import format_output, warn_if_negative

from .decorators import command_wrapper

console = get_console()


@command_wrapper
def calc(
    start: str = typer.Argument(..., help="Starting time, 24-hour HHMM (e.g. 1630)"),
    end: str | None = typer.Argument(
        None, help="Ending time, 24-hour HHMM (default: now)"
    ),
    output: str | None = typer.Option(
        None, "--output", "-o", help="table, json or yaml (default: output.format)"
    ),
    profile: str = typer.Option("default", "--profile", help="Profile name"),
) -> None:
    """Get the difference between two times of day."""
    output = resolve_output_format(output, profile)
    start = canonical_clock_time(start)
    end = canonical_clock_time(end) if end is not None else None
    duration = calc_diff(start, end)

    if output == "table":
        console.print(
            f"{duration.formatted[:2]} hours and {duration.formatted[2:]} minutes "
            f"[dim]({duration.minutes} min)[/dim]"
        )
        warn_if_negative(duration.minutes)
        return

    format_output(
        {
            "start": start,
            "end": end,
            "formatted": duration.formatted,
            "minutes": duration.minutes,
            "description": describe_minutes(duration.minutes),
        },
        output,
    )
