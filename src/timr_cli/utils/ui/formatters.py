"""Output formatters for different formats."""

import json
from typing import Any

import yaml
from rich.table import Table

from timr_cli.models import Task
from timr_cli.utils.time_math import describe_minutes, format_minutes
from timr_cli.utils.ui.console import get_console

console = get_console()

NEGATIVE_TOTAL_WARNING = "End is earlier than start; times are compared within one day."


def task_to_row(task: Task) -> dict[str, Any]:
    """Plain-data view of a task for machine-readable output."""
    return task.model_dump()


def format_output(data: Any, output_format: str = "table") -> None:
    """Format and display arbitrary data."""
    if output_format == "json":
        print(json.dumps(data, indent=2, default=str, ensure_ascii=False))
    elif output_format == "yaml":
        print(yaml.safe_dump(data, default_flow_style=False, sort_keys=False))
    elif isinstance(data, dict):
        format_single_item(data)
    else:
        console.print(data)


def format_tasks(
    tasks: list[Task],
    output_format: str = "table",
    *,
    title: str | None = None,
    show_index: bool = False,
) -> None:
    """Display a list of tasks."""
    if output_format in ("json", "yaml"):
        format_output([task_to_row(t) for t in tasks], output_format)
        return

    if not tasks:
        console.print("[yellow]No tasks found[/yellow]")
        return

    table = Table(title=title, show_header=True, header_style="bold magenta")
    if show_index:
        table.add_column("#", justify="right", style="dim")
    table.add_column("Date")
    table.add_column("Task", style="cyan")
    table.add_column("Start")
    table.add_column("End")
    table.add_column("Total", justify="right")

    for index, task in enumerate(tasks):
        end = task.time_end or "[green]running[/green]"
        total = "-" if task.is_open else format_minutes(task.time_total)
        if task.time_total < 0:
            total = f"[red]-{total}[/red]"
        row = [task.date, task.task_name, task.time_start, end, total]
        if show_index:
            row.insert(0, str(index))
        table.add_row(*row)

    console.print(table)


def format_task(task: Task, output_format: str = "table") -> None:
    """Display a single task."""
    if output_format in ("json", "yaml"):
        format_output(task_to_row(task), output_format)
        return
    item = task_to_row(task)
    if task.is_open:
        item["time_end"] = None
    else:
        item["time_total"] = describe_minutes(task.time_total)
    format_single_item(item)


def format_single_item(item: dict) -> None:
    """Format a single item as key-value pairs."""
    table = Table(show_header=False, box=None)
    table.add_column("Key", style="cyan")
    table.add_column("Value", style="white")

    for key, value in item.items():
        formatted_key = key.replace("_", " ").title()
        if isinstance(value, bool):
            formatted_value = "✓" if value else "✗"
        elif value is None:
            formatted_value = "-"
        else:
            formatted_value = str(value)
        table.add_row(formatted_key, formatted_value)

    console.print(table)


def format_error(message: str) -> None:
    """Format and display an error message."""
    console.print(f"[bold red]Error:[/bold red] {message}")


def format_success(message: str) -> None:
    """Format and display a success message."""
    console.print(f"[bold green]Success:[/bold green] {message}")


def format_warning(message: str) -> None:
    """Format and display a warning message."""
    console.print(f"[bold yellow]Warning:[/bold yellow] {message}")


def warn_if_negative(minutes: int) -> None:
    """Warn that a negative total comes from comparing times within one day."""
    if minutes < 0:
        format_warning(NEGATIVE_TOTAL_WARNING)


def format_info(message: str) -> None:
    """Format and display an info message."""
    console.print(f"[bold blue]Info:[/bold blue] {message}")
