"""Normalize command - Rewrite a legacy store into the current format."""

import typer

from timr_cli.adapters.jsonl import JsonlTaskStore
from timr_cli.services.migration_service import MigrationService
from timr_cli.services.task_service import resolve_store_path
from timr_cli.utils.ui.formatters import format_info, format_success

from .decorators import command_wrapper


@command_wrapper
def normalize(
    dry_run: bool = typer.Option(
        False, "--dry-run", help="Report what would change without writing"
    ),
    profile: str = typer.Option("default", "--profile", help="Profile name"),
    store: str | None = typer.Option(None, "--store", help="Task store file"),
) -> None:
    """Convert old date/time formats in the store to YYYY-MM-DD / HHMM."""
    path = resolve_store_path(profile, store)
    report = MigrationService(JsonlTaskStore(path)).normalize_store(dry_run=dry_run)

    if not report.changed:
        format_info(f"All {report.total} record(s) in {path} are already normalized.")
    elif dry_run:
        lines = ", ".join(str(n) for n in report.changed_lines)
        format_info(f"{report.changed} of {report.total} record(s) would change (lines {lines}).")
    else:
        format_success(f"Normalized {report.changed} of {report.total} record(s) in {path}.")
