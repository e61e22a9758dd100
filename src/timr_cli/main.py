"""Main entry point for the timr CLI."""

import logging

import typer

from timr_cli import __version__
from timr_cli.commands import config
from timr_cli.commands.calc_command import calc
from timr_cli.commands.end_command import end
from timr_cli.commands.fix_command import fix
from timr_cli.commands.list_command import list_tasks
from timr_cli.commands.normalize_command import normalize
from timr_cli.commands.start_command import start
from timr_cli.commands.sum_command import sum_task
from timr_cli.config import get_config_manager
from timr_cli.utils.logger import enable_console_logging, get_logger, set_file_level
from timr_cli.utils.typer_helpers import SuggestingGroup
from timr_cli.utils.ui.console import get_console

app = typer.Typer(
    name="timr",
    cls=SuggestingGroup,
    help="Track how long you spend on things, from the command line",
    no_args_is_help=True,
)

console = get_console()


@app.callback()
def main_callback(
    debug: bool = typer.Option(False, "--debug", help="Print debug logs to stderr"),
) -> None:
    """Configure logging and console output before any command runs."""
    get_logger()
    config_manager = get_config_manager()
    level = str(config_manager.get("logging.level") or "INFO").upper()
    if isinstance(logging.getLevelName(level), int):
        set_file_level(level)
    if debug:
        enable_console_logging(logging.DEBUG)
    console.no_color = not config_manager.get("output.color")


app.command("start")(start)
app.command("end")(end)
app.command("list")(list_tasks)
app.command("calc")(calc)
app.command("sum")(sum_task)
app.command("fix")(fix)
app.command("normalize")(normalize)
app.add_typer(config.app, name="config", help="Configuration management")


@app.command()
def version() -> None:
    """Show version information."""
    console.print(f"[bold]timr[/bold] version [cyan]{__version__}[/cyan]")


# Main entry point
def main():
    """Main entry point."""
    app()


if __name__ == "__main__":
    main()
