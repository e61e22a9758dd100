"""Configuration management commands."""

from typing import Optional

import typer

from timr_cli.config import get_config_manager, resolve_output_format
from timr_cli.utils.exit_codes import ERROR_INVALID_ARGS, ERROR_NOT_FOUND
from timr_cli.utils.typer_helpers import SuggestingGroup
from timr_cli.utils.ui.console import get_console
from timr_cli.utils.ui.formatters import (
    format_error,
    format_info,
    format_output,
    format_success,
)

app = typer.Typer(cls=SuggestingGroup, help="Configuration management commands")
console = get_console()


def _parse_value(value: str) -> str | int | bool | None:
    """Convert a command-line string to the config value it stands for."""
    lowered = value.lower()
    if lowered in ("true", "false"):
        return lowered == "true"
    if lowered in ("none", "null", ""):
        return None
    if value.isdigit():
        return int(value)
    return value


@app.command("view")
def view_config(
    profile: str = typer.Option("default", "--profile", help="Profile name"),
    output: str | None = typer.Option(
        None, "--output", "-o", help="table, json or yaml (default: output.format)"
    ),
) -> None:
    """View current configuration."""
    output = resolve_output_format(output, profile)
    config_manager = get_config_manager(profile)
    config_dict = config_manager.config.model_dump()
    if output == "table":
        for section, values in config_dict.items():
            for key, value in values.items():
                console.print(f"[cyan]{section}.{key}[/cyan] = {value}")
    else:
        format_output(config_dict, output)


@app.command("get")
def get_config(
    key: str = typer.Argument(..., help="Configuration key (e.g., store.path)"),
    profile: str = typer.Option("default", "--profile", help="Profile name"),
) -> None:
    """Get a configuration value."""
    config_manager = get_config_manager(profile)
    value = config_manager.get(key)
    if not config_manager.has_key(key):
        format_error(f"Configuration key '{key}' not found")
        raise typer.Exit(ERROR_NOT_FOUND)
    console.print(value)


@app.command("set")
def set_config(
    key: str = typer.Argument(..., help="Configuration key (e.g., store.path)"),
    value: str = typer.Argument(..., help="Configuration value"),
    profile: str = typer.Option("default", "--profile", help="Profile name"),
) -> None:
    """Set a configuration value."""
    config_manager = get_config_manager(profile)
    parsed_value = _parse_value(value)
    try:
        config_manager.set(key, parsed_value)
    except KeyError:
        format_error(f"Unknown configuration key '{key}'")
        raise typer.Exit(ERROR_NOT_FOUND) from None
    except ValueError as e:
        format_error(f"Invalid value for '{key}': {e}")
        raise typer.Exit(ERROR_INVALID_ARGS) from None
    format_success(f"Configuration '{key}' set to '{parsed_value}'")


@app.command("reset")
def reset_config(
    key: Optional[str] = typer.Argument(None, help="Configuration key to reset"),
    profile: str = typer.Option("default", "--profile", help="Profile name"),
    yes: bool = typer.Option(False, "--yes", "-y", help="Skip confirmation"),
) -> None:
    """Reset configuration to defaults."""
    if not yes:
        msg = "entire configuration" if not key else f"'{key}'"
        if not typer.confirm(f"Are you sure you want to reset {msg}?"):
            format_info("Cancelled")
            raise typer.Exit(0)

    config_manager = get_config_manager(profile)
    try:
        config_manager.reset(key)
    except KeyError:
        format_error(f"Unknown configuration key '{key}'")
        raise typer.Exit(ERROR_NOT_FOUND) from None

    if key:
        format_success(f"Configuration '{key}' reset to default")
    else:
        format_success("Configuration reset to defaults")


@app.command("list")
def list_profiles(
    profile: str = typer.Option("default", "--profile", help="Profile name"),
) -> None:
    """List all configuration profiles."""
    profiles = get_config_manager(profile).list_profiles()
    if not profiles:
        console.print("[yellow]No profiles found[/yellow]")
        return

    for prof in profiles:
        marker = " *" if prof == profile else ""
        console.print(f"{prof}{marker}")
