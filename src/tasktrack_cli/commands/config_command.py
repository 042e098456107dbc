"""Configuration management commands."""

from __future__ import annotations

from typing import Annotated

import typer

from tasktrack_cli.services.config_service import get_config_service
from tasktrack_cli.utils.exceptions import ConfigError
from tasktrack_cli.utils.ui.console import get_console
from tasktrack_cli.utils.ui.formatters import format_success

from .decorators import command_wrapper

app = typer.Typer(help="Configuration management commands")
console = get_console()


def _parse_value(value: str) -> str | int | bool | None:
    """Convert a command-line string to the most likely config type."""
    if value.lower() in ("true", "false"):
        return value.lower() == "true"
    if value.isdigit():
        return int(value)
    if value.lower() in ("none", "null", ""):
        return None
    return value


@app.command("view")
@command_wrapper
def view_config() -> None:
    """View current configuration."""
    config_svc = get_config_service()
    console.print_json(config_svc.config.model_dump_json())
    console.print(f"[dim]Config file: {config_svc.config_path}[/dim]")
    console.print(f"[dim]Task file:   {config_svc.task_file_path()}[/dim]")


@app.command("get")
@command_wrapper
def get_config(
    key: Annotated[str, typer.Argument(help="Configuration key (e.g., output.format)")],
) -> None:
    """Get a configuration value."""
    config_svc = get_config_service()
    if key == "storage.path":
        console.print(str(config_svc.task_file_path()))
        return
    value = config_svc.get(key)
    if value is None:
        raise ConfigError(f"Configuration key '{key}' not found")
    console.print(value)


@app.command("set")
@command_wrapper
def set_config(
    key: Annotated[str, typer.Argument(help="Configuration key (e.g., output.format)")],
    value: Annotated[str, typer.Argument(help="Configuration value")],
) -> None:
    """Set a configuration value."""
    parsed_value = _parse_value(value)
    get_config_service().set(key, parsed_value)
    format_success(f"Configuration '{key}' set to '{parsed_value}'")


@app.command("reset")
@command_wrapper
def reset_config(
    key: Annotated[str | None, typer.Argument(help="Configuration key to reset")] = None,
    yes: Annotated[bool, typer.Option("--yes", "-y", help="Skip confirmation")] = False,
) -> None:
    """Reset configuration to defaults."""
    if not yes:
        target = f"'{key}'" if key else "all configuration"
        if not typer.confirm(f"Reset {target} to defaults?"):
            console.print("[yellow]Cancelled.[/yellow]")
            return

    get_config_service().reset(key)
    format_success(f"Reset {key or 'configuration'} to defaults")
