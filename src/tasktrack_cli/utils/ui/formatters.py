"""Output formatters for different formats."""

from __future__ import annotations

import json
from typing import Any

import yaml
from rich.markup import escape
from rich.table import Table

from tasktrack_cli.utils.ui.console import get_console

console = get_console()

OUTPUT_FORMATS = ("pretty", "table", "json", "yaml", "quiet")


def format_output(data: list[dict[str, Any]], output_format: str = "pretty") -> None:
    """Format and display a list of numbered task rows."""
    if output_format == "json":
        print(json.dumps(data, indent=2, default=str))
    elif output_format == "yaml":
        print(yaml.dump(data, default_flow_style=False, sort_keys=False), end="")
    elif output_format == "table":
        format_table(data)
    elif output_format == "quiet":
        format_quiet(data)
    else:
        # Default to pretty
        format_pretty(data)


def format_table(items: list[dict[str, Any]]) -> None:
    """Format task rows as a table."""
    if not items:
        console.print("[yellow]No tasks found[/yellow]")
        return

    table = Table(show_header=True, header_style="bold magenta")
    columns = [col for col in items[0] if col != "text"]
    for col in columns:
        table.add_column(col.replace("_", " ").title())

    for item in items:
        row = []
        for col in columns:
            value = item.get(col, "")
            if isinstance(value, bool):
                value = "✓" if value else "✗"
            elif value is None:
                value = "-"
            else:
                value = escape(str(value))
            row.append(value)
        table.add_row(*row)

    console.print(table)


def format_pretty(items: list[dict[str, Any]]) -> None:
    """Print one ``N.[tag][X] description`` line per task, completed ones dimmed."""
    if not items:
        console.print("[yellow]No tasks found[/yellow]")
        return

    for item in items:
        line = escape(f"{item['number']}.{item['text']}")
        if item.get("is_completed"):
            console.print(f"[dim]{line}[/dim]")
        else:
            console.print(line)


def format_quiet(items: list[dict[str, Any]]) -> None:
    """Format output in quiet mode (task numbers only)."""
    for item in items:
        print(item["number"])


def format_reply(message: str) -> None:
    """Print a multi-line reply from the task list verbatim."""
    console.print(escape(message))


def format_error(message: str) -> None:
    """Format and display an error message."""
    console.print(f"[bold red]Error:[/bold red] {escape(message)}")


def format_success(message: str) -> None:
    """Format and display a success message."""
    console.print(f"[bold green]Success:[/bold green] {escape(message)}")


def format_warning(message: str) -> None:
    """Format and display a warning message."""
    console.print(f"[bold yellow]Warning:[/bold yellow] {escape(message)}")


def format_info(message: str) -> None:
    """Format and display an info message."""
    console.print(f"[bold blue]Info:[/bold blue] {escape(message)}")
