"""Main entry point for TaskTrack CLI."""

import typer

from tasktrack_cli import __version__
from tasktrack_cli.commands import chat_command, config_command, task_commands
from tasktrack_cli.services.config_service import get_config_service
from tasktrack_cli.utils.exceptions import ConfigError
from tasktrack_cli.utils.logger import set_log_level
from tasktrack_cli.utils.typer_helpers import SuggestingGroup
from tasktrack_cli.utils.ui.console import apply_color_setting, get_console
from tasktrack_cli.utils.ui.formatters import format_error

# Create main app with custom group class
app = typer.Typer(
    name="tasktrack",
    cls=SuggestingGroup,
    help="Keep track of to-dos, deadlines and events from the command line",
    no_args_is_help=True,
)

console = get_console()


@app.callback()
def startup() -> None:
    """Apply logging and colour settings before any command runs."""
    try:
        config = get_config_service().config
    except ConfigError as e:
        format_error(e.message)
        raise typer.Exit(code=e.exit_code) from e

    set_log_level(config.logging.level)
    apply_color_setting(config.output.color)


# Task commands
app.command("todo")(task_commands.todo)
app.command("deadline")(task_commands.deadline)
app.command("event")(task_commands.event)
app.command("list")(task_commands.list_tasks)
app.command("mark")(task_commands.mark)
app.command("unmark")(task_commands.unmark)
app.command("delete")(task_commands.delete)
app.command("find")(task_commands.find)
app.command("chat")(chat_command.chat)

# Add subcommands
app.add_typer(config_command.app, name="config", help="Configuration management")


@app.command()
def version() -> None:
    """Show version information."""
    console.print(f"[bold]TaskTrack CLI[/bold] version [cyan]{__version__}[/cyan]")


# Main entry point
def main():
    """Main entry point."""
    app()


if __name__ == "__main__":
    main()
