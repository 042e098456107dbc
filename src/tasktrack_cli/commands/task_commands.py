"""Task commands: add, list, mark, unmark, delete and find."""

from __future__ import annotations

from typing import Annotated, Any

import typer

from tasktrack_cli.models import Deadline, Event, Task, ToDo, build_task
from tasktrack_cli.services.config_service import get_config_service
from tasktrack_cli.services.task_list_service import get_task_list
from tasktrack_cli.utils.exceptions import InvalidCommandError
from tasktrack_cli.utils.ui.formatters import (
    OUTPUT_FORMATS,
    format_info,
    format_output,
    format_reply,
    format_success,
)

from .decorators import command_wrapper

OutputOption = Annotated[
    str | None,
    typer.Option(
        "--output", "-o", help=f"Output format ({'/'.join(OUTPUT_FORMATS)})"
    ),
]


def _join_description(words: list[str]) -> str:
    description = " ".join(words).strip()
    if not description:
        raise InvalidCommandError("The description of a task cannot be empty.")
    return description


def _resolve_output(output: str | None) -> str:
    if output is None:
        return get_config_service().config.output.format
    if output not in OUTPUT_FORMATS:
        raise InvalidCommandError(
            f"Unknown output format '{output}'. Choose from: {', '.join(OUTPUT_FORMATS)}"
        )
    return output


def _task_rows(numbered: list[tuple[int, Task]]) -> list[dict[str, Any]]:
    return [
        {
            "number": number,
            "type": type(task).__name__,
            "description": task.description,
            "when": task.when,
            "is_completed": task.is_completed,
            "text": str(task),
        }
        for number, task in numbered
    ]


@command_wrapper
def todo(
    description: Annotated[list[str], typer.Argument(help="What needs doing")],
) -> None:
    """Add a to-do."""
    task_list = get_task_list()
    task = build_task(ToDo, description=_join_description(description))
    format_reply(task_list.add_task(task))


@command_wrapper
def deadline(
    description: Annotated[list[str], typer.Argument(help="What needs doing")],
    by: Annotated[str, typer.Option("--by", "-b", help="When it is due")],
) -> None:
    """Add a task that is due by a given time."""
    task_list = get_task_list()
    task = build_task(
        Deadline, description=_join_description(description), by=by.strip()
    )
    format_reply(task_list.add_task(task))


@command_wrapper
def event(
    description: Annotated[list[str], typer.Argument(help="What is happening")],
    at: Annotated[str, typer.Option("--at", "-a", help="When it happens")],
) -> None:
    """Add an event happening at a given time."""
    task_list = get_task_list()
    task = build_task(
        Event, description=_join_description(description), at=at.strip()
    )
    format_reply(task_list.add_task(task))


@command_wrapper
def list_tasks(output: OutputOption = None) -> None:
    """List all tasks, open ones first."""
    output = _resolve_output(output)
    task_list = get_task_list()
    format_output(_task_rows(list(enumerate(task_list, start=1))), output)
    if output in ("pretty", "table"):
        format_info(task_list.get_remaining_tasks())


@command_wrapper
def mark(
    number: Annotated[str, typer.Argument(help="Task number as shown by 'list'")],
) -> None:
    """Mark a task as done."""
    task = get_task_list().mark_task(number, True)
    format_success(f"Marked as done: {task}")


@command_wrapper
def unmark(
    number: Annotated[str, typer.Argument(help="Task number as shown by 'list'")],
) -> None:
    """Mark a task as not done yet."""
    task = get_task_list().mark_task(number, False)
    format_success(f"Marked as not done: {task}")


@command_wrapper
def delete(
    number: Annotated[str, typer.Argument(help="Task number as shown by 'list'")],
) -> None:
    """Delete a task."""
    format_reply(get_task_list().delete_task(number))


@command_wrapper
def find(
    query: Annotated[str, typer.Argument(help="Text to look for in descriptions")],
    output: OutputOption = None,
) -> None:
    """Find tasks whose description contains the given text (case-sensitive)."""
    output = _resolve_output(output)
    matches = get_task_list().find_matches(query)
    if not matches and output in ("pretty", "table"):
        format_info("No matching tasks found.")
        return
    format_output(_task_rows(matches), output)
