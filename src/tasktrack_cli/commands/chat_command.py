"""Interactive chat session over the task list."""

from __future__ import annotations

import sys
from collections.abc import Iterator

from prompt_toolkit import PromptSession
from prompt_toolkit.completion import WordCompleter
from prompt_toolkit.history import InMemoryHistory

from tasktrack_cli.services.task_list_service import get_task_list
from tasktrack_cli.utils.command_parser import ACTIONS, execute, parse_command
from tasktrack_cli.utils.exceptions import TaskListError
from tasktrack_cli.utils.logger import get_logger
from tasktrack_cli.utils.ui.console import get_console
from tasktrack_cli.utils.ui.formatters import format_error, format_reply

from .decorators import command_wrapper

console = get_console()

GREETING = "Hello! I'm your task tracker.\nWhat can I do for you?"


def _prompt_lines() -> Iterator[str]:
    session: PromptSession[str] = PromptSession(
        history=InMemoryHistory(),
        completer=WordCompleter(list(ACTIONS), ignore_case=True, sentence=True),
    )
    while True:
        try:
            yield session.prompt("> ")
        except KeyboardInterrupt:
            continue
        except EOFError:
            return


def _piped_lines() -> Iterator[str]:
    for line in sys.stdin:
        yield line.rstrip("\n")


@command_wrapper
def chat() -> None:
    """Start an interactive chat session. Type 'bye' to leave."""
    logger = get_logger("chat")
    task_list = get_task_list()
    lines = _prompt_lines() if sys.stdin.isatty() else _piped_lines()

    console.print(f"[bold cyan]{GREETING}[/bold cyan]")
    for line in lines:
        if not line.strip():
            continue
        try:
            reply = execute(parse_command(line), task_list)
        except TaskListError as e:
            logger.warning("chat command rejected [%s]: %s", e.kind.value, e.message)
            format_error(e.message)
            continue

        format_reply(reply)
        if task_list.is_closed():
            break
