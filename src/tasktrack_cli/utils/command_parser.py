"""Chat-style command parsing.

Turns one line typed into the chat session into a :class:`Command` and runs it
against a task list. Grammar::

    todo <description>
    deadline <description> /by <when>
    event <description> /at <when>
    list
    mark <n> | unmark <n> | delete <n>
    find <text>
    bye
"""

from __future__ import annotations

import re
from dataclasses import dataclass

from tasktrack_cli.models import Deadline, Event, ToDo, build_task
from tasktrack_cli.services.task_list import TaskList
from tasktrack_cli.utils.exceptions import InvalidCommandError

_TIMED_PATTERNS = {
    "deadline": re.compile(r"^(?P<description>.*?)\s*/by(?:\s+(?P<when>.*))?$"),
    "event": re.compile(r"^(?P<description>.*?)\s*/at(?:\s+(?P<when>.*))?$"),
}
_TIMED_KEYWORDS = {"deadline": "/by", "event": "/at"}

ACTIONS = ("todo", "deadline", "event", "list", "mark", "unmark", "delete", "find", "bye")

FAREWELL = "Bye. Hope to see you again soon!"


@dataclass(frozen=True)
class Command:
    """A parsed chat line."""

    action: str
    argument: str = ""
    extra: str = ""


def parse_command(line: str) -> Command:
    """Parse a chat line.

    Raises:
        InvalidCommandError: If the verb is unknown or a required part is missing
    """
    verb, _, rest = line.strip().partition(" ")
    action = verb.lower()
    rest = rest.strip()

    if action not in ACTIONS:
        raise InvalidCommandError(
            f"I'm sorry, but I don't know what '{verb}' means."
            if verb
            else "Please type a command."
        )

    if action in ("list", "bye"):
        return Command(action)

    if action == "todo":
        if not rest:
            raise InvalidCommandError("The description of a todo cannot be empty.")
        return Command(action, rest)

    if action in _TIMED_PATTERNS:
        return _parse_timed(action, rest)

    if action == "find":
        if not rest:
            raise InvalidCommandError("Please tell me what to search for.")
        return Command(action, rest)

    # mark / unmark / delete
    if not rest:
        raise InvalidCommandError(f"Please tell me which task to {action}.")
    return Command(action, rest)


def _parse_timed(action: str, rest: str) -> Command:
    keyword = _TIMED_KEYWORDS[action]
    match = _TIMED_PATTERNS[action].match(rest)
    if match is None:
        raise InvalidCommandError(
            f"Please use the format: {action} <description> {keyword} <when>"
        )

    description = match.group("description").strip()
    when = (match.group("when") or "").strip()
    if not description:
        raise InvalidCommandError(f"The description of a {action} cannot be empty.")
    if not when:
        raise InvalidCommandError(f"Please say when after {keyword}.")
    return Command(action, description, when)


def execute(command: Command, task_list: TaskList) -> str:
    """Run a parsed command and return the reply to show the user."""
    action = command.action

    if action == "todo":
        return task_list.add_task(build_task(ToDo, description=command.argument))
    if action == "deadline":
        return task_list.add_task(
            build_task(Deadline, description=command.argument, by=command.extra)
        )
    if action == "event":
        return task_list.add_task(
            build_task(Event, description=command.argument, at=command.extra)
        )
    if action == "list":
        if not len(task_list):
            return "You have no tasks in your list."
        return f"Here are the tasks in your list:\n{task_list}"
    if action == "mark":
        task = task_list.mark_task(command.argument, True)
        return f"Nice! I've marked this task as done:\n\t{task}"
    if action == "unmark":
        task = task_list.mark_task(command.argument, False)
        return f"OK, I've marked this task as not done yet:\n\t{task}"
    if action == "delete":
        return task_list.delete_task(command.argument)
    if action == "find":
        found = task_list.find_task(command.argument)
        if not found:
            return "No matching tasks found."
        return f"Here are the matching tasks in your list:\n{found}"
    if action == "bye":
        task_list.close()
        return FAREWELL

    raise InvalidCommandError(f"Unsupported command: {action}")
