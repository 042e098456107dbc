"""Task list service - the in-memory task sequence and its write-through storage.

The list is the single source of truth while the program runs. Every mutation
builds the next snapshot, hands it to storage, and only adopts it once the write
succeeded, so memory and the task file never disagree.
"""

from __future__ import annotations

import re
from collections.abc import Iterator
from dataclasses import dataclass, field

from tasktrack_cli.models import Task, task_from_record
from tasktrack_cli.repositories import TaskStorage
from tasktrack_cli.utils.exceptions import (
    CorruptedDataError,
    InvalidNumberError,
    NotANumberError,
)
from tasktrack_cli.utils.logger import get_logger

_ORDINAL_PATTERN = re.compile(r"[+-]?\d+")


class TaskList:
    """Ordered collection of tasks, kept sorted on insert and mirrored to storage."""

    def __init__(self, storage: TaskStorage):
        """Initialize an empty, open task list.

        Args:
            storage: TaskStorage that receives a full snapshot after each mutation
        """
        self.storage = storage
        self._tasks: list[Task] = []
        self._closed = False

    # -- lifecycle ---------------------------------------------------------

    def close(self) -> None:
        """Signal that the owning session should end."""
        self._closed = True

    def is_closed(self) -> bool:
        return self._closed

    # -- reads -------------------------------------------------------------

    @property
    def tasks(self) -> tuple[Task, ...]:
        return tuple(self._tasks)

    def __len__(self) -> int:
        return len(self._tasks)

    def __iter__(self) -> Iterator[Task]:
        return iter(tuple(self._tasks))

    def __str__(self) -> str:
        return "\n".join(
            f"{number}.{task}" for number, task in enumerate(self._tasks, start=1)
        )

    def get_remaining_tasks(self) -> str:
        return f"Now you have {len(self._tasks)} tasks in the list."

    def find_matches(self, query: str) -> list[tuple[int, Task]]:
        """Return ``(ordinal, task)`` for every description containing ``query``."""
        return [
            (number, task)
            for number, task in enumerate(self._tasks, start=1)
            if query in task.description
        ]

    def find_task(self, query: str) -> str:
        """Return matching tasks, one per line, in list order.

        Matching is a case-sensitive substring test on the description. An
        empty string means nothing matched.
        """
        return "\n".join(str(task) for _, task in self.find_matches(query))

    # -- mutations ---------------------------------------------------------

    def add_task(self, task: Task) -> str:
        """Insert a task, re-sort the list and persist it.

        Returns:
            Confirmation message naming the task and the new count
        """
        snapshot = sorted([*self._tasks, task])
        self._commit(snapshot)
        get_logger("tasks").info("added task: %s", task.serialize())
        return f"Got it. I've added this task:\n\t{task}\n{self.get_remaining_tasks()}"

    def mark_task(self, index_text: str, is_completed: bool) -> Task:
        """Set the completion flag of the task at a 1-based ordinal.

        The list is not re-sorted, so ordinals stay valid until the next add.

        Raises:
            NotANumberError: If ``index_text`` is not an integer
            InvalidNumberError: If the ordinal is outside 1..N
        """
        index = self._resolve_index(index_text)
        marked = self._tasks[index].model_copy()
        marked.mark(is_completed)

        snapshot = list(self._tasks)
        snapshot[index] = marked
        self._commit(snapshot)
        get_logger("tasks").info(
            "marked task %d as %s", index + 1, "done" if is_completed else "not done"
        )
        return marked

    def delete_task(self, index_text: str) -> str:
        """Remove the task at a 1-based ordinal and persist the list.

        Raises:
            NotANumberError: If ``index_text`` is not an integer
            InvalidNumberError: If the ordinal is outside 1..N
        """
        index = self._resolve_index(index_text)
        snapshot = list(self._tasks)
        removed = snapshot.pop(index)
        self._commit(snapshot)
        get_logger("tasks").info("deleted task %d: %s", index + 1, removed.serialize())
        return (
            f"Noted. I've removed this task:\n\t{removed}\n{self.get_remaining_tasks()}"
        )

    def add_task_from_db(self, record: str) -> None:
        """Append a task rebuilt from a stored record.

        Used only while loading: the list is neither sorted nor written back.

        Raises:
            CorruptedDataError: If the record tag is unknown
            MalformedRecordError: If the record is missing fields
        """
        self._tasks.append(task_from_record(record))

    # -- helpers -----------------------------------------------------------

    def _commit(self, snapshot: list[Task]) -> None:
        self.storage.write(snapshot)
        self._tasks = snapshot

    def _resolve_index(self, index_text: str) -> int:
        text = index_text.strip()
        if not _ORDINAL_PATTERN.fullmatch(text):
            raise NotANumberError()

        try:
            number = int(text)
        except ValueError:
            # Past the interpreter's digit limit; far beyond any list size.
            raise InvalidNumberError(len(self._tasks)) from None
        if not 1 <= number <= len(self._tasks):
            raise InvalidNumberError(len(self._tasks))
        return number - 1


@dataclass
class LoadReport:
    """Outcome of loading the task file."""

    loaded: int = 0
    skipped: list[int] = field(default_factory=list)


def load_task_list(
    storage: TaskStorage, *, strict: bool = False
) -> tuple[TaskList, LoadReport]:
    """Build a TaskList from whatever ``storage`` holds.

    Records are added in stored order. In strict mode the first bad record
    aborts the load; otherwise it is logged and skipped, and its 1-based
    position is listed in the report.
    """
    logger = get_logger("tasks")
    task_list = TaskList(storage)
    report = LoadReport()

    for number, record in enumerate(storage.load(), start=1):
        try:
            task_list.add_task_from_db(record)
        except CorruptedDataError as e:
            if strict:
                logger.error("record %d is corrupted: %s", number, e.message)
                raise
            logger.warning("skipping corrupted record %d: %s", number, e.message)
            report.skipped.append(number)
        else:
            report.loaded += 1

    logger.info("loaded %d tasks (%d skipped)", report.loaded, len(report.skipped))
    return task_list, report
