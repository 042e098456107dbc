"""Task data models.

A task is one of three variants sharing the same contract: a to-do, a deadline
with a due-by string, or an event with an at string. Each variant knows its
one-letter tag, its display form and its pipe-delimited record form.
"""

from __future__ import annotations

from typing import Any, ClassVar

from pydantic import BaseModel, Field, ValidationError, field_validator

from tasktrack_cli.utils.exceptions import (
    CorruptedDataError,
    InvalidCommandError,
    MalformedRecordError,
)

RECORD_SEPARATOR = "|"
LINE_BREAKS = ("\n", "\r")


def _validate_when(v: str) -> str:
    # The time is the last record field, so it must not hold the separator.
    if any(ch in v for ch in (*LINE_BREAKS, RECORD_SEPARATOR)):
        raise ValueError("The time cannot contain line breaks or '|'.")
    return v


class Task(BaseModel):
    """Base task model.

    Attributes:
        description: What needs doing. Cannot be changed once created.
        is_completed: Whether the task has been marked done.
    """

    TAG: ClassVar[str] = ""
    FIELD_COUNT: ClassVar[int] = 3

    description: str = Field(frozen=True)
    is_completed: bool = False

    @field_validator("description")
    @classmethod
    def validate_description(cls, v: str) -> str:
        if any(ch in v for ch in LINE_BREAKS):
            raise ValueError("A task cannot span more than one line.")
        return v

    def model_post_init(self, __context: Any) -> None:
        if not self.TAG:
            raise TypeError("Task is abstract; create a ToDo, Deadline or Event.")

    @property
    def when(self) -> str | None:
        """Temporal field of the variant, or None for tasks without one."""
        return None

    @property
    def status_icon(self) -> str:
        return "X" if self.is_completed else " "

    def mark(self, is_completed: bool) -> None:
        """Set the completion flag."""
        self.is_completed = is_completed

    def sort_key(self) -> tuple[bool, str, str, str]:
        """Key for the list order: open tasks first, then by description."""
        return (self.is_completed, self.description, self.TAG, self.when or "")

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Task):
            return NotImplemented
        return self.sort_key() < other.sort_key()

    def __str__(self) -> str:
        return f"[{self.TAG}][{self.status_icon}] {self.description}{self._suffix()}"

    def serialize(self) -> str:
        """Return the pipe-delimited record stored in the task file."""
        return RECORD_SEPARATOR.join(self._fields())

    def _suffix(self) -> str:
        return ""

    def _fields(self) -> list[str]:
        return [self.TAG, "true" if self.is_completed else "false", self.description]

    @classmethod
    def _from_remainder(cls, is_completed: bool, remainder: str, record: str) -> Task:
        return cls(description=remainder, is_completed=is_completed)


class ToDo(Task):
    """A plain to-do with no date attached."""

    TAG: ClassVar[str] = "T"


class Deadline(Task):
    """A task that has to be done by a given time."""

    TAG: ClassVar[str] = "D"
    FIELD_COUNT: ClassVar[int] = 4

    by: str

    @field_validator("by")
    @classmethod
    def validate_by(cls, v: str) -> str:
        return _validate_when(v)

    @property
    def when(self) -> str:
        return self.by

    def _suffix(self) -> str:
        return f" (by: {self.by})"

    def _fields(self) -> list[str]:
        return [*super()._fields(), self.by]

    @classmethod
    def _from_remainder(cls, is_completed: bool, remainder: str, record: str) -> Task:
        description, by = _split_timed(remainder, record)
        return cls(description=description, by=by, is_completed=is_completed)


class Event(Task):
    """A task that happens at a given time."""

    TAG: ClassVar[str] = "E"
    FIELD_COUNT: ClassVar[int] = 4

    at: str

    @field_validator("at")
    @classmethod
    def validate_at(cls, v: str) -> str:
        return _validate_when(v)

    @property
    def when(self) -> str:
        return self.at

    def _suffix(self) -> str:
        return f" (at: {self.at})"

    def _fields(self) -> list[str]:
        return [*super()._fields(), self.at]

    @classmethod
    def _from_remainder(cls, is_completed: bool, remainder: str, record: str) -> Task:
        description, at = _split_timed(remainder, record)
        return cls(description=description, at=at, is_completed=is_completed)


TASK_TYPES: dict[str, type[Task]] = {
    task_cls.TAG: task_cls for task_cls in (ToDo, Deadline, Event)
}


def _split_timed(remainder: str, record: str) -> tuple[str, str]:
    # The time is the last field so descriptions may themselves contain "|".
    description, sep, when = remainder.rpartition(RECORD_SEPARATOR)
    if not sep:
        raise MalformedRecordError(record, 4, 3)
    return description, when


def task_from_record(record: str) -> Task:
    """Rebuild a task from its stored record.

    Raises:
        CorruptedDataError: If the leading tag is not T, D or E, or a field
            fails validation.
        MalformedRecordError: If the record has too few fields for its tag.
    """
    record = record.rstrip("\r\n")
    fields = record.split(RECORD_SEPARATOR, 2)
    task_cls = TASK_TYPES.get(fields[0])
    if task_cls is None:
        raise CorruptedDataError()
    if len(fields) < 3:
        raise MalformedRecordError(record, task_cls.FIELD_COUNT, len(fields))

    # Only "true" in any case counts as completed; anything else is open.
    is_completed = fields[1].lower() == "true"
    try:
        return task_cls._from_remainder(is_completed, fields[2], record)
    except ValidationError as e:
        raise CorruptedDataError(f"Corrupted record: {record!r}") from e


def build_task(task_cls: type[Task], **fields: Any) -> Task:
    """Create a task from user input.

    Raises:
        InvalidCommandError: If a field holds text that cannot be stored.
    """
    try:
        return task_cls(**fields)
    except ValidationError as e:
        error = e.errors()[0]
        message = str(error.get("ctx", {}).get("error") or error["msg"])
        raise InvalidCommandError(message) from e
