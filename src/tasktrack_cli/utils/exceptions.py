"""Exceptions raised by the task list and its collaborators.

Every failure carries an :class:`ErrorKind` so callers can decide how to present
it without inspecting message text.
"""

from __future__ import annotations

from enum import Enum

from tasktrack_cli.utils import exit_codes


class ErrorKind(str, Enum):
    """Category of a task list failure."""

    SYNTAX = "syntax"
    RANGE = "range"
    CORRUPTION = "corruption"
    CONFIG = "config"


_EXIT_CODES = {
    ErrorKind.SYNTAX: exit_codes.ERROR_INVALID_ARGS,
    ErrorKind.RANGE: exit_codes.ERROR_NOT_FOUND,
    ErrorKind.CORRUPTION: exit_codes.ERROR_DATA_CORRUPTED,
    ErrorKind.CONFIG: exit_codes.ERROR_GENERAL,
}


class TaskListError(Exception):
    """Base exception for all TaskTrack errors."""

    kind: ErrorKind = ErrorKind.SYNTAX

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    @property
    def exit_code(self) -> int:
        return _EXIT_CODES[self.kind]


class NotANumberError(TaskListError):
    """Raised when an ordinal is not a number."""

    def __init__(self, message: str = "Please input a number."):
        super().__init__(message)


class InvalidNumberError(TaskListError):
    """Raised when an ordinal is outside 1..N."""

    kind = ErrorKind.RANGE

    def __init__(self, count: int):
        super().__init__(
            f"Please input a valid number! There are {count} tasks remaining."
        )
        self.count = count


class CorruptedDataError(TaskListError):
    """Raised when a persisted record carries an unknown type tag."""

    kind = ErrorKind.CORRUPTION

    def __init__(self, message: str = "Corrupted file"):
        super().__init__(message)


class MalformedRecordError(CorruptedDataError):
    """Raised when a persisted record has too few fields for its tag."""

    def __init__(self, record: str, expected: int, actual: int):
        super().__init__(
            f"Malformed record {record!r}: expected {expected} fields, got {actual}"
        )
        self.record = record
        self.expected = expected
        self.actual = actual


class InvalidCommandError(TaskListError):
    """Raised when a chat line cannot be understood."""


class ConfigError(TaskListError):
    """Raised when the configuration file cannot be read or updated."""

    kind = ErrorKind.CONFIG
