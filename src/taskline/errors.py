"""Error taxonomy and the Result value returned by task list operations.

TaskError subclasses are raised by parsing helpers inside the task list and
caught at its public methods, which hand back ``Result.failure(err)`` instead.
Every error is recoverable; its ``message`` is what the user sees.
"""
from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from typing import Optional


class ErrorKind(Enum):
    UNKNOWN_COMMAND = "unknown-command"
    EMPTY_DESCRIPTION = "empty-description"
    EMPTY_DATE = "empty-date"
    INVALID_DATE_FORMAT = "invalid-date-format"
    INVALID_INDEX = "invalid-index"
    INDEX_OUT_OF_RANGE = "index-out-of-range"
    CORRUPTED_ENTRY = "corrupted-entry"


class TaskError(Exception):
    kind: ErrorKind

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class UnknownCommand(TaskError):
    kind = ErrorKind.UNKNOWN_COMMAND

    def __init__(self) -> None:
        super().__init__("OOPS!!! I'm sorry, but I don't know what that means :-(")


class EmptyDescription(TaskError):
    kind = ErrorKind.EMPTY_DESCRIPTION

    def __init__(self, task_kind: str) -> None:
        super().__init__(f"OOPS!!! The description of a {task_kind} cannot be empty.")
        self.task_kind = task_kind


class EmptyDate(TaskError):
    kind = ErrorKind.EMPTY_DATE

    def __init__(self, task_kind: str) -> None:
        super().__init__(f"OOPS!!! The date of a {task_kind} cannot be empty.")
        self.task_kind = task_kind


class InvalidDateFormat(TaskError):
    kind = ErrorKind.INVALID_DATE_FORMAT

    def __init__(self, text: str = "") -> None:
        super().__init__("OOPS!!! Dates must be given as YYYY-MM-DD.")
        self.text = text


class InvalidIndex(TaskError):
    kind = ErrorKind.INVALID_INDEX

    def __init__(self) -> None:
        super().__init__("OOPS!!! Please give the number of a task in the list.")


class IndexOutOfRange(TaskError):
    kind = ErrorKind.INDEX_OUT_OF_RANGE

    def __init__(self, size: int) -> None:
        super().__init__(f"OOPS!!! The list currently only has {size} elements.")
        self.size = size


class CorruptedEntry(TaskError):
    kind = ErrorKind.CORRUPTED_ENTRY

    def __init__(self, line: str) -> None:
        super().__init__("OOPS!!! A saved task could not be read.")
        self.line = line


class StorageError(Exception):
    """Save file could not be read or written. Reported, never fatal."""


@dataclass(frozen=True)
class Result:
    """Outcome of a task list operation: response text, or an error."""
    text: str
    error: Optional[TaskError] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @classmethod
    def success(cls, text: str) -> "Result":
        return cls(text)

    @classmethod
    def failure(cls, error: TaskError) -> "Result":
        return cls(error.message, error)
