"""Data models for the taskline tracker.

A single Task dataclass covers all three kinds; the kind tag decides the
rendering and whether a date is carried. Tasks are plain value holders:
descriptions are checked for emptiness by the task list at parse time.
"""
from __future__ import annotations
from dataclasses import dataclass
from datetime import date as Date
from enum import Enum
from typing import Optional

DATE_DISPLAY = "{d:%b} {d.day} {d.year}"  # e.g. "Jan 5 2021"
DATA_SEP = " | "


class TaskKind(Enum):
    TODO = "T"
    DEADLINE = "D"
    EVENT = "E"

    @property
    def keyword(self) -> str:
        """Command word that creates this kind (also used in error messages)."""
        return self.name.lower()

    @property
    def date_label(self) -> Optional[str]:
        return DATE_LABELS.get(self)


DATE_LABELS = {TaskKind.DEADLINE: "by", TaskKind.EVENT: "at"}


def format_date(d: Date) -> str:
    return DATE_DISPLAY.format(d=d)


@dataclass
class Task:
    """A single tracked task.

    Fields:
        kind: TODO, DEADLINE or EVENT.
        description: Text supplied by the user (never empty once stored).
        date: Due date (deadline) or occurrence date (event); None for todos.
        done: Completion flag; only ever goes from False to True.
    """
    kind: TaskKind
    description: str
    date: Optional[Date] = None
    done: bool = False

    @classmethod
    def todo(cls, description: str) -> "Task":
        return cls(TaskKind.TODO, description)

    @classmethod
    def deadline(cls, description: str, due: Date) -> "Task":
        return cls(TaskKind.DEADLINE, description, due)

    @classmethod
    def event(cls, description: str, at: Date) -> "Task":
        return cls(TaskKind.EVENT, description, at)

    def mark_done(self) -> None:
        self.done = True

    @property
    def marker(self) -> str:
        return "X" if self.done else " "

    def to_data(self) -> str:
        """Persisted line: ``<T|D|E> | <0|1> | <description>[ | <YYYY-MM-DD>]``."""
        fields = [self.kind.value, "1" if self.done else "0", self.description]
        if self.date is not None:
            fields.append(self.date.isoformat())
        return DATA_SEP.join(fields)

    def __str__(self) -> str:
        text = f"[{self.kind.value}][{self.marker}] {self.description}"
        if self.date is not None and self.kind.date_label:
            text += f" ({self.kind.date_label}: {format_date(self.date)})"
        return text
