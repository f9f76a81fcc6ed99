"""Command dispatch: classify a raw line by its first token and route it to
exactly one TaskList call.

No validation happens here; the remainder of the line is handed over as-is
and any error comes back inside the Result as plain text.
"""
from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from typing import Dict, Optional

from taskline.errors import Result, TaskError
from taskline.task_list import TaskList

GOODBYE = "Bye. Hope to see you again soon!"

HELP_TEXT = "\n".join([
    "Commands:",
    "  todo <description>                 Add a to-do",
    "  deadline <description> /by <date>  Add a deadline (date as YYYY-MM-DD)",
    "  event <description> /at <date>     Add an event (date as YYYY-MM-DD)",
    "  list                               Show every task",
    "  list <date>                        Show deadlines and events on a date",
    "  find <keyword>                     Search task descriptions",
    "  done <number>                      Mark a task as done",
    "  delete <number>                    Remove a task",
    "  help                               Show this help",
    "  bye                                Save and exit",
])


class Intent(Enum):
    EXIT = "exit"
    PRINT = "print"
    FIND = "find"
    MARK_DONE = "mark-done"
    DELETE = "delete"
    HELP = "help"
    ADD = "add"


INTENTS: Dict[str, Intent] = {
    'bye': Intent.EXIT,
    'list': Intent.PRINT,
    'find': Intent.FIND,
    'done': Intent.MARK_DONE,
    'delete': Intent.DELETE,
    'help': Intent.HELP,
}

MUTATING = frozenset({Intent.ADD, Intent.MARK_DONE, Intent.DELETE})


@dataclass(frozen=True)
class Response:
    text: str
    intent: Intent
    error: Optional[TaskError] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @property
    def is_exit(self) -> bool:
        return self.intent is Intent.EXIT

    @property
    def mutated(self) -> bool:
        """True when the list changed and must be saved."""
        return self.ok and self.intent in MUTATING


def classify(line: str) -> Intent:
    """Case-sensitive match on the first whitespace-delimited token."""
    tokens = line.split()
    if not tokens:
        return Intent.ADD
    return INTENTS.get(tokens[0], Intent.ADD)


def _argument(line: str) -> str:
    parts = line.split(None, 1)
    return parts[1].strip() if len(parts) > 1 else ''


def execute(task_list: TaskList, line: str) -> Response:
    intent = classify(line)
    if intent is Intent.EXIT:
        return Response(GOODBYE, intent)
    if intent is Intent.HELP:
        return Response(HELP_TEXT, intent)
    if intent is Intent.PRINT:
        tokens = line.split()
        result = task_list.list_all() if len(tokens) == 1 else task_list.list_on_date(tokens[1])
    elif intent is Intent.FIND:
        result = task_list.find(_argument(line))
    elif intent is Intent.MARK_DONE:
        result = task_list.mark_done(_argument(line))
    elif intent is Intent.DELETE:
        result = task_list.delete(_argument(line))
    else:
        result = task_list.add_task(line)
    return _respond(result, intent)


def _respond(result: Result, intent: Intent) -> Response:
    return Response(result.text, intent, result.error)
