"""Task list logic: holds the ordered tasks, parses commands and saved lines,
and renders every response the user sees.

Positions are the only addressing scheme: 1-based for the user, dense and
contiguous, so deleting a task renumbers everything after it. Public methods
return a Result; parsing helpers raise TaskError, caught at the method edge.
"""
from __future__ import annotations
import logging
import re
from dataclasses import replace
from datetime import date as Date, datetime
from typing import Dict, Iterable, Iterator, List, Optional, Tuple

from taskline.errors import (
    CorruptedEntry, EmptyDate, EmptyDescription, IndexOutOfRange, InvalidDateFormat,
    InvalidIndex, Result, TaskError, UnknownCommand,
)
from taskline.models import DATA_SEP, Task, TaskKind

logger = logging.getLogger(__name__)

KEYWORDS: Dict[str, TaskKind] = {kind.keyword: kind for kind in TaskKind}
CLAUSE_SEP = " /"
DATE_RE = re.compile(r"\d{4}-\d{2}-\d{2}")
DATE_FORMAT = "%Y-%m-%d"
INDEX_RE = re.compile(r"-?\d+")


def parse_date(text: str) -> Date:
    """Parse a strict ``YYYY-MM-DD`` date or raise InvalidDateFormat."""
    text = text.strip()
    if not DATE_RE.fullmatch(text):
        raise InvalidDateFormat(text)
    try:
        return datetime.strptime(text, DATE_FORMAT).date()
    except ValueError:
        raise InvalidDateFormat(text) from None


def _numbered(header: str, tasks: Iterable[Task]) -> str:
    lines = [header]
    lines.extend(f"{i}. {task}" for i, task in enumerate(tasks, start=1))
    return "\n".join(lines)


class TaskList:
    def __init__(self, lines: Optional[Iterable[str]] = None):
        self._tasks: List[Task] = []
        self.skipped_lines: List[int] = []
        if lines:
            self._load_from_lines(lines)

    @classmethod
    def from_lines(cls, lines: Iterable[str]) -> "TaskList":
        return cls(lines)

    # -------------------- loading --------------------
    def _load_from_lines(self, lines: Iterable[str]) -> None:
        # a bad line is skipped; the rest of the file still loads
        for lineno, line in enumerate(lines, start=1):
            if not line.strip():
                continue
            result = self.add_task_from_data(line)
            if not result.ok:
                logger.warning("Skipping saved line %d (%s): %r", lineno, result.error.kind.value, line)
                self.skipped_lines.append(lineno)

    def add_task_from_data(self, line: str) -> Result:
        try:
            task = self._task_from_data(line)
        except TaskError as err:
            return Result.failure(err)
        self._tasks.append(task)
        return Result.success(str(task))

    @staticmethod
    def _task_from_data(line: str) -> Task:
        fields = line.rstrip("\r\n").split(DATA_SEP)
        if len(fields) < 3 or fields[1] not in ("0", "1"):
            raise CorruptedEntry(line)
        try:
            kind = TaskKind(fields[0])
        except ValueError:
            raise CorruptedEntry(line) from None
        if kind is TaskKind.TODO:
            task = Task.todo(DATA_SEP.join(fields[2:]))
        else:
            if len(fields) < 4:
                raise CorruptedEntry(line)
            task = Task(kind, DATA_SEP.join(fields[2:-1]), parse_date(fields[-1]))
        if not task.description:
            raise CorruptedEntry(line)
        if fields[1] == "1":
            task.mark_done()
        return task

    # -------------------- queries --------------------
    @property
    def tasks(self) -> Tuple[Task, ...]:
        """Snapshot copies; the list keeps sole ownership of its tasks."""
        return tuple(replace(t) for t in self._tasks)

    def __len__(self) -> int:
        return len(self._tasks)

    def __iter__(self) -> Iterator[Task]:
        return iter(self.tasks)

    def list_all(self) -> Result:
        return Result.success(_numbered("Here are the tasks in your list:", self._tasks))

    def list_on_date(self, date_text: str) -> Result:
        try:
            day = parse_date(date_text)
        except TaskError as err:
            return Result.failure(err)
        return Result.success(
            self._on_date(TaskKind.DEADLINE, day, "deadlines", "due on")
            + "\n"
            + self._on_date(TaskKind.EVENT, day, "events", "due on")
        )

    def _on_date(self, kind: TaskKind, day: Date, noun: str, phrase: str) -> str:
        matches = [t for t in self._tasks if t.kind is kind and t.date == day]
        if not matches:
            return f"You have no {noun} {phrase} {day.isoformat()}."
        return _numbered(f"Here are the {noun} {phrase} {day.isoformat()}:", matches)

    def find(self, keyword: str) -> Result:
        needle = keyword.strip().lower()
        matches = [t for t in self._tasks if needle and needle in t.description.lower()]
        if not matches:
            return Result.success("You have no matching tasks in your list.")
        return Result.success(_numbered("Here are the matching tasks in your list:", matches))

    # -------------------- task operations --------------------
    def add_task(self, raw_input: str) -> Result:
        try:
            task = self._parse_task(raw_input)
        except TaskError as err:
            return Result.failure(err)
        self._tasks.append(task)
        logger.debug("Added task #%d: %s", len(self._tasks), task)
        return Result.success(
            "Got it. I've added this task:\n"
            f"  {task}\n"
            f"Now you have {len(self._tasks)} tasks in the list."
        )

    @staticmethod
    def _parse_task(raw_input: str) -> Task:
        keyword = raw_input.split(" ", 1)[0]
        kind = KEYWORDS.get(keyword)
        if kind is None:
            raise UnknownCommand()
        if kind is TaskKind.TODO:
            description = raw_input[len(keyword):].strip()
            if not description:
                raise EmptyDescription(kind.keyword)
            return Task.todo(description)

        head, sep, clause = raw_input.partition(CLAUSE_SEP)
        description = head[len(keyword):].strip()
        if not description:
            raise EmptyDescription(kind.keyword)
        if not sep:
            raise EmptyDate(kind.keyword)
        label = kind.date_label or ""
        if clause.startswith(label):
            clause = clause[len(label):]
        if not clause.strip():
            raise EmptyDate(kind.keyword)
        return Task(kind, description, parse_date(clause))

    def _resolve_index(self, index_text: Optional[str]) -> int:
        """Turn user text into a 0-based position, validating range."""
        # only the first token counts: "done 2 extra" is "done 2"
        tokens = (index_text or "").split()
        raw = tokens[0] if tokens else ""
        if not INDEX_RE.fullmatch(raw):
            raise InvalidIndex()
        number = int(raw)
        if number < 1 or number > len(self._tasks):
            raise IndexOutOfRange(len(self._tasks))
        return number - 1

    def mark_done(self, index_text: Optional[str]) -> Result:
        try:
            idx = self._resolve_index(index_text)
        except TaskError as err:
            return Result.failure(err)
        task = self._tasks[idx]
        task.mark_done()
        logger.debug("Marked task #%d done", idx + 1)
        return Result.success(f"Nice! I've marked this task as done:\n  {task}")

    def delete(self, index_text: Optional[str]) -> Result:
        try:
            idx = self._resolve_index(index_text)
        except TaskError as err:
            return Result.failure(err)
        task = self._tasks.pop(idx)
        logger.debug("Deleted task #%d: %s", idx + 1, task)
        return Result.success(
            "Noted. I've removed this task:\n"
            f"  {task}\n"
            f"Now you have {len(self._tasks)} tasks in the list."
        )

    # -------------------- serialization --------------------
    def to_data_lines(self) -> List[str]:
        return [task.to_data() for task in self._tasks]
