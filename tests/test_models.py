# tests/test_models.py

from __future__ import annotations

from datetime import date

from taskline.models import Task, TaskKind, format_date


def test_todo_rendering_and_done_marker() -> None:
    task = Task.todo("read book")
    assert str(task) == "[T][ ] read book"
    task.mark_done()
    assert task.done is True
    assert str(task) == "[T][X] read book"


def test_deadline_and_event_render_dates() -> None:
    assert str(Task.deadline("submit", date(2021, 1, 5))) == "[D][ ] submit (by: Jan 5 2021)"
    assert str(Task.event("party", date(2021, 12, 25))) == "[E][ ] party (at: Dec 25 2021)"


def test_format_date_has_no_zero_padding() -> None:
    assert format_date(date(2021, 2, 1)) == "Feb 1 2021"


def test_to_data_lines() -> None:
    todo = Task.todo("read book")
    deadline = Task.deadline("submit", date(2021, 2, 1))
    deadline.mark_done()
    assert todo.to_data() == "T | 0 | read book"
    assert deadline.to_data() == "D | 1 | submit | 2021-02-01"
    assert Task.event("party", date(2021, 1, 5)).to_data() == "E | 0 | party | 2021-01-05"


def test_kind_keywords() -> None:
    assert [k.keyword for k in TaskKind] == ["todo", "deadline", "event"]
    assert TaskKind.TODO.date_label is None
    assert TaskKind.DEADLINE.date_label == "by"
    assert TaskKind.EVENT.date_label == "at"
