# tests/test_task_list.py

from __future__ import annotations

from datetime import date

import pytest

from taskline.errors import (
    CorruptedEntry, EmptyDate, EmptyDescription, ErrorKind, IndexOutOfRange,
    InvalidDateFormat, InvalidIndex, UnknownCommand,
)
from taskline.models import TaskKind
from taskline.task_list import TaskList, parse_date


# -------------------- add --------------------

@pytest.mark.parametrize("desc", ["read book", "x", "buy milk / eggs"])
def test_add_todo_appends_one_undone_task(task_list: TaskList, desc: str) -> None:
    result = task_list.add_task(f"todo {desc}")
    assert result.ok
    assert len(task_list) == 1
    assert f"[T][ ] {desc}" in result.text
    assert "Now you have 1 tasks in the list." in result.text


def test_add_deadline_renders_due_date(task_list: TaskList) -> None:
    result = task_list.add_task("deadline submit report /by 2021-01-05")
    assert result.ok
    task = task_list.tasks[0]
    assert task.kind is TaskKind.DEADLINE
    assert task.date == date(2021, 1, 5)
    assert str(task).endswith("(by: Jan 5 2021)")


def test_add_event_renders_at_date(task_list: TaskList) -> None:
    assert task_list.add_task("event party /at 2021-03-14").ok
    assert str(task_list.tasks[0]) == "[E][ ] party (at: Mar 14 2021)"


@pytest.mark.parametrize(
    ("line", "error_type"),
    [
        ("", UnknownCommand),
        ("blah", UnknownCommand),
        ("Todo read", UnknownCommand),
        ("todo", EmptyDescription),
        ("todo    ", EmptyDescription),
        ("deadline", EmptyDescription),
        ("deadline /by 2021-01-05", EmptyDescription),
        ("event /at 2021-01-05", EmptyDescription),
        ("deadline submit", EmptyDate),
        ("deadline submit /by", EmptyDate),
        ("event party /at   ", EmptyDate),
        ("deadline submit /by tomorrow", InvalidDateFormat),
        ("deadline submit /by 2021-1-5", InvalidDateFormat),
        ("event party /at 2021-02-30", InvalidDateFormat),
    ],
)
def test_add_task_errors_leave_list_unchanged(task_list: TaskList, line: str, error_type) -> None:
    result = task_list.add_task(line)
    assert not result.ok
    assert isinstance(result.error, error_type)
    assert result.text == result.error.message
    assert len(task_list) == 0


def test_error_messages_name_the_task_kind(task_list: TaskList) -> None:
    assert task_list.add_task("event").text == "OOPS!!! The description of a event cannot be empty."
    assert task_list.add_task("deadline x").text == "OOPS!!! The date of a deadline cannot be empty."
    assert task_list.add_task("nope").error.kind is ErrorKind.UNKNOWN_COMMAND


# -------------------- listing --------------------

def test_list_all_scenario(populated: TaskList) -> None:
    assert populated.list_all().text == (
        "Here are the tasks in your list:\n"
        "1. [T][ ] read book\n"
        "2. [D][ ] submit (by: Feb 1 2021)"
    )


def test_list_all_empty_has_only_header(task_list: TaskList) -> None:
    assert task_list.list_all().text == "Here are the tasks in your list:"


def test_list_on_date_groups_deadlines_then_events(task_list: TaskList) -> None:
    for line in (
        "event meetup /at 2021-02-01",
        "deadline submit /by 2021-02-01",
        "deadline other /by 2021-02-02",
        "todo read book",
    ):
        assert task_list.add_task(line).ok
    result = task_list.list_on_date("2021-02-01")
    assert result.ok
    assert result.text == (
        "Here are the deadlines due on 2021-02-01:\n"
        "1. [D][ ] submit (by: Feb 1 2021)\n"
        "Here are the events due on 2021-02-01:\n"
        "1. [E][ ] meetup (at: Feb 1 2021)"
    )


def test_list_on_date_fallbacks(populated: TaskList) -> None:
    assert populated.list_on_date("2022-01-01").text == (
        "You have no deadlines due on 2022-01-01.\n"
        "You have no events due on 2022-01-01."
    )


def test_list_on_date_rejects_bad_date(populated: TaskList) -> None:
    result = populated.list_on_date("abcde")
    assert isinstance(result.error, InvalidDateFormat)


# -------------------- find --------------------

def test_find_is_case_insensitive_and_ordered(populated: TaskList) -> None:
    populated.add_task("todo BOOK club")
    assert populated.find("book").text == (
        "Here are the matching tasks in your list:\n"
        "1. [T][ ] read book\n"
        "2. [T][ ] BOOK club"
    )


def test_find_returns_only_first_task(populated: TaskList) -> None:
    text = populated.find("book").text
    assert "read book" in text
    assert "submit" not in text


@pytest.mark.parametrize("keyword", ["xyz", "", "   "])
def test_find_no_matches(populated: TaskList, keyword: str) -> None:
    assert populated.find(keyword).text == "You have no matching tasks in your list."


# -------------------- done / delete --------------------

def test_mark_done_is_idempotent(populated: TaskList) -> None:
    first = populated.mark_done("2")
    second = populated.mark_done("2")
    assert first.ok and second.ok
    assert populated.tasks[1].done is True
    assert "[D][X] submit (by: Feb 1 2021)" in second.text


@pytest.mark.parametrize("index_text", ["0", "3", "-1"])
def test_mark_done_out_of_range_carries_size(populated: TaskList, index_text: str) -> None:
    result = populated.mark_done(index_text)
    assert isinstance(result.error, IndexOutOfRange)
    assert result.error.size == 2
    assert result.text == "OOPS!!! The list currently only has 2 elements."


@pytest.mark.parametrize("index_text", [None, "", "abc", "1.5", "one", "2."])
def test_index_must_be_numeric(populated: TaskList, index_text) -> None:
    assert isinstance(populated.mark_done(index_text).error, InvalidIndex)
    assert isinstance(populated.delete(index_text).error, InvalidIndex)
    assert len(populated) == 2
    assert not any(t.done for t in populated)


def test_delete_renumbers_following_tasks(populated: TaskList) -> None:
    populated.add_task("event party /at 2021-01-05")
    result = populated.delete("1")
    assert result.ok
    assert "[T][ ] read book" in result.text
    assert "Now you have 2 tasks in the list." in result.text
    listing = populated.list_all().text
    assert "read book" not in listing
    assert "1. [D][ ] submit (by: Feb 1 2021)" in listing
    assert "2. [E][ ] party (at: Jan 5 2021)" in listing


def test_delete_out_of_range(populated: TaskList) -> None:
    assert isinstance(populated.delete("3").error, IndexOutOfRange)
    assert len(populated) == 2


def test_tasks_snapshot_does_not_alias(populated: TaskList) -> None:
    populated.tasks[0].mark_done()
    assert populated.tasks[0].done is False


# -------------------- persisted lines --------------------

def test_round_trip_through_data_lines(task_list: TaskList) -> None:
    for line in (
        "todo read book",
        "deadline submit /by 2021-02-01",
        "event party /at 2021-01-05",
        "todo pipes | inside",
    ):
        assert task_list.add_task(line).ok
    task_list.mark_done("2")
    restored = TaskList.from_lines(task_list.to_data_lines())
    assert restored.tasks == task_list.tasks
    assert restored.skipped_lines == []


def test_add_task_from_data_restores_done_flag(task_list: TaskList) -> None:
    assert task_list.add_task_from_data("E | 1 | party | 2021-01-05").ok
    task = task_list.tasks[0]
    assert task.done is True
    assert task.date == date(2021, 1, 5)


@pytest.mark.parametrize(
    ("line", "error_type"),
    [
        ("D | 0 | submit | 01/02/2021", InvalidDateFormat),
        ("X | 0 | what", CorruptedEntry),
        ("T | 2 | read", CorruptedEntry),
        ("D | 0 | no date", CorruptedEntry),
        ("garbage", CorruptedEntry),
    ],
)
def test_add_task_from_data_rejects_bad_lines(task_list: TaskList, line: str, error_type) -> None:
    result = task_list.add_task_from_data(line)
    assert isinstance(result.error, error_type)
    assert len(task_list) == 0


def test_loading_skips_bad_lines_and_continues() -> None:
    lines = [
        "T | 0 | first",
        "D | 0 | broken | 2021-13-01",
        "",
        "E | 1 | last | 2021-01-05",
    ]
    tl = TaskList.from_lines(lines)
    assert [t.description for t in tl] == ["first", "last"]
    assert tl.skipped_lines == [2]


def test_parse_date_strict() -> None:
    assert parse_date(" 2021-01-05 ") == date(2021, 1, 5)
    with pytest.raises(InvalidDateFormat):
        parse_date("20210105")


def test_only_first_index_token_is_read(populated: TaskList) -> None:
    assert populated.mark_done("1 2").ok
    assert [t.done for t in populated] == [True, False]
    deleted = populated.delete("2 extra words")
    assert deleted.ok
    assert len(populated) == 1
