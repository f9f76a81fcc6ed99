# tests/conftest.py

from __future__ import annotations

from pathlib import Path

import pytest

from taskline.config import Settings
from taskline.task_list import TaskList


@pytest.fixture()
def task_list() -> TaskList:
    return TaskList()


@pytest.fixture()
def populated() -> TaskList:
    """The two-task list used by most query tests."""
    tl = TaskList()
    assert tl.add_task("todo read book").ok
    assert tl.add_task("deadline submit /by 2021-02-01").ok
    return tl


@pytest.fixture()
def data_file(tmp_path: Path) -> Path:
    return tmp_path / "data" / "tasks.txt"


@pytest.fixture()
def settings(tmp_path: Path, data_file: Path) -> Settings:
    """
    Settings pointing at tmp paths.

    Built from an empty environment so the developer's own
    TASKLINE_* variables never leak into tests.
    """
    return Settings.from_env(
        environ={
            "TASKLINE_DATA_FILE": str(data_file),
            "TASKLINE_LOG_DIR": str(tmp_path / "logs"),
            "TASKLINE_LOG_FILE": "0",
        },
        dotenv_path=tmp_path / ".env",
    )
