"""Persistence helpers (load/save) for the task list.

The save file holds one pipe-delimited line per task and is rewritten in
full on every save; there is no incremental append.
"""
from __future__ import annotations
import logging
from pathlib import Path
from typing import Iterable, List, Union

from taskline.errors import StorageError
from taskline.task_list import TaskList

logger = logging.getLogger(__name__)


class Storage:
    def __init__(self, path: Union[str, Path]):
        self.path = Path(path)

    def load_lines(self) -> List[str]:
        """Read saved lines from disk.

        Missing file -> empty list (the directory and an empty file are created).
        Blank lines are dropped.
        """
        try:
            if not self.path.exists():
                self.path.parent.mkdir(parents=True, exist_ok=True)
                self.path.touch()
                logger.info("Created empty save file %s", self.path)
                return []
            with open(self.path, 'r', encoding='utf-8') as f:
                return [line.rstrip('\r\n') for line in f if line.strip()]
        except (OSError, UnicodeDecodeError) as exc:
            logger.error("Could not read save file %s: %s", self.path, exc)
            raise StorageError(f"Something went wrong while reading your save file ({self.path}).") from exc

    def load(self) -> TaskList:
        return TaskList.from_lines(self.load_lines())

    def save_lines(self, lines: Iterable[str]) -> None:
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            with open(self.path, 'w', encoding='utf-8') as f:
                for line in lines:
                    f.write(line + '\n')
        except OSError as exc:
            logger.error("Could not write save file %s: %s", self.path, exc)
            raise StorageError(f"Something went wrong while saving your file ({self.path}).") from exc

    def save(self, task_list: TaskList) -> None:
        """Persist the whole list, one line per task in list order."""
        self.save_lines(task_list.to_data_lines())
        logger.debug("Saved %d tasks to %s", len(task_list), self.path)
