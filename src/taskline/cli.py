"""Interactive loop: read a line, dispatch it, print the reply, persist.

All parsing and error classification lives in the task list; this layer
only prints text and saves after each command that changed the list.
"""
import logging
from typing import Callable, Optional

import click

from taskline.commands import Response, execute
from taskline.errors import StorageError
from taskline.storage import Storage
from taskline.task_list import TaskList
from taskline.theme import BOLD, ERROR_COLOR, HEADER_COLOR, PRIMARY, color

logger = logging.getLogger(__name__)

PROMPT = "> "
GREETING = ("Hello! I'm taskline.\n"
            "What can I do for you? Type 'help' for the list of commands.")
DIVIDER = "_" * 60


class CLI:
    def __init__(self, task_list: TaskList, storage: Storage,
                 read_line: Callable[[str], str] = input):
        self.task_list: TaskList = task_list
        self.storage: Storage = storage
        self._read_line = read_line

    def run(self) -> None:
        """Main REPL loop; saves after every mutating command and on exit."""
        exit_message: Optional[str] = None
        self._show_text(GREETING, HEADER_COLOR)
        try:
            while True:
                line = self._read_line(PROMPT).strip()
                if not line:
                    continue
                response = execute(self.task_list, line)
                self._show(response)
                if response.mutated:
                    self._persist()
                if response.is_exit:
                    self._persist()
                    break
        except (KeyboardInterrupt, EOFError):
            self._persist()
            exit_message = "Interrupted. Goodbye."
        finally:
            if exit_message:
                click.echo()
                click.echo(exit_message)

    # -------------------- output --------------------
    def _show(self, response: Response) -> None:
        if response.ok:
            self._show_text(response.text, PRIMARY if response.is_exit else '')
        else:
            logger.debug("Command failed (%s): %s", response.error.kind.value, response.text)
            self._show_text(response.text, ERROR_COLOR, BOLD)

    @staticmethod
    def _show_text(text: str, *styles: str) -> None:
        styles = tuple(s for s in styles if s)
        click.echo(color(DIVIDER, PRIMARY))
        click.echo(color(text, *styles))
        click.echo(color(DIVIDER, PRIMARY))

    # -------------------- persistence --------------------
    def _persist(self) -> None:
        try:
            self.storage.save(self.task_list)
        except StorageError as exc:
            click.echo(color(str(exc), ERROR_COLOR))
