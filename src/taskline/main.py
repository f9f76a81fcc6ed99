"""Main entry point for taskline."""
from pathlib import Path
from typing import Optional

import click

from taskline import theme
from taskline.cli import CLI
from taskline.config import Settings
from taskline.errors import StorageError
from taskline.logging_setup import level_from_name, setup_logging
from taskline.storage import Storage
from taskline.task_list import TaskList

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")


def load_task_list(storage: Storage) -> TaskList:
    """Load saved tasks; a failed read reports and starts with an empty list."""
    try:
        task_list = storage.load()
    except StorageError as exc:
        click.echo(theme.color(str(exc), theme.ERROR_COLOR))
        return TaskList()
    if task_list.skipped_lines:
        numbers = ", ".join(str(n) for n in task_list.skipped_lines)
        click.echo(theme.color(
            f"There is an error in your save file; skipped line(s) {numbers}.",
            theme.ERROR_COLOR,
        ))
    return task_list


@click.command(context_settings={"help_option_names": ["-h", "--help"]})
@click.option("--data-file", type=click.Path(dir_okay=False, path_type=Path), default=None,
              help="Save file (default: $TASKLINE_DATA_FILE or data/tasks.txt).")
@click.option("--log-level", type=click.Choice(LOG_LEVELS, case_sensitive=False), default=None,
              help="Console log level (default: $TASKLINE_LOG_LEVEL or WARNING).")
@click.option("--no-color", is_flag=True, default=False, help="Disable colored output.")
def main(data_file: Optional[Path], log_level: Optional[str], no_color: bool) -> None:
    """Track to-dos, deadlines and events from the terminal."""
    settings = Settings.from_env().with_overrides(data_file=data_file, log_level=log_level)
    setup_logging(
        log_dir=settings.log_dir,
        console_level=level_from_name(settings.log_level),
        log_to_file=settings.log_to_file,
    )
    if no_color:
        theme.set_enabled(False)
    storage = Storage(settings.data_file)
    CLI(load_task_list(storage), storage).run()


if __name__ == "__main__":
    main()
