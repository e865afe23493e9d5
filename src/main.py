"""Main entry point for the terminal todo list."""
import logging
import click
from cli import CLI
from logging_setup import LOG_DIR, setup_logging
from storage import FileReadError, Storage
from todo_list import TodoList

logger = logging.getLogger(__name__)


@click.command()
def main() -> None:
    """Add, edit, remove and list todos kept in a plain-text file."""
    setup_logging(log_dir=LOG_DIR)
    storage = Storage()
    try:
        todo_list = storage.load_tasks()
    except FileReadError as exc:
        logger.warning("Failed to read from file: %s", exc)
        todo_list = TodoList()
    CLI(todo_list, storage).run()

if __name__ == "__main__":
    main()
