"""Persistence helpers (load/save) for the todo list.

The todo file is plain text, one task per line::

    [Any] Buy milk
    [Todo] Write report

Lines that do not match ``"[" Category "] " Name`` are skipped on load and
therefore dropped on the next save. The file is always rewritten in full.
"""
import logging
from pathlib import Path
from typing import Optional, Union
from models import Category, Task
from todo_list import TodoList

logger = logging.getLogger(__name__)

TODOS_FILE = Path(__file__).parent.parent / 'data' / 'Todos.txt'

NAME_LIMITATION = "Todo names cannot contain line breaks (one todo per line in the file)."


class StorageError(Exception):
    """Base class for todo file failures."""

    def __init__(self, path: Path, cause: Exception):
        super().__init__(f"{path}: {getattr(cause, 'strerror', None) or cause}")
        self.path = path
        self.cause = cause


class FileReadError(StorageError):
    pass


class FileWriteError(StorageError):
    pass


# -------------------- line codec --------------------
def parse_line(line: str) -> Optional[Task]:
    """Parse one file line; return None when it is not a todo line."""
    if line.endswith('\r'):
        line = line[:-1]
    # hand-edited files may indent lines
    line = line.lstrip()
    if not line.startswith('['):
        return None
    close = line.find(']')
    if close == -1:
        return None
    category = Category.from_token(line[1:close])
    if category is None:
        return None
    rest = line[close + 1:]
    if not rest.startswith(' '):
        return None
    return Task(name=rest[1:], category=category)


def format_line(task: Task) -> str:
    return f"[{task.category.value}] {task.name}"


def storable_name(name: str) -> bool:
    return '\n' not in name and '\r' not in name


def decode(text: str) -> TodoList:
    tasks = []
    for lineno, line in enumerate(text.split('\n'), start=1):
        task = parse_line(line)
        if task is None:
            if line.strip():
                logger.debug("Skipping malformed line %d: %r", lineno, line)
            continue
        tasks.append(task)
    return TodoList(tasks)


def encode(todo_list: TodoList) -> str:
    return ''.join(format_line(task) + '\n' for task in todo_list)


# -------------------- file access --------------------
class Storage:
    def __init__(self, path: Union[str, Path, None] = None):
        self.path = Path(path) if path is not None else TODOS_FILE

    def load_tasks(self) -> TodoList:
        """Read the todo file.

        Raises FileReadError when the file is missing or unreadable; the
        caller decides whether to start from an empty list.
        """
        try:
            text = self.path.read_text(encoding='utf-8')
        except (OSError, UnicodeDecodeError) as exc:
            raise FileReadError(self.path, exc) from exc
        todo_list = decode(text)
        logger.info("Loaded %d todos from %s", len(todo_list), self.path)
        return todo_list

    def save_tasks(self, todo_list: TodoList) -> None:
        """Overwrite the todo file with every task in storage order."""
        content = encode(todo_list)
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            self.path.write_text(content, encoding='utf-8')
        except OSError as exc:
            raise FileWriteError(self.path, exc) from exc
        logger.info("Saved %d todos to %s", len(todo_list), self.path)
