"""Todo list logic: ordered task storage, index-based mutation, and rendering.

Positions always refer to insertion order. The grouped view is a read-only
projection sorted by category priority; it reports each task's original
position so the user can edit or remove straight from either listing.
"""
from typing import Iterable, Iterator, List, Optional, Tuple
import click
from models import Category, Task, category_priority
from theme import paint, CATEGORY_COLOR, INDEX_COLOR, EMPTY_COLOR

Entry = Tuple[int, Task]


class TaskIndexError(IndexError):
    """Raised when an edit/remove references a position past the end of the list."""

    def __init__(self, index: int, length: int):
        super().__init__(f"No todo at index {index} (list has {length}).")
        self.index = index
        self.length = length


class TodoList:
    def __init__(self, tasks: Optional[Iterable[Task]] = None):
        self._tasks: List[Task] = list(tasks) if tasks else []

    def __len__(self) -> int:
        return len(self._tasks)

    def __iter__(self) -> Iterator[Task]:
        return iter(self._tasks)

    @property
    def tasks(self) -> List[Task]:
        return list(self._tasks)

    def get(self, index: int) -> Task:
        self._check_index(index)
        return self._tasks[index]

    # -------------------- task operations --------------------
    def add(self, task: Task) -> None:
        self._tasks.append(task)

    def remove(self, index: int) -> Task:
        self._check_index(index)
        return self._tasks.pop(index)

    def edit_name(self, index: int, new_name: str) -> None:
        self._check_index(index)
        self._tasks[index].name = new_name

    def edit_category(self, index: int, new_category: Category) -> None:
        self._check_index(index)
        self._tasks[index].category = new_category

    def _check_index(self, index: int) -> None:
        # negative indices are rejected too; Python would silently wrap them
        if index < 0 or index >= len(self._tasks):
            raise TaskIndexError(index, len(self._tasks))

    # -------------------- queries --------------------
    def list_in_order(self) -> Iterator[Entry]:
        return enumerate(self._tasks)

    def list_by_category(self) -> Iterator[Entry]:
        """Entries ordered Any, Todo, InProgress, Done.

        sorted() is stable, so equal categories keep insertion order.
        """
        entries = sorted(enumerate(self._tasks), key=lambda e: category_priority(e[1].category))
        return iter(entries)

    # -------------------- display --------------------
    def display(self) -> None:
        self._render(self.list_in_order())

    def display_by_category(self) -> None:
        self._render(self.list_by_category())

    def _render(self, entries: Iterable[Entry]) -> None:
        shown = False
        for position, task in entries:
            click.echo(format_entry(position, task))
            shown = True
        if not shown:
            click.echo(paint('(empty)', EMPTY_COLOR))


def format_entry(position: int, task: Task) -> str:
    """Render one listing line: ``<i> - [<Category>] <name>``."""
    cat_col = CATEGORY_COLOR.get(task.category, '')
    return f"{paint(str(position), INDEX_COLOR)} - {paint(f'[{task.category.value}]', cat_col)} {task.name}"
