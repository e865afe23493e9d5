"""Interactive menu loop for the todo list.

Every successful add/edit/remove rewrites the todo file straight away, so
leaving the loop (option 6, Ctrl-C or end of input) never loses work.
Invalid menu and category choices are re-prompted by click itself.
"""
import logging
from typing import Dict, Optional
import click
from models import Category, Task
from storage import FileWriteError, NAME_LIMITATION, Storage, storable_name
from todo_list import TaskIndexError, TodoList

logger = logging.getLogger(__name__)

MENU = (
    "Choose an option:\n"
    "1. Add a todo\n"
    "2. Edit a todo\n"
    "3. Remove a todo\n"
    "4. Display all todos\n"
    "5. Display todos by category\n"
    "6. Exit"
)

# New todos cannot start out as Done.
ADD_CATEGORIES: Dict[str, Category] = {
    '1': Category.ANY,
    '2': Category.TODO,
    '3': Category.IN_PROGRESS,
}
EDIT_CATEGORIES: Dict[str, Category] = {**ADD_CATEGORIES, '4': Category.DONE}


def _category_menu(choices: Dict[str, Category]) -> str:
    return ', '.join(f'{key} - {cat.value}' for key, cat in choices.items())


class CLI:
    def __init__(self, todo_list: TodoList, storage: Storage):
        self.todo_list: TodoList = todo_list
        self.storage: Storage = storage

    def run(self) -> None:
        """Main menu loop; returns on option 6 or interrupted input."""
        click.echo("Program for a simple Todo implementation")
        try:
            while True:
                click.echo(MENU)
                option = click.prompt("Option", type=click.Choice(["1", "2", "3", "4", "5", "6"]),
                                      show_choices=False)
                if option == "6":
                    click.echo("Exiting program!")
                    break
                self._handle_option(option)
        except (click.Abort, KeyboardInterrupt, EOFError):
            click.echo("\nInterrupted. Goodbye.")

    # -------------------- option dispatch --------------------
    def _handle_option(self, option: str) -> None:
        if option == "1":
            self._add()
        elif option == "2":
            self._edit()
        elif option == "3":
            self._remove()
        elif option == "4":
            self.todo_list.display()
        elif option == "5":
            self.todo_list.display_by_category()

    def _persist(self) -> None:
        try:
            self.storage.save_tasks(self.todo_list)
        except FileWriteError as exc:
            # in-memory list stays authoritative until the next successful save
            logger.warning("Failed to write to file: %s", exc)

    # -------------------- user-interactive flows --------------------
    def _prompt_name(self, text: str) -> Optional[str]:
        name = click.prompt(text, default="", show_default=False).strip()
        if not storable_name(name):
            click.echo(NAME_LIMITATION)
            return None
        return name

    def _prompt_category(self, choices: Dict[str, Category]) -> Category:
        key = click.prompt(f"Choose the category: {_category_menu(choices)}",
                           type=click.Choice(list(choices)), show_choices=False)
        return choices[key]

    def _prompt_index(self, text: str) -> int:
        return click.prompt(text, type=click.IntRange(min=0))

    def _add(self) -> None:
        name = self._prompt_name("Enter a todo name")
        if name is None:
            return
        category = self._prompt_category(ADD_CATEGORIES)
        self.todo_list.add(Task(name=name, category=category))
        self._persist()

    def _edit(self) -> None:
        self.todo_list.display()
        index = self._prompt_index("Enter the todo index to edit")
        try:
            self.todo_list.get(index)
        except TaskIndexError as exc:
            click.echo(str(exc))
            return
        field = click.prompt("What do you want to edit? 1 - Name, 2 - Category",
                             type=click.Choice(["1", "2"]), show_choices=False)
        if field == "1":
            name = self._prompt_name("Enter a new name")
            if name is None:
                return
            self.todo_list.edit_name(index, name)
        else:
            self.todo_list.edit_category(index, self._prompt_category(EDIT_CATEGORIES))
        self._persist()

    def _remove(self) -> None:
        self.todo_list.display()
        index = self._prompt_index("Enter the todo index to remove")
        try:
            removed = self.todo_list.remove(index)
        except TaskIndexError as exc:
            click.echo(str(exc))
            return
        logger.debug("Removed todo %d: %r", index, removed.name)
        self._persist()
