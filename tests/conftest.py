# tests/conftest.py

from __future__ import annotations

import logging
from pathlib import Path

import pytest

from models import Category, Task
from storage import Storage
from todo_list import TodoList


@pytest.fixture()
def storage(tmp_path: Path) -> Storage:
    """Storage pointed at a per-test file (not created until the first save)."""
    return Storage(tmp_path / "Todos.txt")


@pytest.fixture()
def abc_list() -> TodoList:
    """[("A", Done), ("B", Any), ("C", Todo)]"""
    return TodoList(
        [
            Task("A", Category.DONE),
            Task("B", Category.ANY),
            Task("C", Category.TODO),
        ]
    )


@pytest.fixture()
def restore_root_logging():
    root = logging.getLogger()
    level = root.level
    yield root
    # drop only what setup_logging installed; pytest manages its own handlers
    for h in list(root.handlers):
        if type(h) in (logging.FileHandler, logging.StreamHandler):
            root.removeHandler(h)
            h.close()
    root.setLevel(level)
    logging.captureWarnings(False)
