"""Data models for the terminal todo list.

Exposes the Category enum and the Task dataclass. Category values are the
exact tokens written to the todo file ("Any", "Todo", "InProgress", "Done"),
so the persisted format stays stable if members are ever reordered. Display
priority lives in CATEGORY_PRIORITY rather than in declaration order.
"""
from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from typing import Dict, Optional


class Category(Enum):
    ANY = "Any"
    TODO = "Todo"
    IN_PROGRESS = "InProgress"
    DONE = "Done"

    @classmethod
    def from_token(cls, token: str) -> Optional["Category"]:
        """Exact, case-sensitive lookup of a persisted token."""
        return _BY_TOKEN.get(token)

    def __str__(self) -> str:
        return self.value


_BY_TOKEN: Dict[str, Category] = {c.value: c for c in Category}

# "Any" is only the lowest display bucket, not a wildcard.
CATEGORY_PRIORITY: Dict[Category, int] = {
    Category.ANY: 0,
    Category.TODO: 1,
    Category.IN_PROGRESS: 2,
    Category.DONE: 3,
}


def category_priority(category: Category) -> int:
    return CATEGORY_PRIORITY[category]


@dataclass
class Task:
    """A single todo.

    Fields:
        name: Single-line text (may be empty). Must not contain a line break
            to survive a save/load cycle.
        category: Lifecycle tag; also decides the grouped display order.
    """
    name: str
    category: Category = Category.ANY

    def __repr__(self) -> str:  # pragma: no cover - convenience only
        return f"Task(name={self.name!r}, category={self.category.value})"
