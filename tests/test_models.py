# tests/test_models.py

from __future__ import annotations

from models import CATEGORY_PRIORITY, Category, Task, category_priority


def test_category_tokens_are_exact_and_case_sensitive() -> None:
    assert Category.from_token("Any") is Category.ANY
    assert Category.from_token("Todo") is Category.TODO
    assert Category.from_token("InProgress") is Category.IN_PROGRESS
    assert Category.from_token("Done") is Category.DONE

    assert Category.from_token("todo") is None
    assert Category.from_token("In Progress") is None
    assert Category.from_token(" Done") is None
    assert Category.from_token("") is None


def test_category_priority_is_total_order() -> None:
    ordered = sorted(Category, key=category_priority)
    assert ordered == [Category.ANY, Category.TODO, Category.IN_PROGRESS, Category.DONE]
    assert set(CATEGORY_PRIORITY) == set(Category)
    assert len(set(CATEGORY_PRIORITY.values())) == 4


def test_task_defaults_and_empty_name() -> None:
    task = Task("")
    assert task.name == ""
    assert task.category is Category.ANY
    assert str(Category.IN_PROGRESS) == "InProgress"
