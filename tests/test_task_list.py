# tests/test_task_list.py

from __future__ import annotations

import pytest

from echon.core.errors import TaskIndexError
from echon.tasks.task_list import TaskList
from echon.tasks.task_models import Todo


def test_add_get_delete(task_list: TaskList) -> None:
    a, b, c = Todo("a"), Todo("b"), Todo("c")
    for t in (a, b, c):
        task_list.add_task(t)
    assert task_list.get_size() == 3
    assert len(task_list) == 3
    assert task_list.get_task(1) is b

    removed = task_list.delete_task(1)
    assert removed is b
    assert list(task_list) == [a, c]


def test_list_tasks_is_one_based(task_list: TaskList) -> None:
    task_list.add_task(Todo("read book"))
    task_list.add_task(Todo("write code"))
    assert task_list.list_tasks() == ["1.[T][ ] read book", "2.[T][ ] write code"]


def test_empty_list_renders_nothing() -> None:
    assert TaskList().list_tasks() == []


@pytest.mark.parametrize("index", [-1, 2, 10])
def test_out_of_range_access_raises(task_list: TaskList, index: int) -> None:
    task_list.add_task(Todo("a"))
    task_list.add_task(Todo("b"))

    with pytest.raises(TaskIndexError) as exc:
        task_list.get_task(index)
    assert exc.value.size == 2

    with pytest.raises(TaskIndexError):
        task_list.delete_task(index)
    assert task_list.get_size() == 2


def test_index_error_message_uses_user_numbering() -> None:
    with pytest.raises(TaskIndexError) as exc:
        TaskList().get_task(4)
    assert str(exc.value) == "OOPS!!! There is no task number 5. You have 0 tasks in the list."


def test_find_tasks_keeps_original_indices(task_list: TaskList) -> None:
    for d in ("write code", "read book", "buy Book", "book club"):
        task_list.add_task(Todo(d))
    found = task_list.find_tasks("book")
    assert [i for i, _ in found] == [1, 3]
