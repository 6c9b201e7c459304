# src/echon/tasks/task_list.py

from __future__ import annotations

import logging
from collections.abc import Iterator

from ..core.errors import TaskIndexError
from .task_models import Task

logger = logging.getLogger(__name__)


class TaskList:
    """
    In-memory ordered task list.

    Indices are 0-based here; every rendered line numbers tasks from 1.
    Out-of-range access raises TaskIndexError before anything is mutated.
    """

    def __init__(self, tasks: list[Task] | None = None) -> None:
        self._tasks: list[Task] = list(tasks or [])

    def __len__(self) -> int:
        return len(self._tasks)

    def __iter__(self) -> Iterator[Task]:
        return iter(self._tasks)

    def _check_index(self, index: int) -> None:
        if not 0 <= index < len(self._tasks):
            raise TaskIndexError(index, len(self._tasks))

    def add_task(self, task: Task) -> None:
        self._tasks.append(task)
        logger.debug("Task added index=%d task=%s", len(self._tasks) - 1, task)

    def get_task(self, index: int) -> Task:
        self._check_index(index)
        return self._tasks[index]

    def delete_task(self, index: int) -> Task:
        self._check_index(index)
        task = self._tasks.pop(index)
        logger.debug("Task deleted index=%d task=%s", index, task)
        return task

    def get_size(self) -> int:
        return len(self._tasks)

    def list_tasks(self) -> list[str]:
        return [f"{i}.{task}" for i, task in enumerate(self._tasks, start=1)]

    def find_tasks(self, keyword: str) -> list[tuple[int, Task]]:
        """Case-sensitive substring match on descriptions; returns (0-based index, task)."""
        return [(i, t) for i, t in enumerate(self._tasks) if keyword in t.description]
