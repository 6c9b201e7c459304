# src/echon/core/state.py

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from ..tasks.task_list import TaskList


@dataclass
class AppState:
    # Settings object (echon.config.Settings or a test stand-in).
    settings: Any

    # The single task list owned by this session.
    task_list: TaskList = field(default_factory=TaskList)

    running: bool = True
