# tests/conftest.py

from __future__ import annotations

from pathlib import Path
from types import SimpleNamespace

import pytest

from echon.core.state import AppState
from echon.tasks.task_list import TaskList

from .fakes import RecordingUi


@pytest.fixture()
def settings(tmp_path: Path) -> SimpleNamespace:
    """
    Minimal settings object compatible with AppState and the console connector.

    We use a SimpleNamespace rather than the real config, to keep unit tests
    independent of the environment.
    """
    return SimpleNamespace(
        app_name="Echon",
        log_level="WARNING",
        prompt=">>> You: ",
        show_timestamps=False,
        data_dir=tmp_path / "data",
        log_file=tmp_path / "data" / "echon.log",
    )


@pytest.fixture()
def task_list() -> TaskList:
    return TaskList()


@pytest.fixture()
def ui() -> RecordingUi:
    return RecordingUi()


@pytest.fixture()
def state(settings: SimpleNamespace, task_list: TaskList) -> AppState:
    return AppState(settings=settings, task_list=task_list)
