# tests/test_config.py

from __future__ import annotations

from pathlib import Path

import pytest

from echon.cli.bootstrap import create_initial_state
from echon.config import Settings


@pytest.fixture()
def clean_env(monkeypatch: pytest.MonkeyPatch) -> pytest.MonkeyPatch:
    for name in (
        "ECHON_APP_NAME",
        "ECHON_LOG_LEVEL",
        "ECHON_PROMPT",
        "ECHON_SHOW_TIMESTAMPS",
        "ECHON_DATA_DIR",
        "ECHON_LOG_FILE",
    ):
        monkeypatch.delenv(name, raising=False)
    return monkeypatch


def test_defaults(clean_env: pytest.MonkeyPatch) -> None:
    s = Settings.from_env()
    assert s.app_name == "Echon"
    assert s.log_level == "WARNING"
    assert s.prompt == ">>> You: "
    assert s.show_timestamps is True
    assert s.data_dir == Path(".local/echon")
    assert s.log_file == Path(".local/echon/echon.log")


def test_env_overrides(clean_env: pytest.MonkeyPatch, tmp_path: Path) -> None:
    clean_env.setenv("ECHON_APP_NAME", "Duke")
    clean_env.setenv("ECHON_LOG_LEVEL", "debug")
    clean_env.setenv("ECHON_SHOW_TIMESTAMPS", "off")
    clean_env.setenv("ECHON_DATA_DIR", str(tmp_path))

    s = Settings.from_env()
    assert s.app_name == "Duke"
    assert s.log_level == "DEBUG"
    assert s.show_timestamps is False
    assert s.log_file == tmp_path / "echon.log"


def test_blank_values_fall_back(clean_env: pytest.MonkeyPatch) -> None:
    clean_env.setenv("ECHON_APP_NAME", "   ")
    clean_env.setenv("ECHON_SHOW_TIMESTAMPS", "")
    s = Settings.from_env()
    assert s.app_name == "Echon"
    assert s.show_timestamps is True


def test_create_initial_state_makes_data_dir(settings) -> None:
    state = create_initial_state(settings=settings)
    assert settings.data_dir.is_dir()
    assert state.task_list.get_size() == 0
    assert state.running is True


@pytest.mark.parametrize(
    ("raw", "expected"), [("maybe", True), ("2", True), ("no", False), ("OFF", False)]
)
def test_malformed_bool_falls_back(clean_env: pytest.MonkeyPatch, raw: str, expected: bool) -> None:
    clean_env.setenv("ECHON_SHOW_TIMESTAMPS", raw)
    assert Settings.from_env().show_timestamps is expected
