# tests/test_logging_setup.py

from __future__ import annotations

import logging
from pathlib import Path

import pytest

from echon.logging_setup import _ConsoleNoiseFilter, setup_logging


def _record(name: str, level: int) -> logging.LogRecord:
    return logging.LogRecord(name, level, __file__, 1, "msg", None, None)


@pytest.mark.parametrize(
    ("name", "level", "expected"),
    [
        ("echon.core.commands", logging.DEBUG, True),
        ("echon", logging.INFO, True),
        ("py.warnings", logging.WARNING, False),
        ("py.warnings", logging.ERROR, True),
        ("urllib3", logging.WARNING, False),
        ("urllib3", logging.ERROR, True),
        ("echonic", logging.INFO, False),
    ],
)
def test_console_filter(name: str, level: int, expected: bool) -> None:
    assert _ConsoleNoiseFilter().filter(_record(name, level)) is expected


def test_setup_logging_writes_file(tmp_path: Path) -> None:
    root = logging.getLogger()
    saved_handlers = list(root.handlers)
    saved_level = root.level
    log_file = tmp_path / "logs" / "echon.log"
    try:
        setup_logging(log_file=log_file, console_level=logging.CRITICAL)
        logging.getLogger("echon.test").debug("hello file")
        for h in root.handlers:
            h.flush()
        assert "hello file" in log_file.read_text("utf-8")
    finally:
        for h in list(root.handlers):
            root.removeHandler(h)
            h.close()
        for h in saved_handlers:
            root.addHandler(h)
        root.setLevel(saved_level)
        logging.captureWarnings(False)
