# src/echon/connectors/console_connector.py

from __future__ import annotations

import logging
import sys
from collections.abc import Callable
from datetime import datetime
from typing import TextIO

from ..cli.parser import CommandParser
from ..core.errors import EchonError
from ..core.state import AppState

logger = logging.getLogger(__name__)


def _ts_local() -> str:
    return datetime.now().astimezone().strftime("%Y-%m-%d %H:%M:%S")


class ConsoleUi:
    """
    Terminal UI sink.

    Every call prints one block:
        [2026-01-01 10:00:00] <<< Echon:
            Got it. I've added this task:
              [T][ ] read book
    """

    def __init__(
        self,
        app_name: str = "Echon",
        *,
        show_timestamps: bool = True,
        out: TextIO | None = None,
    ) -> None:
        self.app_name = app_name
        self.show_timestamps = show_timestamps
        self._out = out

    def _header(self) -> str:
        head = f"<<< {self.app_name}:"
        if self.show_timestamps:
            return f"[{_ts_local()}] {head}"
        return head

    def display_echon_message(self, message: str) -> None:
        self.display_echon_messages(message.splitlines() or [""])

    def display_echon_messages(self, messages: list[str]) -> None:
        block = [self._header()] + [f"    {m}" for m in messages]
        out = self._out or sys.stdout
        try:
            out.write("\n".join(block) + "\n\n")
            out.flush()
        except (OSError, ValueError):
            # Closed or broken stream: nothing left to show the user.
            logger.debug("Console write failed.", exc_info=True)


def run_console_loop(
    state: AppState,
    *,
    ui: ConsoleUi | None = None,
    read_line: Callable[[str], str] = input,
) -> None:
    settings = state.settings
    app_name = str(getattr(settings, "app_name", "Echon"))
    prompt = str(getattr(settings, "prompt", ">>> You: "))

    if ui is None:
        ui = ConsoleUi(app_name, show_timestamps=bool(getattr(settings, "show_timestamps", True)))

    parser = CommandParser(state.task_list)

    logger.info("Console connector started.")
    ui.display_echon_messages([f"Hello! I'm {app_name}", "What can I do for you?"])

    while state.running:
        try:
            user_input = read_line(prompt).strip()
        except EOFError:
            logger.info("Console EOF received, exiting.")
            break
        except KeyboardInterrupt:
            logger.info("Console KeyboardInterrupt, exiting.")
            print()
            break

        if not user_input:
            continue

        try:
            command = parser.parse(user_input)
            command.execute(ui)
        except EchonError as e:
            logger.info("Command rejected: %s", e)
            ui.display_echon_message(str(e))
            continue
        except Exception:
            logger.exception("Command handler crashed.")
            ui.display_echon_message("Internal error while handling a command.")
            continue

        if command.is_exit:
            state.running = False

    logger.info("Console connector finished (tasks=%d).", state.task_list.get_size())
