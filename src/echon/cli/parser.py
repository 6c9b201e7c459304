# src/echon/cli/parser.py

"""
Line parser: user text -> Command.

Keywords live in a registry (keyword -> builder + help line). A builder gets
the task list and the text after the keyword and returns a ready-to-run
command with validated arguments.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Callable

from ..core.commands import (
    AddDeadlineCommand,
    AddEventCommand,
    AddTodoCommand,
    ByeCommand,
    Command,
    DeleteTaskCommand,
    EchoCommand,
    FindTaskCommand,
    ListCommand,
    MarkAsDoneCommand,
    UnmarkAsDoneCommand,
)
from ..core.errors import InvalidArgumentError, UnknownCommandError
from ..tasks.task_list import TaskList

CommandBuilder = Callable[[TaskList, str], Command]

logger = logging.getLogger(__name__)


class CommandRegistry:
    """Keyword registry used by the parser (bye, list, todo, ...)."""

    def __init__(self) -> None:
        self._builders: dict[str, CommandBuilder] = {}
        self._help: dict[str, str] = {}

    def register(
        self,
        name: str,
        builder: CommandBuilder,
        help_text: str,
        aliases: list[str] | None = None,
    ) -> None:
        aliases = aliases or []
        key = name.lower()
        self._builders[key] = builder
        self._help[key] = help_text
        for alias in aliases:
            self._builders[alias.lower()] = builder

    def build(self, task_list: TaskList, line: str) -> Command:
        """
        Build the command for a line like "deadline return book /by 2019-12-02".
        Raises UnknownCommandError when the first word is not registered.
        """
        parts = line.split(maxsplit=1)
        if not parts:
            raise UnknownCommandError()

        builder = self._builders.get(parts[0].lower())
        if builder is None:
            raise UnknownCommandError()
        rest = parts[1] if len(parts) > 1 else ""
        return builder(task_list, rest.strip())

    def build_help(self) -> str:
        lines = ["Available commands:"]
        for name, help_text in self._help.items():
            lines.append(f"  {name} - {help_text}")
        return "\n".join(lines)


registry = CommandRegistry()


def _parse_index(keyword: str, args: str) -> int:
    """Turn the user's 1-based task number into a 0-based index."""
    # Plain ASCII digits only: int() would also take "1_0" or non-ASCII digits.
    if re.fullmatch(r"[+-]?[0-9]+", args) is None:
        raise InvalidArgumentError(f"OOPS!!! Please give a task number, e.g. '{keyword} 2'.")
    return int(args) - 1


def _split_option(args: str, option: str, usage: str) -> tuple[str, str]:
    """
    Split on the last whole-word occurrence of `option` ("/by", "/from", ...).
    "fix /bye page /by 2024-01-01" -> ("fix /bye page", "2024-01-01").
    """
    matches = list(re.finditer(rf"(?:^|(?<=\s)){re.escape(option)}(?=\s|$)", args))
    if not matches:
        raise InvalidArgumentError(f"OOPS!!! Missing '{option}'. Usage: {usage}")
    last = matches[-1]
    return args[: last.start()].strip(), args[last.end() :].strip()


def build_bye(task_list: TaskList, args: str) -> Command:
    return ByeCommand()


def build_list(task_list: TaskList, args: str) -> Command:
    return ListCommand(task_list)


def build_mark(task_list: TaskList, args: str) -> Command:
    return MarkAsDoneCommand(_parse_index("mark", args), task_list)


def build_unmark(task_list: TaskList, args: str) -> Command:
    return UnmarkAsDoneCommand(_parse_index("unmark", args), task_list)


def build_delete(task_list: TaskList, args: str) -> Command:
    return DeleteTaskCommand(_parse_index("delete", args), task_list)


def build_todo(task_list: TaskList, args: str) -> Command:
    # Empty description is rejected by the command itself.
    return AddTodoCommand(args, task_list)


def build_deadline(task_list: TaskList, args: str) -> Command:
    description, by_date = _split_option(args, "/by", "deadline <description> /by <yyyy-mm-dd>")
    return AddDeadlineCommand(description, by_date, task_list)


def build_event(task_list: TaskList, args: str) -> Command:
    usage = "event <description> /from <yyyy-mm-dd> /to <yyyy-mm-dd>"
    description, dates = _split_option(args, "/from", usage)
    from_date, to_date = _split_option(dates, "/to", usage)
    return AddEventCommand(description, from_date, to_date, task_list)


def build_find(task_list: TaskList, args: str) -> Command:
    if not args:
        raise InvalidArgumentError("OOPS!!! Please give a keyword, e.g. 'find book'.")
    return FindTaskCommand(args, task_list)


def build_help(task_list: TaskList, args: str) -> Command:
    return EchoCommand(registry.build_help())


registry.register("bye", build_bye, help_text="Say goodbye and quit.", aliases=["exit", "quit"])
registry.register("list", build_list, help_text="Show all tasks.", aliases=["ls"])
registry.register("todo", build_todo, help_text="Add a todo: todo <description>.")
registry.register(
    "deadline",
    build_deadline,
    help_text="Add a deadline: deadline <description> /by <yyyy-mm-dd>.",
)
registry.register(
    "event",
    build_event,
    help_text="Add an event: event <description> /from <yyyy-mm-dd> /to <yyyy-mm-dd>.",
)
registry.register("mark", build_mark, help_text="Mark task N as done: mark N.")
registry.register("unmark", build_unmark, help_text="Mark task N as not done: unmark N.")
registry.register("delete", build_delete, help_text="Remove task N: delete N.", aliases=["rm"])
registry.register("find", build_find, help_text="Find tasks containing a keyword: find <keyword>.")
registry.register("help", build_help, help_text="Show available commands.", aliases=["h", "?"])


class CommandParser:
    """Parses user lines into commands bound to one task list."""

    def __init__(self, task_list: TaskList, commands: CommandRegistry | None = None) -> None:
        self.task_list = task_list
        self._commands = commands or registry

    def parse(self, line: str) -> Command:
        command = self._commands.build(self.task_list, line)
        logger.debug("Parsed %r -> %s", line, type(command).__name__)
        return command
