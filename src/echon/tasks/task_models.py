# src/echon/tasks/task_models.py

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from typing import ClassVar

from ..core.errors import InvalidDateError


def parse_date(raw: str) -> date:
    """Parse an ISO yyyy-mm-dd date (surrounding whitespace ignored)."""
    text = (raw or "").strip()
    try:
        return date.fromisoformat(text)
    except ValueError:
        raise InvalidDateError(text) from None


def format_date(d: date) -> str:
    # "Oct 5 2019": no zero padding on the day.
    return f"{d:%b} {d.day} {d.year}"


@dataclass(slots=True)
class Task:
    """
    A todo/deadline/event item.

    Subclasses set `type_icon` and may append a suffix to the rendered line:
        [T][ ] read book
        [D][X] return book (by: Dec 2 2019)
    """

    type_icon: ClassVar[str] = "?"

    description: str
    done: bool = False

    def __post_init__(self) -> None:
        if type(self) is Task:
            raise TypeError("Task is abstract; create a Todo, Deadline or Event")

    @property
    def status_icon(self) -> str:
        return "X" if self.done else " "

    def mark_as_done(self) -> None:
        self.done = True

    def unmark_as_done(self) -> None:
        self.done = False

    def _suffix(self) -> str:
        return ""

    def __str__(self) -> str:
        return f"[{self.type_icon}][{self.status_icon}] {self.description}{self._suffix()}"


@dataclass(slots=True)
class Todo(Task):
    type_icon: ClassVar[str] = "T"


@dataclass(slots=True)
class Deadline(Task):
    type_icon: ClassVar[str] = "D"

    by_date: date = field(kw_only=True)

    @classmethod
    def create(cls, description: str, by: str) -> Deadline:
        return cls(description=description, by_date=parse_date(by))

    def _suffix(self) -> str:
        return f" (by: {format_date(self.by_date)})"


@dataclass(slots=True)
class Event(Task):
    type_icon: ClassVar[str] = "E"

    from_date: date = field(kw_only=True)
    to_date: date = field(kw_only=True)

    @classmethod
    def create(cls, description: str, start: str, end: str) -> Event:
        return cls(
            description=description,
            from_date=parse_date(start),
            to_date=parse_date(end),
        )

    def _suffix(self) -> str:
        return f" (from: {format_date(self.from_date)} to: {format_date(self.to_date)})"
