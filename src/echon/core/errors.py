# src/echon/core/errors.py

"""
Domain errors.

Every failure the user can cause is an EchonError. The console connector shows
`str(err)` and keeps the session going.
"""

from __future__ import annotations


class EchonError(Exception):
    """Base class for user-facing errors."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message

    def __str__(self) -> str:
        return self.message


class EmptyDescriptionError(EchonError):
    MESSAGE = "OOPS!!! The description of a todo cannot be empty."

    def __init__(self) -> None:
        super().__init__(self.MESSAGE)


class InvalidDateError(EchonError):
    def __init__(self, raw: str) -> None:
        super().__init__(f"OOPS!!! I couldn't understand the date '{raw}'. Please use yyyy-mm-dd.")
        self.raw = raw


class TaskIndexError(EchonError):
    """Index outside 0..size-1. The message uses the 1-based number the user typed."""

    def __init__(self, index: int, size: int) -> None:
        super().__init__(
            f"OOPS!!! There is no task number {index + 1}. "
            f"You have {size} tasks in the list."
        )
        self.index = index
        self.size = size


class UnknownCommandError(EchonError):
    MESSAGE = "OOPS!!! I'm sorry, but I don't know what that means :-("

    def __init__(self) -> None:
        super().__init__(self.MESSAGE)


class InvalidArgumentError(EchonError):
    pass
