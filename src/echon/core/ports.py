# src/echon/core/ports.py

from __future__ import annotations

"""
Ports (interfaces) used by the core.

Commands talk to a UI sink Protocol instead of a concrete front-end, so the
console connector and test fakes are interchangeable.
"""

from typing import Protocol


class EchonUi(Protocol):
    """
    Presentation boundary receiving response lines.

    Each call is one logical response. Implementations must not raise.
    """

    def display_echon_message(self, message: str) -> None: ...

    def display_echon_messages(self, messages: list[str]) -> None: ...
