# src/echon/core/commands.py

"""
Command objects.

One command per user intent: built by the parser, executed once against the
task list it was given, then discarded. Responses go to an EchonUi sink;
domain failures surface as EchonError from execute().
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod

from ..tasks.task_list import TaskList
from ..tasks.task_models import Deadline, Event, Task, Todo
from .errors import EmptyDescriptionError
from .ports import EchonUi

logger = logging.getLogger(__name__)


class Command(ABC):
    is_exit: bool = False

    @abstractmethod
    def execute(self, ui: EchonUi) -> None:
        """Run the command and report the result through `ui`."""


class ByeCommand(Command):
    BYE_MESSAGE = "Bye. Hope to see you again soon!"

    is_exit = True

    def execute(self, ui: EchonUi) -> None:
        ui.display_echon_message(self.BYE_MESSAGE)


class EchoCommand(Command):
    def __init__(self, message: str) -> None:
        self.message = message

    def execute(self, ui: EchonUi) -> None:
        ui.display_echon_message(self.message)


class AddTaskCommand(Command):
    """
    Shared flow for todo/deadline/event:
    validate description -> create_task() -> append -> confirm with new count.

    Nothing is appended when validation or create_task() raises.
    """

    def __init__(self, description: str, task_list: TaskList) -> None:
        self.description = description
        self.task_list = task_list

    @abstractmethod
    def create_task(self) -> Task: ...

    def execute(self, ui: EchonUi) -> None:
        if self.description == "":
            raise EmptyDescriptionError()

        task = self.create_task()
        self.task_list.add_task(task)
        ui.display_echon_messages(
            [
                "Got it. I've added this task:",
                f"  {task}",
                f"Now you have {self.task_list.get_size()} tasks in the list.",
            ]
        )


class AddTodoCommand(AddTaskCommand):
    def create_task(self) -> Task:
        return Todo(self.description)


class AddDeadlineCommand(AddTaskCommand):
    def __init__(self, description: str, by_date: str, task_list: TaskList) -> None:
        super().__init__(description, task_list)
        self.by_date = by_date

    def create_task(self) -> Task:
        return Deadline.create(self.description, self.by_date)


class AddEventCommand(AddTaskCommand):
    def __init__(
        self,
        description: str,
        from_date: str,
        to_date: str,
        task_list: TaskList,
    ) -> None:
        super().__init__(description, task_list)
        self.from_date = from_date
        self.to_date = to_date

    def create_task(self) -> Task:
        return Event.create(self.description, self.from_date, self.to_date)


class ListCommand(Command):
    def __init__(self, task_list: TaskList) -> None:
        self.task_list = task_list

    def execute(self, ui: EchonUi) -> None:
        ui.display_echon_messages(["Here are the tasks in your list:", *self.task_list.list_tasks()])


class MarkAsDoneCommand(Command):
    def __init__(self, index: int, task_list: TaskList) -> None:
        self.index = index
        self.task_list = task_list

    def execute(self, ui: EchonUi) -> None:
        task = self.task_list.get_task(self.index)
        task.mark_as_done()
        logger.debug("Marked done index=%d", self.index)
        ui.display_echon_messages(["Nice! I've marked this task as done:", f"  {task}"])


class UnmarkAsDoneCommand(Command):
    def __init__(self, index: int, task_list: TaskList) -> None:
        self.index = index
        self.task_list = task_list

    def execute(self, ui: EchonUi) -> None:
        task = self.task_list.get_task(self.index)
        task.unmark_as_done()
        logger.debug("Marked not done index=%d", self.index)
        ui.display_echon_messages(["OK, I've marked this task as not done yet:", f"  {task}"])


class DeleteTaskCommand(Command):
    def __init__(self, index: int, task_list: TaskList) -> None:
        self.index = index
        self.task_list = task_list

    def execute(self, ui: EchonUi) -> None:
        task = self.task_list.delete_task(self.index)
        ui.display_echon_messages(
            [
                "Noted. I've removed this task:",
                f"  {task}",
                f"Now you have {self.task_list.get_size()} tasks in the list.",
            ]
        )


class FindTaskCommand(Command):
    def __init__(self, keyword: str, task_list: TaskList) -> None:
        self.keyword = keyword
        self.task_list = task_list

    def execute(self, ui: EchonUi) -> None:
        # Keep each match's position in the full list, not in the result.
        messages = ["Here are the matching tasks in your list:"]
        for i, task in self.task_list.find_tasks(self.keyword):
            messages.append(f"{i + 1}.{task}")
        ui.display_echon_messages(messages)
