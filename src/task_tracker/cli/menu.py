from __future__ import annotations

import logging
from datetime import datetime
from enum import Enum
from typing import Callable, Iterable, Optional, Type, TypeVar

from task_tracker.domain.task_models import Task, TaskPriority, TaskStatus, ValidationError
from task_tracker.services.task_service import TaskService

logger = logging.getLogger("tracker.console")

DUE_FORMAT = "%Y-%m-%d %H:%M"

E = TypeVar("E", bound=Enum)
T = TypeVar("T")


def parse_due_at(text: str) -> Optional[datetime]:
    text = text.strip()
    if not text:
        return None
    try:
        return datetime.strptime(text, DUE_FORMAT)
    except ValueError as e:
        raise ValueError(f"Invalid date '{text}'. Use YYYY-MM-DD HH:MM.") from e


def parse_choice(enum_cls: Type[E], text: str) -> E:
    """Match an enum member by name or value, ignoring case ("in progress" == IN_PROGRESS)."""
    key = text.strip().lower().replace(" ", "_")
    for member in enum_cls:
        if key in (member.name.lower(), str(member.value).lower()):
            return member
    raise ValueError(f"Unknown value '{text.strip()}'. Choose one of: {_choices(enum_cls)}.")


def _choices(enum_cls: Type[Enum]) -> str:
    return ", ".join(m.name.upper() for m in enum_cls)


def _error_text(exc: ValueError) -> str:
    if isinstance(exc, ValidationError):
        return "; ".join(err["msg"].removeprefix("Value error, ") for err in exc.errors())
    return str(exc)


class ConsoleMenu:
    def __init__(
        self,
        service: TaskService,
        input_fn: Optional[Callable[[str], str]] = None,
        output_fn: Optional[Callable[[str], None]] = None,
    ):
        self.service = service
        self._input = input_fn or input
        self._output = output_fn or print
        self._actions: dict[int, tuple[str, Callable[[], None]]] = {
            1: ("Add task", self.add_task),
            2: ("Delete task", self.delete_task),
            3: ("Find task by ID", self.find_task),
            4: ("List tasks by status", self.list_by_status),
            5: ("List tasks by priority", self.list_by_priority),
            6: ("Update task status", self.update_status),
            7: ("List all tasks", self.list_all),
            8: ("List overdue tasks", self.list_overdue),
        }

    def run(self) -> None:
        logger.info("console.start", extra={"category": "console", "event": "console.start"})
        while True:
            self._show_options()
            try:
                if not self.dispatch(self._input("Select an option: ")):
                    break
            except EOFError:
                self._output("")
                break
        logger.info("console.stop", extra={"category": "console", "event": "console.stop"})

    def dispatch(self, raw: str) -> bool:
        """Run one menu selection. Returns False when the user chose to exit."""
        try:
            option = int(raw.strip())
        except ValueError:
            self._output("Please enter a valid number.")
            return True

        if option == 0:
            self._output("Exiting. Goodbye!")
            return False

        action = self._actions.get(option)
        if action is None:
            self._output("Invalid option. Try again.")
            return True

        action[1]()
        return True

    def _show_options(self) -> None:
        self._output("\n--- MAIN MENU ---")
        for number, (label, _) in self._actions.items():
            self._output(f"{number}. {label}")
        self._output("0. Exit")

    def _ask(self, prompt: str, apply: Callable[[str], T]) -> T:
        # pydantic's ValidationError is a ValueError, so both land here
        while True:
            raw = self._input(prompt)
            try:
                return apply(raw)
            except ValueError as exc:
                message = _error_text(exc)
                logger.info(
                    "input.invalid",
                    extra={"category": "console", "event": "input.invalid", "error": message},
                )
                self._output(f"Invalid input: {message}")

    def _print_tasks(self, tasks: Iterable[Task]) -> None:
        tasks = list(tasks)
        if not tasks:
            self._output("No tasks found.")
            return
        for task in tasks:
            marker = " [OVERDUE]" if task.is_overdue() else ""
            self._output(f"{task}{marker}")

    def add_task(self) -> None:
        task = self._ask("Task title: ", lambda text: Task.create(text))
        task.description = self._input("Task description: ")

        def set_due(text: str) -> None:
            task.due_at = parse_due_at(text)

        def set_priority(text: str) -> None:
            if text.strip():
                task.priority = parse_choice(TaskPriority, text)

        self._ask("Due date (YYYY-MM-DD HH:MM, blank for none): ", set_due)
        self._ask(f"Priority ({_choices(TaskPriority)}, blank for LOW): ", set_priority)

        self.service.add_task(task)
        self._output(f"Task added: {task}")

    def delete_task(self) -> None:
        task_id = self._input("ID of the task to delete: ").strip()
        if self.service.delete_task(task_id):
            self._output("Task deleted.")
        else:
            self._output(f"No task with ID {task_id}.")

    def find_task(self) -> None:
        task_id = self._input("ID of the task to find: ").strip()
        task = self.service.get_task(task_id)
        if task is None:
            self._output(f"No task with ID {task_id}.")
        else:
            self._output(f"Task found: {task}")

    def list_by_status(self) -> None:
        status = self._ask(f"Status ({_choices(TaskStatus)}): ", lambda text: parse_choice(TaskStatus, text))
        self._print_tasks(self.service.list_by_status(status))

    def list_by_priority(self) -> None:
        priority = self._ask(
            f"Priority ({_choices(TaskPriority)}): ", lambda text: parse_choice(TaskPriority, text)
        )
        self._print_tasks(self.service.list_by_priority(priority))

    def update_status(self) -> None:
        task_id = self._input("ID of the task to update: ").strip()
        if self.service.get_task(task_id) is None:
            self._output(f"No task with ID {task_id}.")
            return
        status = self._ask(
            f"New status ({_choices(TaskStatus)}): ", lambda text: parse_choice(TaskStatus, text)
        )
        task = self.service.update_status(task_id, status)
        self._output(f"Task updated: {task}")

    def list_all(self) -> None:
        self._print_tasks(self.service.list_tasks())

    def list_overdue(self) -> None:
        self._print_tasks(self.service.list_overdue())
