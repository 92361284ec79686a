from __future__ import annotations
from typing import Iterable, List, Optional
from datetime import datetime

from task_tracker.domain.task_models import Task, TaskPriority, TaskStatus


class TaskManager:
    """
    In-memory task collection for one session.
    Insertion order is kept; every list returned is a fresh copy.
    """
    def __init__(self, tasks: Optional[Iterable[Task]] = None):
        self._tasks: List[Task] = list(tasks or [])

    def __len__(self) -> int:
        return len(self._tasks)

    def add(self, task: Task) -> None:
        self._tasks.append(task)

    def remove(self, task_id: str) -> bool:
        kept = [t for t in self._tasks if t.id != task_id]
        removed = len(kept) != len(self._tasks)
        self._tasks = kept
        return removed

    def find_by_id(self, task_id: str) -> Optional[Task]:
        return next((t for t in self._tasks if t.id == task_id), None)

    def list_by_status(self, status: TaskStatus) -> List[Task]:
        return [t for t in self._tasks if t.status == status]

    def list_by_priority(self, priority: TaskPriority) -> List[Task]:
        return [t for t in self._tasks if t.priority == priority]

    def list_overdue(self, now: Optional[datetime] = None) -> List[Task]:
        return [t for t in self._tasks if t.is_overdue(now)]

    def list_all(self) -> List[Task]:
        return list(self._tasks)
