import logging
from datetime import datetime
from typing import List, Optional

from task_tracker.domain.task_models import Task, TaskPriority, TaskStatus
from task_tracker.infra.task_repo_memory import TaskManager

logger = logging.getLogger("tracker.tasks")


class TaskService:
    def __init__(self, manager: TaskManager):
        self.manager = manager

    def add_task(self, task: Task) -> Task:
        self.manager.add(task)
        logger.info(
            "task.create",
            extra={
                "category": "tasks",
                "event": "task.create",
                "task_id": task.id,
                "title": task.title,
                "priority": task.priority.value,
            },
        )
        return task

    def create_task(
        self,
        title: str,
        description: Optional[str] = None,
        due_at: Optional[datetime] = None,
        priority: Optional[TaskPriority] = None,
    ) -> Task:
        return self.add_task(Task.create(title, description, due_at, priority))

    def get_task(self, task_id: str) -> Optional[Task]:
        return self.manager.find_by_id(task_id)

    def delete_task(self, task_id: str) -> bool:
        removed = self.manager.remove(task_id)
        logger.info(
            "task.delete",
            extra={"category": "tasks", "event": "task.delete", "task_id": task_id, "removed": removed},
        )
        return removed

    def update_status(self, task_id: str, status: TaskStatus) -> Optional[Task]:
        task = self.manager.find_by_id(task_id)
        if task is None:
            return None
        previous = task.status
        task.status = status
        logger.info(
            "task.status",
            extra={
                "category": "tasks",
                "event": "task.status",
                "task_id": task_id,
                "from_status": previous.value,
                "to_status": task.status.value,
            },
        )
        return task

    def list_tasks(self) -> List[Task]:
        return self.manager.list_all()

    def list_by_status(self, status: TaskStatus) -> List[Task]:
        return self.manager.list_by_status(status)

    def list_by_priority(self, priority: TaskPriority) -> List[Task]:
        return self.manager.list_by_priority(priority)

    def list_overdue(self) -> List[Task]:
        return self.manager.list_overdue()
