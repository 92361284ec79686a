from __future__ import annotations
from pydantic import BaseModel, ConfigDict, Field, ValidationError, ValidationInfo, field_validator
from enum import Enum
from datetime import datetime, timezone
from typing import Optional
import uuid

__all__ = ["Task", "TaskPriority", "TaskStatus", "ValidationError", "new_task_id"]


class TaskStatus(str, Enum):
    pending = "pending"
    in_progress = "in_progress"
    completed = "completed"
    cancelled = "cancelled"


class TaskPriority(str, Enum):
    low = "low"
    medium = "medium"
    high = "high"
    urgent = "urgent"


def new_task_id() -> str:
    return str(uuid.uuid4())


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


def _aware(value: datetime) -> datetime:
    # naive input is local wall-clock time
    return value.astimezone() if value.tzinfo is None else value


class Task(BaseModel):
    """
    One tracked task. Fields are validated on construction and on every
    assignment, so `task.due_at = ...` behaves like a checked setter.
    Equality and hashing use `id` only.
    """
    model_config = ConfigDict(validate_assignment=True)

    id: str = Field(default_factory=new_task_id, frozen=True)
    # created_at is declared before due_at so the due_at validator can see it
    created_at: datetime = Field(default_factory=utcnow, frozen=True)
    title: str
    description: str = ""
    due_at: Optional[datetime] = None
    status: TaskStatus = TaskStatus.pending
    priority: TaskPriority = TaskPriority.low

    @classmethod
    def create(
        cls,
        title: str,
        description: Optional[str] = None,
        due_at: Optional[datetime] = None,
        priority: Optional[TaskPriority] = None,
    ) -> Task:
        return cls(
            title=title,
            description=description,
            due_at=due_at,
            priority=priority if priority is not None else TaskPriority.low,
        )

    @field_validator("title")
    @classmethod
    def _title_not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("title must not be empty")
        return value

    @field_validator("description", mode="before")
    @classmethod
    def _description_or_empty(cls, value):
        return "" if value is None else value

    @field_validator("created_at")
    @classmethod
    def _created_at_aware(cls, value: datetime) -> datetime:
        return _aware(value)

    @field_validator("due_at")
    @classmethod
    def _due_not_before_creation(cls, value: Optional[datetime], info: ValidationInfo) -> Optional[datetime]:
        if value is None:
            return None
        value = _aware(value)
        created_at = info.data.get("created_at")
        if created_at is not None and value < created_at:
            raise ValueError("due_at must not be earlier than created_at")
        return value

    def is_overdue(self, now: Optional[datetime] = None) -> bool:
        if self.due_at is None:
            return False
        return self.due_at < (_aware(now) if now is not None else utcnow())

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Task):
            return NotImplemented
        return self.id == other.id

    def __hash__(self) -> int:
        return hash(self.id)

    def __str__(self) -> str:
        due = self.due_at.isoformat(sep=" ", timespec="minutes") if self.due_at else "-"
        return (
            f"Task(id={self.id}, title={self.title!r}, status={self.status.name.upper()}, "
            f"priority={self.priority.name.upper()}, due={due})"
        )
