from __future__ import annotations

import logging

import pytest

from task_tracker.infra.task_repo_memory import TaskManager
from task_tracker.services.task_service import TaskService


@pytest.fixture()
def manager() -> TaskManager:
    return TaskManager()


@pytest.fixture()
def service(manager: TaskManager) -> TaskService:
    return TaskService(manager)


@pytest.fixture()
def restore_root_logger():
    """setup_logging() replaces root handlers; put pytest's back afterwards."""
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield root
    for handler in root.handlers:
        if handler not in handlers:
            handler.close()
    root.handlers[:] = handlers
    root.setLevel(level)
