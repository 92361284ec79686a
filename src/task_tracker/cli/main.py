import logging

from task_tracker.cli.menu import ConsoleMenu
from task_tracker.config import load_settings
from task_tracker.infra.task_repo_memory import TaskManager
from task_tracker.observability.logging import setup_logging
from task_tracker.services.task_service import TaskService

logger = logging.getLogger("tracker.system")


def main() -> int:
    settings = load_settings()
    setup_logging(settings)
    logger.info(
        "system.start",
        extra={"category": "system", "event": "system.start", "log_dir": str(settings.log_dir)},
    )

    manager = TaskManager()
    svc = TaskService(manager)
    ConsoleMenu(svc).run()

    logger.info(
        "system.stop",
        extra={"category": "system", "event": "system.stop", "tasks": len(manager)},
    )
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
