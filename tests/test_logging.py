from __future__ import annotations

import json
import logging
import sys
from pathlib import Path

import pytest

from task_tracker.config import Settings
from task_tracker.observability.logging import LOG_FILE_NAME, JsonFormatter, setup_logging


def test_json_formatter_includes_extras() -> None:
    record = logging.LogRecord("tracker.tasks", logging.INFO, __file__, 1, "task.create", None, None)
    record.category = "tasks"
    record.task_id = "abc"

    payload = json.loads(JsonFormatter().format(record))

    assert payload["level"] == "INFO"
    assert payload["logger"] == "tracker.tasks"
    assert payload["msg"] == "task.create"
    assert payload["category"] == "tasks"
    assert payload["task_id"] == "abc"
    assert "lineno" not in payload
    assert payload["ts"].endswith("Z")


def test_json_formatter_includes_exception() -> None:
    try:
        raise RuntimeError("boom")
    except RuntimeError:
        record = logging.LogRecord("x", logging.ERROR, __file__, 1, "failed", None, sys.exc_info())

    payload = json.loads(JsonFormatter().format(record))
    assert "RuntimeError: boom" in payload["exc"]


def test_setup_logging_writes_json_lines(tmp_path: Path, restore_root_logger) -> None:
    setup_logging(Settings(log_dir=tmp_path / "logs", log_level="DEBUG"))

    root = restore_root_logger
    assert len(root.handlers) == 1
    assert root.level == logging.DEBUG

    logging.getLogger("tracker.system").info(
        "system.start", extra={"category": "system", "event": "system.start"}
    )
    for handler in root.handlers:
        handler.flush()

    lines = (tmp_path / "logs" / LOG_FILE_NAME).read_text(encoding="utf-8").splitlines()
    entry = json.loads(lines[-1])
    assert entry["event"] == "system.start"
    assert entry["logger"] == "tracker.system"


def test_setup_logging_console_handler(tmp_path: Path, restore_root_logger) -> None:
    setup_logging(Settings(log_dir=tmp_path, log_console=True))
    setup_logging(Settings(log_dir=tmp_path, log_console=True))

    kinds = sorted(type(h).__name__ for h in restore_root_logger.handlers)
    assert kinds == ["RotatingFileHandler", "StreamHandler"]
