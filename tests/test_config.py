from __future__ import annotations

from pathlib import Path

import pytest
from pydantic import ValidationError

from task_tracker.config import load_settings


def test_defaults() -> None:
    settings = load_settings({})
    assert settings.log_level == "INFO"
    assert settings.log_dir == Path("./logs")
    assert settings.log_console is False


def test_reads_environment(tmp_path: Path) -> None:
    settings = load_settings(
        {"LOG_LEVEL": "debug", "LOG_DIR": str(tmp_path), "LOG_CONSOLE": "yes"}
    )
    assert settings.log_level == "DEBUG"
    assert settings.log_dir == tmp_path
    assert settings.log_console is True


def test_unknown_level_is_rejected() -> None:
    with pytest.raises(ValidationError):
        load_settings({"LOG_LEVEL": "chatty"})
