from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Mapping, Optional

from pydantic import BaseModel, field_validator


class Settings(BaseModel):
    log_level: str = "INFO"
    log_dir: Path = Path("./logs")
    # JSON lines on stderr would interleave with the interactive menu
    log_console: bool = False

    @field_validator("log_level", mode="before")
    @classmethod
    def _known_level(cls, value: str) -> str:
        level = str(value).strip().upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"unknown log level: {value!r}")
        return level


def load_settings(env: Optional[Mapping[str, str]] = None) -> Settings:
    """
    Read settings from the environment:
      LOG_LEVEL    (default INFO)
      LOG_DIR      (default ./logs)
      LOG_CONSOLE  (default off; 1/true/yes/on enable it)
    """
    env = os.environ if env is None else env
    return Settings(
        log_level=env.get("LOG_LEVEL") or "INFO",
        log_dir=env.get("LOG_DIR") or "./logs",
        log_console=env.get("LOG_CONSOLE") or False,
    )
