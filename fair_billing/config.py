from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path

DEFAULT_LOG_FILE = "test.log"
DEFAULT_LOG_LEVEL = "WARNING"


@dataclass(frozen=True, slots=True)
class Config:
    log_file: Path
    log_level: int


def _optional_env(name: str, default: str) -> str:
    value = os.getenv(name, "").strip()
    return value or default


def _log_level_from_env(name: str) -> int:
    level_name = _optional_env(name, DEFAULT_LOG_LEVEL).upper()
    level = logging.getLevelName(level_name)
    if not isinstance(level, int):
        raise ValueError(f"Invalid log level in {name}: {level_name}")
    return level


def load_config() -> Config:
    return Config(
        log_file=Path(_optional_env("FAIR_BILLING_LOG_FILE", DEFAULT_LOG_FILE)),
        log_level=_log_level_from_env("FAIR_BILLING_LOG_LEVEL"),
    )
