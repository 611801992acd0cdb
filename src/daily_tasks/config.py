# src/daily_tasks/config.py

"""Centralized settings loaded from environment variables (+ optional .env).

Design goals:
- One Settings object for the whole app.
- Every value has a default, so a bare `daily-tasks list` works in any directory.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

ENV_PREFIX = "DAILY_TASKS"

TASKS_FILE = "daily-tasks.json"
# Reserved for pomodoro session history; nothing reads or writes it yet.
HISTORY_FILE = "pomo-history.json"


def _k(suffix: str) -> str:
    """Build env var name with the project prefix."""
    return f"{ENV_PREFIX}_{suffix}"


load_dotenv(override=False)


def _env(name: str, default: str = "") -> str:
    v = os.getenv(name)
    return default if v is None else v


def _env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    value = raw.strip().lower()
    if value in {"1", "true", "yes", "y", "on"}:
        return True
    if value in {"0", "false", "no", "n", "off"}:
        return False
    return default


def _env_path(name: str, default: Path) -> Path:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    return Path(raw).expanduser()


@dataclass(frozen=True, slots=True)
class Settings:
    # ---- App / logging ----
    app_name: str
    log_level: str
    log_to_file: bool

    # ---- Local data paths ----
    data_dir: Path
    tasks_path: Path
    history_path: Path

    # ---- Defaults for `add` ----
    default_type: str
    default_priority: str

    @staticmethod
    def from_env() -> "Settings":
        app_name = _env(_k("APP_NAME"), "daily-tasks").strip() or "daily-tasks"
        log_level = _env(_k("LOG_LEVEL"), "WARNING").strip().upper() or "WARNING"
        log_to_file = _env_bool(_k("LOG_TO_FILE"), True)

        data_dir = _env_path(_k("DATA_DIR"), Path(".local/daily-tasks"))
        # The snapshot lives in the working directory by default, next to the project it tracks.
        tasks_path = _env_path(_k("TASKS_FILE"), Path(TASKS_FILE))
        history_path = _env_path(_k("HISTORY_FILE"), Path(HISTORY_FILE))

        default_type = _env(_k("DEFAULT_TYPE"), "backend").strip() or "backend"
        default_priority = _env(_k("DEFAULT_PRIORITY"), "medium").strip() or "medium"

        return Settings(
            app_name=app_name,
            log_level=log_level,
            log_to_file=log_to_file,
            data_dir=data_dir,
            tasks_path=tasks_path,
            history_path=history_path,
            default_type=default_type,
            default_priority=default_priority,
        )


SETTINGS = Settings.from_env()


def get_settings() -> Settings:
    return SETTINGS
