# tests/test_config.py

from __future__ import annotations

from pathlib import Path

from daily_tasks.config import Settings


def test_settings_defaults(monkeypatch) -> None:
    for name in (
        "DAILY_TASKS_LOG_LEVEL",
        "DAILY_TASKS_TASKS_FILE",
        "DAILY_TASKS_HISTORY_FILE",
        "DAILY_TASKS_DATA_DIR",
        "DAILY_TASKS_LOG_TO_FILE",
        "DAILY_TASKS_DEFAULT_TYPE",
        "DAILY_TASKS_DEFAULT_PRIORITY",
    ):
        monkeypatch.delenv(name, raising=False)

    s = Settings.from_env()
    assert s.log_level == "WARNING"
    assert s.tasks_path == Path("daily-tasks.json")
    assert s.history_path == Path("pomo-history.json")
    assert s.log_to_file is True
    assert s.default_type == "backend"
    assert s.default_priority == "medium"


def test_settings_from_env(monkeypatch, tmp_path: Path) -> None:
    monkeypatch.setenv("DAILY_TASKS_TASKS_FILE", str(tmp_path / "today.json"))
    monkeypatch.setenv("DAILY_TASKS_LOG_LEVEL", "debug")
    monkeypatch.setenv("DAILY_TASKS_LOG_TO_FILE", "off")
    monkeypatch.setenv("DAILY_TASKS_DEFAULT_PRIORITY", "high")

    s = Settings.from_env()
    assert s.tasks_path == tmp_path / "today.json"
    assert s.log_level == "DEBUG"
    assert s.log_to_file is False
    assert s.default_priority == "high"


def test_malformed_bool_falls_back_to_default(monkeypatch) -> None:
    monkeypatch.setenv("DAILY_TASKS_LOG_TO_FILE", "maybe")
    assert Settings.from_env().log_to_file is True
