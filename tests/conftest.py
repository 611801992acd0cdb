# tests/conftest.py

from __future__ import annotations

from pathlib import Path
from types import SimpleNamespace

import pytest

from daily_tasks.core.state import AppState
from daily_tasks.tasks.task_models import DailySnapshot, Task
from daily_tasks.tasks.task_store import TaskStore


@pytest.fixture()
def settings(tmp_path: Path) -> SimpleNamespace:
    """
    Minimal settings object compatible with AppState and the CLI.

    We intentionally use a SimpleNamespace rather than importing real config,
    to keep unit tests isolated from the developer's environment.
    """
    return SimpleNamespace(
        app_name="daily-tasks-test",
        log_level="WARNING",
        log_to_file=False,
        data_dir=tmp_path / "data",
        tasks_path=tmp_path / "daily-tasks.json",
        history_path=tmp_path / "pomo-history.json",
        default_type="backend",
        default_priority="medium",
    )


@pytest.fixture()
def store(settings: SimpleNamespace) -> TaskStore:
    return TaskStore(settings.tasks_path)


@pytest.fixture()
def state(settings: SimpleNamespace, store: TaskStore) -> AppState:
    """AppState wired with a real TaskStore writing under tmp_path."""
    return AppState(settings=settings, store=store)


@pytest.fixture()
def snapshot() -> DailySnapshot:
    """Three tasks with explicit, distinct ids."""
    return DailySnapshot(
        date="2024-05-01",
        tasks=[
            Task(id=101, title="Fix login bug", type="bug", priority="high"),
            Task(id=102, title="Write release notes", type="documentation", priority="low"),
            Task(id=103, title="Sprint review", type="meeting"),
        ],
    )
