# src/daily_tasks/tasks/task_api.py

from __future__ import annotations

import logging

from ..core.ports import SnapshotRepo
from . import state_machine
from .task_models import DailySnapshot, Task
from .task_store import add_task, list_tasks

logger = logging.getLogger(__name__)


def add(
    repo: SnapshotRepo,
    title: str,
    task_type: str | None = None,
    priority: str | None = None,
    description: str | None = None,
) -> Task:
    """
    Create a pending task and persist the snapshot.
    An empty title raises ValidationError before anything is written.
    """
    snapshot = repo.load()
    task = add_task(snapshot, title, task_type, priority, description)
    repo.save(snapshot)
    logger.info("Task added id=%s title=%r", task.id, task.title)
    return task


def _change_status(repo: SnapshotRepo, task_id: object, status: str) -> Task:
    snapshot = repo.load()
    task = state_machine.set_status(snapshot, task_id, status)
    repo.save(snapshot)
    logger.info("Task updated id=%s status=%s", task.id, task.status)
    return task


def start(repo: SnapshotRepo, task_id: object) -> Task:
    return _change_status(repo, task_id, "in-progress")


def pause(repo: SnapshotRepo, task_id: object) -> Task:
    return _change_status(repo, task_id, "paused")


def complete(repo: SnapshotRepo, task_id: object) -> Task:
    return _change_status(repo, task_id, "completed")


def update_time(repo: SnapshotRepo, task_id: object, duration_text: str) -> Task:
    snapshot = repo.load()
    task = state_machine.set_time_spent(snapshot, task_id, duration_text)
    repo.save(snapshot)
    logger.info("Time updated id=%s time_spent=%r", task.id, task.time_spent)
    return task


def list_snapshot(
    repo: SnapshotRepo, status_filter: str | None = None
) -> tuple[DailySnapshot, list[Task]]:
    """Read-only: nothing is saved."""
    snapshot = repo.load()
    return snapshot, list_tasks(snapshot, status_filter)
