# src/daily_tasks/tasks/task_store.py

from __future__ import annotations

import contextlib
import json
import logging
import os
import time
from datetime import datetime
from pathlib import Path

from .durations import sum_durations
from .errors import StorageReadError, StorageWriteError, ValidationError
from .task_models import DailySnapshot, Task, TaskStatus, TaskType, utc_timestamp

logger = logging.getLogger(__name__)


class TaskStore:
    """
    JSON snapshot store for today's tasks.

    - one file, rewritten whole on every save (tmp file + os.replace)
    - a missing or broken file never blocks the caller: load() falls back to an empty snapshot
    """

    def __init__(self, path: str | Path = "daily-tasks.json") -> None:
        self._path = Path(path)

    @property
    def path(self) -> Path:
        return self._path

    # ---- low-level helpers ----

    def _read_raw(self) -> dict:
        try:
            text = self._path.read_text("utf-8")
        except (OSError, UnicodeDecodeError) as e:
            raise StorageReadError(f"cannot read {self._path}: {e}") from e
        try:
            data = json.loads(text)
        except ValueError as e:
            raise StorageReadError(f"invalid JSON in {self._path}: {e}") from e
        if not isinstance(data, dict):
            raise StorageReadError(f"{self._path} does not hold a JSON object")
        return data

    # ---- public API ----

    def load(self) -> DailySnapshot:
        if not self._path.exists():
            logger.debug("No snapshot at %s, starting empty.", self._path)
            return DailySnapshot.empty()
        try:
            snapshot = DailySnapshot.from_dict(self._read_raw())
        except StorageReadError as e:
            logger.warning("Error loading tasks (%s); starting with an empty snapshot.", e)
            return DailySnapshot.empty()
        logger.debug("Loaded snapshot date=%s tasks=%d from %s", snapshot.date, len(snapshot.tasks), self._path)
        return snapshot

    def save(self, snapshot: DailySnapshot) -> None:
        payload = json.dumps(snapshot.to_dict(), ensure_ascii=False, indent=2)
        tmp = self._path.with_name(self._path.name + ".tmp")
        try:
            self._path.parent.mkdir(parents=True, exist_ok=True)
            tmp.write_text(payload, "utf-8")
            os.replace(tmp, self._path)
        except OSError as e:
            with contextlib.suppress(OSError):
                tmp.unlink(missing_ok=True)
            logger.exception("Error saving tasks to %s", self._path)
            raise StorageWriteError(f"cannot write {self._path}: {e}") from e
        logger.info("Tasks saved: %d tasks to %s", len(snapshot.tasks), self._path)


def recompute_aggregates(snapshot: DailySnapshot) -> DailySnapshot:
    """Rebuild the counters and total time from snapshot.tasks (never patched incrementally)."""
    statuses = [t.status for t in snapshot.tasks]
    snapshot.tasks_completed = statuses.count(TaskStatus.COMPLETED)
    snapshot.tasks_in_progress = statuses.count(TaskStatus.IN_PROGRESS)
    snapshot.tasks_pending = statuses.count(TaskStatus.PENDING)
    snapshot.total_time_today = sum_durations(t.time_spent for t in snapshot.tasks)
    return snapshot


def new_task_id() -> int:
    return int(time.time() * 1000)


def add_task(
    snapshot: DailySnapshot,
    title: str,
    task_type: str | None = None,
    priority: str | None = None,
    description: str | None = None,
    *,
    task_id: int | None = None,
    now: datetime | None = None,
) -> Task:
    if not title or not title.strip():
        raise ValidationError("Please provide a task title")

    task_type = task_type or TaskType.BACKEND.value
    if not TaskType.is_known(task_type):
        logger.debug("Unknown task type %r stored verbatim.", task_type)

    task = Task(
        id=new_task_id() if task_id is None else task_id,
        title=title,
        type=task_type,
        status=TaskStatus.PENDING.value,
        priority=priority or "medium",
        time_spent="0m",
        last_active=utc_timestamp(now),
        description=description or "",
    )
    snapshot.tasks.append(task)
    recompute_aggregates(snapshot)
    logger.debug("Task added id=%s type=%s priority=%s", task.id, task.type, task.priority)
    return task


def normalize_task_id(raw: object) -> int | str:
    """Ids typed on the command line arrive as text; stored ids are ints."""
    if isinstance(raw, bool):
        return str(raw)
    if isinstance(raw, int):
        return raw
    text = str(raw).strip()
    try:
        return int(text)
    except ValueError:
        return text


def find_task(snapshot: DailySnapshot, task_id: object) -> Task | None:
    wanted = normalize_task_id(task_id)
    for task in snapshot.tasks:
        if normalize_task_id(task.id) == wanted:
            return task
    return None


def list_tasks(snapshot: DailySnapshot, status_filter: str | None = None) -> list[Task]:
    if not status_filter:
        return list(snapshot.tasks)
    return [t for t in snapshot.tasks if t.status == status_filter]
