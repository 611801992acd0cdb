# src/daily_tasks/tasks/state_machine.py

"""
Status changes for a single task and their effect on the current-task pointer.

TRANSITIONS documents the expected lifecycle. It is not enforced: any known
status can be set from any status. Callers go through set_status() so the
rule can be tightened here without touching them.
"""

from __future__ import annotations

import logging
from datetime import datetime

from .errors import NotFoundError, ValidationError
from .task_models import DailySnapshot, Task, TaskStatus, utc_timestamp
from .task_store import find_task, normalize_task_id, recompute_aggregates

logger = logging.getLogger(__name__)

TRANSITIONS: dict[TaskStatus, frozenset[TaskStatus]] = {
    TaskStatus.PENDING: frozenset({TaskStatus.IN_PROGRESS, TaskStatus.BLOCKED}),
    TaskStatus.IN_PROGRESS: frozenset(
        {TaskStatus.PAUSED, TaskStatus.COMPLETED, TaskStatus.BLOCKED, TaskStatus.PENDING}
    ),
    TaskStatus.PAUSED: frozenset({TaskStatus.IN_PROGRESS, TaskStatus.COMPLETED, TaskStatus.PENDING}),
    TaskStatus.BLOCKED: frozenset({TaskStatus.PENDING, TaskStatus.IN_PROGRESS}),
    TaskStatus.COMPLETED: frozenset(),
}


def is_documented_transition(old: str, new: str) -> bool:
    old_status = TaskStatus.parse(old)
    new_status = TaskStatus.parse(new)
    if old_status is None or new_status is None:
        return False
    return new_status in TRANSITIONS[old_status]


def _require_task(snapshot: DailySnapshot, task_id: object) -> Task:
    task = find_task(snapshot, task_id)
    if task is None:
        raise NotFoundError(task_id)
    return task


def set_status(
    snapshot: DailySnapshot,
    task_id: object,
    new_status: str,
    *,
    now: datetime | None = None,
) -> Task:
    status = TaskStatus.parse(new_status)
    if status is None:
        raise ValidationError(f"Unknown status: {new_status}")
    task = _require_task(snapshot, task_id)

    if task.status != status and not is_documented_transition(task.status, status):
        logger.debug("Task %s: unusual transition %s -> %s", task.id, task.status, status)

    task.status = status.value
    task.last_active = utc_timestamp(now)

    if status is TaskStatus.IN_PROGRESS:
        # A previously current task keeps its status; only the pointer moves.
        snapshot.current_task = task.id
    elif snapshot.current_task is not None and (
        normalize_task_id(snapshot.current_task) == normalize_task_id(task.id)
    ):
        snapshot.current_task = None

    recompute_aggregates(snapshot)
    logger.debug("Task %s status=%s current=%s", task.id, task.status, snapshot.current_task)
    return task


def start_task(snapshot: DailySnapshot, task_id: object, *, now: datetime | None = None) -> Task:
    return set_status(snapshot, task_id, TaskStatus.IN_PROGRESS, now=now)


def pause_task(snapshot: DailySnapshot, task_id: object, *, now: datetime | None = None) -> Task:
    return set_status(snapshot, task_id, TaskStatus.PAUSED, now=now)


def complete_task(snapshot: DailySnapshot, task_id: object, *, now: datetime | None = None) -> Task:
    return set_status(snapshot, task_id, TaskStatus.COMPLETED, now=now)


def set_time_spent(
    snapshot: DailySnapshot,
    task_id: object,
    duration_text: str,
    *,
    now: datetime | None = None,
) -> Task:
    task = _require_task(snapshot, task_id)
    # Stored verbatim; malformed text only shows up as zero in the totals.
    task.time_spent = duration_text
    task.last_active = utc_timestamp(now)
    recompute_aggregates(snapshot)
    logger.debug("Task %s time_spent=%r total=%s", task.id, duration_text, snapshot.total_time_today)
    return task
