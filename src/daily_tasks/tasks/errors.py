# src/daily_tasks/tasks/errors.py

from __future__ import annotations


class TaskError(Exception):
    """Base class for every failure the task core reports to its callers."""


class StorageReadError(TaskError):
    """Snapshot file exists but cannot be read or parsed. Recovered inside TaskStore.load()."""


class StorageWriteError(TaskError):
    """Snapshot could not be persisted. The in-memory snapshot is still valid."""


class ValidationError(TaskError):
    pass


class NotFoundError(TaskError):
    def __init__(self, task_id: object) -> None:
        super().__init__(f"Task not found: {task_id}")
        self.task_id = task_id
