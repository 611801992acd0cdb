# src/daily_tasks/tasks/task_models.py

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import StrEnum
from typing import Any


class TaskType(StrEnum):
    BACKEND = "backend"
    FRONTEND = "frontend"
    DEPLOYMENT = "deployment"
    MEETING = "meeting"
    REVIEW = "review"
    BUG = "bug"
    FEATURE = "feature"
    DOCUMENTATION = "documentation"
    TESTING = "testing"

    @classmethod
    def is_known(cls, raw: str | None) -> bool:
        return raw in {t.value for t in cls}


class TaskStatus(StrEnum):
    """
    Task lifecycle status.

    Values match the persisted JSON ("in-progress" keeps its hyphen).
    """

    PENDING = "pending"
    IN_PROGRESS = "in-progress"
    PAUSED = "paused"
    COMPLETED = "completed"
    BLOCKED = "blocked"

    @classmethod
    def parse(cls, raw: str | None) -> TaskStatus | None:
        if not raw:
            return None
        try:
            return cls(raw.strip())
        except ValueError:
            return None


TASK_KEYS = ("id", "title", "type", "status", "priority", "timeSpent", "lastActive", "description")
SNAPSHOT_KEYS = (
    "date",
    "tasks",
    "currentTask",
    "totalTimeToday",
    "tasksCompleted",
    "tasksInProgress",
    "tasksPending",
)


def utc_timestamp(now: datetime | None = None) -> str:
    """ISO-8601 UTC with milliseconds and a trailing Z, e.g. 2024-05-01T09:30:00.000Z."""
    now = now or datetime.now(timezone.utc)
    return now.astimezone(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")


def utc_date(now: datetime | None = None) -> str:
    return utc_timestamp(now).split("T")[0]


def _int_or(raw: Any, default: int) -> int:
    try:
        return int(raw)
    except (TypeError, ValueError):
        return default


@dataclass(slots=True)
class Task:
    id: int | str
    title: str
    type: str = TaskType.BACKEND.value
    status: str = TaskStatus.PENDING.value
    priority: str = "medium"
    time_spent: str = "0m"
    last_active: str = ""
    description: str = ""

    # Keys found in the file that this model does not know about.
    extra: dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {
            "id": self.id,
            "title": self.title,
            "type": self.type,
            "status": self.status,
            "priority": self.priority,
            "timeSpent": self.time_spent,
            "lastActive": self.last_active,
            "description": self.description,
        }
        for key, value in self.extra.items():
            data.setdefault(key, value)
        return data

    @classmethod
    def from_dict(cls, raw: dict[str, Any]) -> Task:
        return cls(
            id=raw.get("id", 0),
            title=str(raw.get("title") or ""),
            type=str(raw.get("type") or TaskType.BACKEND.value),
            status=str(raw.get("status") or TaskStatus.PENDING.value),
            priority=str(raw.get("priority") or ""),
            time_spent=str(raw.get("timeSpent") or "0m"),
            last_active=str(raw.get("lastActive") or ""),
            description=str(raw.get("description") or ""),
            extra={k: v for k, v in raw.items() if k not in TASK_KEYS},
        )


@dataclass(slots=True)
class DailySnapshot:
    """
    Everything persisted for one day of use.

    The counters and total_time_today are derived from `tasks`; they are only
    ever written by recompute_aggregates().
    """

    date: str
    tasks: list[Task] = field(default_factory=list)
    current_task: int | str | None = None
    total_time_today: str = "0m"
    tasks_completed: int = 0
    tasks_in_progress: int = 0
    tasks_pending: int = 0

    extra: dict[str, Any] = field(default_factory=dict)

    @classmethod
    def empty(cls, now: datetime | None = None) -> DailySnapshot:
        return cls(date=utc_date(now))

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {
            "date": self.date,
            "tasks": [t.to_dict() for t in self.tasks],
            "currentTask": self.current_task,
            "totalTimeToday": self.total_time_today,
            "tasksCompleted": self.tasks_completed,
            "tasksInProgress": self.tasks_in_progress,
            "tasksPending": self.tasks_pending,
        }
        for key, value in self.extra.items():
            data.setdefault(key, value)
        return data

    @classmethod
    def from_dict(cls, raw: dict[str, Any]) -> DailySnapshot:
        raw_tasks = raw.get("tasks")
        tasks = [Task.from_dict(t) for t in raw_tasks if isinstance(t, dict)] if isinstance(raw_tasks, list) else []
        return cls(
            date=str(raw.get("date") or utc_date()),
            tasks=tasks,
            current_task=raw.get("currentTask"),
            total_time_today=str(raw.get("totalTimeToday") or "0m"),
            tasks_completed=_int_or(raw.get("tasksCompleted"), 0),
            tasks_in_progress=_int_or(raw.get("tasksInProgress"), 0),
            tasks_pending=_int_or(raw.get("tasksPending"), 0),
            extra={k: v for k, v in raw.items() if k not in SNAPSHOT_KEYS},
        )
