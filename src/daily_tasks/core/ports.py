# src/daily_tasks/core/ports.py

from __future__ import annotations

"""
Ports (interfaces) used by the task API.

Command functions depend on this Protocol instead of TaskStore directly,
so tests can swap in an in-memory repo.
"""

from typing import Protocol

from ..tasks.task_models import DailySnapshot


class SnapshotRepo(Protocol):
    """Durable home of the DailySnapshot (TaskStore writes a JSON file)."""

    def load(self) -> DailySnapshot: ...

    def save(self, snapshot: DailySnapshot) -> None: ...
