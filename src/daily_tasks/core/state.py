# src/daily_tasks/core/state.py

from __future__ import annotations

from dataclasses import dataclass

from .ports import SnapshotRepo


@dataclass
class AppState:
    # Settings live on the state so command handlers read defaults from one place.
    settings: object

    store: SnapshotRepo
