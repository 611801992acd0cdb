"""
Task subsystem.

Components:
- task_models.py: data structures (Task, DailySnapshot, TaskStatus, TaskType)
- task_store.py: JSON snapshot storage, aggregates, add/find/list
- state_machine.py: status changes and the current-task pointer
- durations.py: "1h 30m" style duration parsing and formatting
- task_api.py: one load -> mutate -> save function per CLI command
"""
