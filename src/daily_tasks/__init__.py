"""Personal daily-task tracker: tasks, statuses and time spent for today, kept in a JSON snapshot."""

__version__ = "0.1.0"
