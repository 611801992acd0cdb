# src/daily_tasks/cli/commands.py

from __future__ import annotations

import logging
from collections.abc import Callable

from ..core.state import AppState
from ..tasks import task_api
from ..tasks.errors import ValidationError
from ..tasks.task_models import TaskStatus, TaskType
from . import render

CommandHandler = Callable[[AppState, list[str]], str]

logger = logging.getLogger(__name__)


class CommandRegistry:
    """Command registry used by the CLI entrypoint (add, start, list, ...)."""

    def __init__(self) -> None:
        self._handlers: dict[str, CommandHandler] = {}
        self._help: dict[str, str] = {}

    def register(
        self,
        name: str,
        handler: CommandHandler,
        help_text: str,
        aliases: list[str] | None = None,
    ) -> None:
        aliases = aliases or []
        key = name.lower()
        self._handlers[key] = handler
        self._help[key] = help_text
        for alias in aliases:
            self._handlers[alias.lower()] = handler

    def handle(self, state: AppState, argv: list[str]) -> str:
        """
        Dispatch argv[0] to its handler with the remaining arguments.
        Empty argv or an unknown command returns the help text.
        TaskError subclasses raised by handlers propagate to the caller.
        """
        if not argv:
            return self.build_help()

        name = argv[0].lower()
        handler = self._handlers.get(name)
        if handler is None:
            logger.debug("Unknown command %r, showing help.", name)
            return self.build_help()

        logger.debug("Dispatching command %s args=%s", name, argv[1:])
        return handler(state, argv[1:])

    def build_help(self) -> str:
        lines = ["🍅 Task Manager Commands:", ""]
        for name, help_text in self._help.items():
            lines.append(f"  {name:<9} {help_text}")
        lines.append("")
        lines.append(f"📋 Task Types: {', '.join(t.value for t in TaskType)}")
        lines.append(f"🎯 Priorities: {', '.join(render.PRIORITIES)}")
        lines.append(f"📊 Statuses: {', '.join(s.value for s in TaskStatus)}")
        return "\n".join(lines)


registry = CommandRegistry()


def _require_task_id(args: list[str]) -> str:
    if not args or not args[0].strip():
        raise ValidationError("Please provide a task ID")
    return args[0]


def cmd_help(state: AppState, args: list[str]) -> str:
    return registry.build_help()


def cmd_add(state: AppState, args: list[str]) -> str:
    """
    add "Title" [type] [priority] [description words...]
    """
    if not args or not args[0].strip():
        raise ValidationError("Please provide a task title")

    settings = state.settings
    title = args[0]
    task_type = args[1] if len(args) > 1 and args[1] else getattr(settings, "default_type", "backend")
    priority = args[2] if len(args) > 2 and args[2] else getattr(settings, "default_priority", "medium")
    description = " ".join(args[3:])

    task = task_api.add(state.store, title, task_type, priority, description)
    return render.format_added(task)


def cmd_start(state: AppState, args: list[str]) -> str:
    task = task_api.start(state.store, _require_task_id(args))
    return render.format_status_change(task)


def cmd_pause(state: AppState, args: list[str]) -> str:
    task = task_api.pause(state.store, _require_task_id(args))
    return render.format_status_change(task)


def cmd_complete(state: AppState, args: list[str]) -> str:
    task = task_api.complete(state.store, _require_task_id(args))
    return render.format_status_change(task)


def cmd_time(state: AppState, args: list[str]) -> str:
    """
    time <task-id> <duration>   e.g. time 1712 "1h 30m"
    """
    if len(args) < 2 or not args[0].strip() or not args[1].strip():
        raise ValidationError('Please provide task ID and time (e.g., "1h 30m" or "45m")')
    # Unquoted `time 1712 1h 30m` arrives as separate words.
    duration = " ".join(args[1:])
    task = task_api.update_time(state.store, args[0], duration)
    return render.format_time_change(task)


def cmd_list(state: AppState, args: list[str]) -> str:
    status_filter = args[0] if args else None
    snapshot, tasks = task_api.list_snapshot(state.store, status_filter)
    return render.format_listing(snapshot, tasks)


registry.register("add", cmd_add, help_text='Add a task: add "Title" [type] [priority] [description]')
registry.register("start", cmd_start, help_text="Start working on a task: start <task-id>")
registry.register("pause", cmd_pause, help_text="Pause a task: pause <task-id>")
registry.register("complete", cmd_complete, help_text="Complete a task: complete <task-id>", aliases=["done"])
registry.register("time", cmd_time, help_text='Update time spent: time <task-id> "1h 30m"')
registry.register("list", cmd_list, help_text="Show tasks, optionally by status: list [status]", aliases=["ls"])
registry.register("help", cmd_help, help_text="Show available commands.", aliases=["h", "?"])
