# src/daily_tasks/cli/render.py

from __future__ import annotations

from ..tasks.task_models import DailySnapshot, Task, TaskStatus, TaskType
from ..tasks.task_store import normalize_task_id

TYPE_LABELS: dict[str, str] = {
    TaskType.BACKEND: "🔧",
    TaskType.FRONTEND: "🎨",
    TaskType.DEPLOYMENT: "🚀",
    TaskType.MEETING: "👥",
    TaskType.REVIEW: "👀",
    TaskType.BUG: "🐛",
    TaskType.FEATURE: "✨",
    TaskType.DOCUMENTATION: "📝",
    TaskType.TESTING: "🧪",
}

STATUS_LABELS: dict[str, str] = {
    TaskStatus.PENDING: "⏳",
    TaskStatus.IN_PROGRESS: "🔄",
    TaskStatus.PAUSED: "⏸️",
    TaskStatus.COMPLETED: "✅",
    TaskStatus.BLOCKED: "🚫",
}

PRIORITIES = ("low", "medium", "high")


def _labelled(label: str | None, value: str) -> str:
    return f"{label} {value}" if label else value


def type_label(task_type: str) -> str:
    return _labelled(TYPE_LABELS.get(task_type), task_type)


def status_label(status: str) -> str:
    return _labelled(STATUS_LABELS.get(status), status)


def is_current(snapshot: DailySnapshot, task: Task) -> bool:
    if snapshot.current_task is None:
        return False
    return normalize_task_id(snapshot.current_task) == normalize_task_id(task.id)


def format_added(task: Task) -> str:
    return "\n".join(
        [
            f"✅ Task added: {task.title}",
            f"   Id: {task.id}",
            f"   Type: {type_label(task.type)}",
            f"   Priority: {task.priority}",
        ]
    )


def format_status_change(task: Task) -> str:
    return f"✅ Task updated: {task.title}\n   Status: {status_label(task.status)}"


def format_time_change(task: Task) -> str:
    return f"✅ Time updated for: {task.title}\n   Time spent: {task.time_spent}"


def format_task(snapshot: DailySnapshot, task: Task) -> str:
    marker = " 👆 CURRENT" if is_current(snapshot, task) else ""
    lines = [
        f"{task.id}: {task.title}{marker}",
        f"   {type_label(task.type)} | {status_label(task.status)} | ⏱️ {task.time_spent}",
    ]
    if task.description:
        lines.append(f"   📝 {task.description}")
    return "\n".join(lines)


def format_listing(snapshot: DailySnapshot, tasks: list[Task]) -> str:
    out = [
        f"📋 Daily Tasks ({snapshot.date})",
        f"📊 Stats: {snapshot.tasks_completed} completed, "
        f"{snapshot.tasks_in_progress} in-progress, {snapshot.tasks_pending} pending",
        f"⏰ Total time: {snapshot.total_time_today}",
    ]
    if not tasks:
        out.append("")
        out.append("(no tasks)")
    for task in tasks:
        out.append("")
        out.append(format_task(snapshot, task))
    return "\n".join(out)
