# src/daily_tasks/tasks/durations.py

"""
Duration text used for per-task time spent.

Accepted forms are "<H>h <M>m" and "<M>m". The first match anywhere in the
text wins; text without a match counts as zero minutes. "2h" has no minutes
unit and therefore does not match.
"""

from __future__ import annotations

import re

DURATION_RE = re.compile(r"(\d+)\s*h\s*(\d+)\s*m|(\d+)\s*m")


def parse_minutes(text: str | None) -> int:
    if not text:
        return 0
    m = DURATION_RE.search(text)
    if not m:
        return 0
    try:
        hours = int(m.group(1) or 0)
        minutes = int(m.group(2) or m.group(3) or 0)
    except ValueError:
        # Digit runs past the interpreter's int conversion limit.
        return 0
    return hours * 60 + minutes


def format_minutes(total: int) -> str:
    hours, mins = divmod(max(0, int(total)), 60)
    return f"{hours}h {mins}m" if hours > 0 else f"{mins}m"


def sum_durations(texts) -> str:
    return format_minutes(sum(parse_minutes(t) for t in texts))
