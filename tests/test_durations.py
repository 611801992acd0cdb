# tests/test_durations.py

from __future__ import annotations

import pytest

from daily_tasks.tasks.durations import format_minutes, parse_minutes, sum_durations


@pytest.mark.parametrize(
    ("text", "minutes"),
    [
        ("1h 30m", 90),
        ("45m", 45),
        ("0m", 0),
        ("garbage", 0),
        ("2h", 0),
        ("1h30m", 90),
        ("2h   5m", 125),
        ("9" * 5000 + "m", 0),
        ("1h " + "9" * 5000 + "m", 0),
        ("", 0),
        (None, 0),
    ],
)
def test_parse_minutes(text, minutes) -> None:
    assert parse_minutes(text) == minutes


def test_parse_minutes_uses_first_match_anywhere() -> None:
    assert parse_minutes("about 20m or so") == 20
    assert parse_minutes("5h 3x 20m") == 20


def test_format_minutes() -> None:
    assert format_minutes(0) == "0m"
    assert format_minutes(59) == "59m"
    assert format_minutes(60) == "1h 0m"
    assert format_minutes(125) == "2h 5m"


def test_sum_durations_skips_malformed() -> None:
    assert sum_durations(["1h 15m", "50m"]) == "2h 5m"
    assert sum_durations(["oops", "2h", "10m"]) == "10m"
