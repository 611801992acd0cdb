# tests/test_logging_setup.py

from __future__ import annotations

import logging
from pathlib import Path

import pytest

from daily_tasks.logging_setup import LOG_FILE_NAME, setup_logging


@pytest.fixture(autouse=True)
def restore_root_logging():
    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level
    yield
    for h in list(root.handlers):
        if h not in handlers:
            root.removeHandler(h)
            h.close()
    for h in handlers:
        if h not in root.handlers:
            root.addHandler(h)
    root.setLevel(level)
    logging.captureWarnings(False)


def test_console_shows_app_records_only(capsys) -> None:
    setup_logging(console_level=logging.INFO, log_to_file=False)

    logging.getLogger("daily_tasks.tasks").info("app message")
    logging.getLogger("somelib").warning("library chatter")
    logging.getLogger("somelib").error("library failure")

    err = capsys.readouterr().err
    assert "app message" in err
    assert "library chatter" not in err
    assert "library failure" in err


def test_file_handler_writes_debug_records(tmp_path: Path) -> None:
    setup_logging(log_dir=tmp_path / "logs", console_level=logging.ERROR)

    logging.getLogger("daily_tasks.cli").debug("written to file")
    for h in logging.getLogger().handlers:
        h.flush()

    assert "written to file" in (tmp_path / "logs" / LOG_FILE_NAME).read_text("utf-8")


def test_no_log_file_when_disabled(tmp_path: Path) -> None:
    setup_logging(log_dir=tmp_path / "logs", log_to_file=False)
    assert not (tmp_path / "logs").exists()
