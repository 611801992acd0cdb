# src/daily_tasks/logging_setup.py

from __future__ import annotations

import logging
import sys
from pathlib import Path

LOG_FILE_NAME = "daily-tasks.log"


class _AppOnlyFilter(logging.Filter):
    """Console shows daily_tasks records; other loggers (py.warnings included) only at ERROR+."""

    def filter(self, record: logging.LogRecord) -> bool:
        name = record.name
        if name == "daily_tasks" or name.startswith("daily_tasks."):
            return True
        return record.levelno >= logging.ERROR


def setup_logging(
    *,
    log_dir: str | Path = ".local/daily-tasks",
    console_level: int = logging.WARNING,
    file_level: int = logging.DEBUG,
    log_to_file: bool = True,
) -> None:
    """
    Route logs away from stdout, which carries command output:
    - stderr gets app records at console_level
    - <log_dir>/daily-tasks.log gets everything at file_level, unless log_to_file is off

    Each CLI run calls this once; earlier root handlers are replaced.
    """
    root = logging.getLogger()
    root.setLevel(logging.DEBUG)
    for h in list(root.handlers):
        root.removeHandler(h)

    fmt = logging.Formatter(
        fmt="%(asctime)s %(levelname)s %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    console = logging.StreamHandler(sys.stderr)
    console.setLevel(console_level)
    console.setFormatter(fmt)
    console.addFilter(_AppOnlyFilter())
    root.addHandler(console)

    if log_to_file:
        log_dir = Path(log_dir)
        try:
            log_dir.mkdir(parents=True, exist_ok=True)
            file_handler = logging.FileHandler(str(log_dir / LOG_FILE_NAME), encoding="utf-8")
        except OSError:
            logging.getLogger(__name__).warning("Cannot open log file in %s; file logging disabled.", log_dir)
        else:
            file_handler.setLevel(file_level)
            file_handler.setFormatter(fmt)
            root.addHandler(file_handler)

    logging.captureWarnings(True)
