# src/daily_tasks/cli/main.py

"""
CLI entrypoint.

Initializes logging, builds AppState, then runs exactly one command:
load snapshot -> mutate -> recompute -> save.
"""

from __future__ import annotations

import logging
import sys

from ..cli.bootstrap import create_initial_state
from ..cli.commands import registry as command_registry
from ..config import get_settings
from ..logging_setup import setup_logging
from ..tasks.errors import TaskError

logger = logging.getLogger(__name__)


def main(argv: list[str] | None = None, *, settings=None) -> int:
    if argv is None:
        argv = sys.argv[1:]
    if settings is None:
        settings = get_settings()

    level_name = str(getattr(settings, "log_level", "WARNING")).upper()
    console_level = getattr(logging, level_name, logging.WARNING)
    setup_logging(
        log_dir=getattr(settings, "data_dir", ".local/daily-tasks"),
        console_level=console_level,
        log_to_file=bool(getattr(settings, "log_to_file", True)),
    )

    logger.debug("Starting %s argv=%s", getattr(settings, "app_name", "daily-tasks"), argv)

    state = create_initial_state(settings=settings)

    try:
        reply = command_registry.handle(state, argv)
    except TaskError as e:
        logger.info("Command failed: %s", e)
        print(f"❌ Error: {e}", file=sys.stderr)
        return 1

    print(reply)
    return 0


def run() -> None:
    sys.exit(main())


if __name__ == "__main__":
    run()
