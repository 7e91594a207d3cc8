# src/todo_sync/cli/main.py

"""
CLI entrypoint.

Initializes logging, builds AppState, hydrates the todo list (cache first,
then the remote API), then runs the console UI inside the todo provider.
"""

from __future__ import annotations

import asyncio
import logging
import sys

from ..cli.bootstrap import create_initial_state
from ..config import get_settings
from ..connectors.console_connector import run_console_loop
from ..core.context import todo_provider
from ..core.todos import load_todos
from ..logging_setup import setup_logging
from ..ui.app_view import render_app

logger = logging.getLogger(__name__)


async def run(settings) -> int:
    state = create_initial_state(settings=settings)
    try:
        print(render_app(state))
        await load_todos(state)

        if state.phase == "error":
            print(render_app(state))
            return 1

        with todo_provider(state):
            await run_console_loop(state)
        return 0
    finally:
        try:
            await state.api.aclose()
        except Exception:
            logger.debug("API client close failed.", exc_info=True)


def main() -> None:
    settings = get_settings()

    level_name = str(getattr(settings, "log_level", "WARNING")).upper()
    console_level = getattr(logging, level_name, logging.WARNING)

    setup_logging(log_dir=settings.data_dir, console_level=console_level)

    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)

    logger.info("Starting %s...", settings.app_name)

    try:
        code = asyncio.run(run(settings))
    except KeyboardInterrupt:
        logger.info("Interrupted, shutting down...")
        code = 130

    logger.info("Bye.")
    sys.exit(code)


if __name__ == "__main__":
    main()
