# src/todo_sync/connectors/console_connector.py

from __future__ import annotations

import logging

from ..cli.commands import registry as command_registry
from ..core.state import AppState
from ..ui.app_view import render_app, render_todo_list
from ..ui.todo_form import TodoForm

logger = logging.getLogger(__name__)

PROMPT = "> "


def _read_line(prompt: str) -> str:
    # Blocks the loop; nothing else runs while waiting for the user.
    return input(prompt)


async def run_console_loop(state: AppState) -> None:
    """
    Interactive loop. Must run inside todo_provider(state).

    Plain text goes through the TodoForm (adds a todo); "/..." lines are commands.
    """
    logger.info("Console connector started (todos=%d).", len(state.todos))
    print(render_app(state))
    print(f"\n[{TodoForm.placeholder}] Use /help for commands. Use /exit to quit.")

    form = TodoForm()

    while True:
        try:
            user_input = _read_line(PROMPT).strip()
        except EOFError:
            logger.info("Console EOF received, exiting.")
            break
        except KeyboardInterrupt:
            logger.info("Console KeyboardInterrupt, exiting.")
            print()
            break

        if not user_input:
            continue

        if user_input.lower() in ("/exit", "/quit"):
            logger.info("Console exit command received.")
            break

        try:
            cmd_response = await command_registry.handle(state, user_input)
        except Exception:
            logger.exception("Command handler crashed.")
            cmd_response = "Internal error while handling a command."

        if cmd_response is not None:
            print(cmd_response)
            continue

        form.set_text(user_input)
        try:
            await form.submit()
        except Exception:
            logger.exception("Todo form submit crashed.")
            print("Internal error while adding a todo.")
            continue
        print(render_todo_list(state))

    logger.info("Console connector finished.")
