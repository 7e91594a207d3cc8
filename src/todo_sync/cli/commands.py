# src/todo_sync/cli/commands.py

from __future__ import annotations

import logging
from collections.abc import Awaitable, Callable

from ..core.models import Todo
from ..core.state import AppState
from ..ui.app_view import render_todo_list
from ..ui.todo_form import TodoForm
from ..ui.todo_item import TodoItem

CommandHandler = Callable[[AppState, list[str]], Awaitable[str]]

logger = logging.getLogger(__name__)


class CommandRegistry:
    """Simple slash-command registry used by the console connector (/help, /add, ...)."""

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

    async def handle(self, state: AppState, line: str) -> str | None:
        """
        Handle a string like "/command args".
        Returns a reply string or None if not a command.
        """
        if not line.startswith("/"):
            return None

        parts = line[1:].split()
        if not parts:
            return "Empty command. Use /help to list available commands."

        name = parts[0].lower()
        args = parts[1:]

        handler = self._handlers.get(name)
        if not handler:
            return f"Unknown command: /{name}. Use /help to list available commands."

        return await handler(state, args)

    def build_help(self) -> str:
        lines = ["Available commands:"]
        for name, help_text in self._help.items():
            lines.append(f"  /{name} - {help_text}")
        lines.append("  /exit - Quit.")
        lines.append("Any other text is added as a new todo.")
        return "\n".join(lines)


registry = CommandRegistry()


def _resolve(state: AppState, raw: str) -> Todo | None:
    """Map a 1-based list position (as shown by /list) to a todo."""
    try:
        pos = int(raw)
    except ValueError:
        return None
    if pos < 1 or pos > len(state.todos):
        return None
    return state.todos[pos - 1]


def _bad_position(raw: str) -> str:
    return f"No todo at position {raw!r}. Use /list to see positions."


async def cmd_help(state: AppState, args: list[str]) -> str:
    return registry.build_help()


async def cmd_list(state: AppState, args: list[str]) -> str:
    return render_todo_list(state)


async def cmd_add(state: AppState, args: list[str]) -> str:
    form = TodoForm()
    form.set_text(" ".join(args))
    if not await form.submit():
        return "Usage: /add <title>"
    return render_todo_list(state)


async def cmd_edit(state: AppState, args: list[str]) -> str:
    """
    /edit <n> <new title>
    """
    if len(args) < 2:
        return "Usage: /edit <n> <new title>"
    todo = _resolve(state, args[0])
    if todo is None:
        return _bad_position(args[0])

    item = TodoItem(todo)
    if not item.begin_edit():
        return "Completed todos cannot be edited."
    item.set_message(" ".join(args[1:]))
    await item.save()
    return render_todo_list(state)


async def cmd_toggle(state: AppState, args: list[str]) -> str:
    if len(args) != 1:
        return "Usage: /toggle <n>"
    todo = _resolve(state, args[0])
    if todo is None:
        return _bad_position(args[0])
    await TodoItem(todo).toggle()
    return render_todo_list(state)


async def cmd_delete(state: AppState, args: list[str]) -> str:
    if len(args) != 1:
        return "Usage: /delete <n>"
    todo = _resolve(state, args[0])
    if todo is None:
        return _bad_position(args[0])
    await TodoItem(todo).delete()
    return render_todo_list(state)


async def cmd_status(state: AppState, args: list[str]) -> str:
    api_url = getattr(state.settings, "api_url", "?")
    db_path = getattr(state.settings, "storage_db_path", "?")
    done = sum(1 for t in state.todos if t.completed)
    return (
        "Status:\n"
        f"  API: {api_url}\n"
        f"  Cache: {db_path}\n"
        f"  Todos: {len(state.todos)} ({done} done)"
    )


registry.register("help", cmd_help, help_text="Show available commands.", aliases=["h", "?"])
registry.register("list", cmd_list, help_text="Show todos with their positions.", aliases=["ls"])
registry.register("add", cmd_add, help_text="Add a todo: /add <title>.")
registry.register("edit", cmd_edit, help_text="Rename a todo: /edit <n> <new title>.")
registry.register("toggle", cmd_toggle, help_text="Mark a todo done/undone: /toggle <n>.", aliases=["t"])
registry.register("delete", cmd_delete, help_text="Delete a todo: /delete <n>.", aliases=["rm", "del"])
registry.register("status", cmd_status, help_text="Show API endpoint, cache path and counts.")
