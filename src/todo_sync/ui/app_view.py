# src/todo_sync/ui/app_view.py

from __future__ import annotations

from ..core.state import AppState
from .todo_item import TodoItem

HEADING = "Hey There"
SUBHEADING = "check your todos"


def render_todo_list(state: AppState, *, strike: bool = True) -> str:
    if not state.todos:
        return "(no todos)"
    return "\n".join(
        TodoItem(t).render(i, strike=strike) for i, t in enumerate(state.todos, start=1)
    )


def render_app(state: AppState, *, strike: bool = True) -> str:
    if state.phase == "loading":
        return "Loading..."
    if state.phase == "error":
        return f"Error: {state.error}"
    return "\n".join([HEADING, SUBHEADING, "", render_todo_list(state, strike=strike)])
