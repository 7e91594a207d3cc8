# src/todo_sync/core/context.py

"""
Context/provider layer.

UI components call `use_todo()` instead of receiving the state and every
operation as arguments. `todo_provider(state)` makes a context current for
the enclosed block (and for tasks/threads started from it, since asyncio
and `asyncio.to_thread` copy the current contextvars).
"""

from __future__ import annotations

import contextlib
from collections.abc import Iterator, Mapping
from contextvars import ContextVar
from dataclasses import dataclass
from typing import Any

from . import todos as ops
from .models import Todo, TodoId
from .state import AppState

_current: ContextVar[TodoContext | None] = ContextVar("todo_context", default=None)


@dataclass(frozen=True, slots=True)
class TodoContext:
    state: AppState

    @property
    def todos(self) -> list[Todo]:
        return self.state.todos

    async def add_todo(self, draft: Mapping[str, Any]) -> None:
        await ops.add_todo(self.state, draft)

    async def update_todo(self, todo_id: TodoId, patch: Mapping[str, Any]) -> None:
        await ops.update_todo(self.state, todo_id, patch)

    async def delete_todo(self, todo_id: TodoId) -> None:
        await ops.delete_todo(self.state, todo_id)

    async def toggle_complete(self, todo_id: TodoId) -> None:
        await ops.toggle_complete(self.state, todo_id)


@contextlib.contextmanager
def todo_provider(state: AppState) -> Iterator[TodoContext]:
    ctx = TodoContext(state)
    token = _current.set(ctx)
    try:
        yield ctx
    finally:
        _current.reset(token)


def use_todo() -> TodoContext:
    ctx = _current.get()
    if ctx is None:
        raise RuntimeError("use_todo() called outside of todo_provider()")
    return ctx
