# src/todo_sync/core/todos.py

"""
State container operations.

Each mutation calls the remote API first, then replaces `state.todos` and
writes the cache, best-effort. Failures are logged and swallowed: the list
simply does not change. Concurrent calls are not coordinated; the last write
to `state.todos` wins.
"""

from __future__ import annotations

import logging
import uuid
from collections.abc import Mapping
from dataclasses import replace
from typing import Any

from ..api.client import TodoApiError, friendly_api_error_message
from ..config import DEFAULT_SEED_LIMIT
from .models import Todo, TodoId
from .state import AppState

logger = logging.getLogger(__name__)


def _seed_limit(state: AppState) -> int:
    return max(0, int(getattr(state.settings, "seed_limit", DEFAULT_SEED_LIMIT)))


def _commit(state: AppState, todos: list[Todo]) -> None:
    state.todos = todos
    state.cache.write(todos)


def _next_client_id(todos: list[Todo]) -> TodoId:
    numeric = [t.id for t in todos if isinstance(t.id, int) and not isinstance(t.id, bool)]
    if numeric or not todos:
        return max(numeric, default=0) + 1
    return uuid.uuid4().hex


async def load_todos(state: AppState) -> None:
    """Hydrate from cache, or fetch the seed list when the cache is empty."""
    state.loading = True
    state.error = None
    try:
        cached = state.cache.read()
        if cached:
            state.todos = cached
            logger.info("Loaded %d todos from cache", len(cached))
        else:
            data = await state.api.list_todos()
            fetched = [Todo.from_dict(x) for x in data[: _seed_limit(state)]]
            _commit(state, fetched)
            logger.info("Fetched %d todos from API (kept %d)", len(data), len(fetched))
    except Exception as e:
        state.error = friendly_api_error_message(e)
        logger.exception("Failed to load todos")
    finally:
        state.loading = False


async def add_todo(state: AppState, draft: Mapping[str, Any]) -> None:
    try:
        payload = {**draft, "completed": False}
        saved = await state.api.create_todo(payload)
        record = {**payload, **saved, "completed": False}

        current = state.todos
        if record.get("id") is None or any(t.id == record["id"] for t in current):
            client_id = _next_client_id(current)
            logger.debug("Server id %r unusable, assigning %r", record.get("id"), client_id)
            record["id"] = client_id

        _commit(state, [Todo.from_dict(record), *current])
    except Exception:
        logger.exception("Error adding todo")


async def update_todo(state: AppState, todo_id: TodoId, patch: Mapping[str, Any]) -> None:
    try:
        existing = state.find(todo_id)
        base = existing.to_dict() if existing is not None else {}
        payload = {**base, **patch, "id": todo_id}

        saved = await state.api.replace_todo(todo_id, payload)
        new_todo = Todo.from_dict({**payload, **saved, "id": todo_id})

        _commit(state, [new_todo if t.id == todo_id else t for t in state.todos])
    except Exception:
        logger.exception("Error updating todo id=%s", todo_id)


async def delete_todo(state: AppState, todo_id: TodoId) -> None:
    try:
        await state.api.delete_todo(todo_id)
        _commit(state, [t for t in state.todos if t.id != todo_id])
    except Exception:
        logger.exception("Error deleting todo id=%s", todo_id)


async def toggle_complete(state: AppState, todo_id: TodoId) -> None:
    todo = state.find(todo_id)
    if todo is None:
        logger.debug("toggle_complete: no todo with id=%s", todo_id)
        return

    try:
        await state.api.patch_todo(todo_id, {"completed": not todo.completed})
    except TodoApiError as e:
        logger.error("Failed to toggle complete status on API: %s", e)
        return
    except Exception:
        logger.exception("Error toggling todo complete status id=%s", todo_id)
        return

    try:
        _commit(
            state,
            [replace(t, completed=not t.completed) if t.id == todo_id else t for t in state.todos],
        )
    except Exception:
        logger.exception("Error toggling todo complete status id=%s", todo_id)
