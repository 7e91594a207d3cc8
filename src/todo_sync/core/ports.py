# src/todo_sync/core/ports.py

from __future__ import annotations

"""
Ports (interfaces) used by the core.

The core depends on Protocols instead of concrete implementations.
This keeps the HTTP client and the cache swappable and makes testing easier.
"""

from typing import Any, Protocol

from .models import Todo, TodoId

JsonObject = dict[str, Any]


class TodoApi(Protocol):
    """Remote todos endpoint. Non-success statuses raise."""

    async def list_todos(self) -> list[JsonObject]: ...
    async def get_todo(self, todo_id: TodoId) -> JsonObject: ...
    async def create_todo(self, payload: JsonObject) -> JsonObject: ...
    async def replace_todo(self, todo_id: TodoId, payload: JsonObject) -> JsonObject: ...
    async def patch_todo(self, todo_id: TodoId, fields: JsonObject) -> JsonObject: ...
    async def delete_todo(self, todo_id: TodoId) -> None: ...


class TodoCacheRepo(Protocol):
    """The whole todo list, persisted under a single storage key."""

    def read(self) -> list[Todo]: ...
    def write(self, todos: list[Todo]) -> None: ...
    def clear(self) -> None: ...
