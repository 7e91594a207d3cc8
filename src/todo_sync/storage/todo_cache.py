# src/todo_sync/storage/todo_cache.py

from __future__ import annotations

import json
import logging

from ..core.models import Todo
from .local_storage import LocalStorage

logger = logging.getLogger(__name__)


class TodoCacheError(RuntimeError):
    """Cached value exists but is not a JSON list of todo objects."""


class TodoCache:
    """The todo list serialized as one JSON string under a single storage key."""

    def __init__(self, storage: LocalStorage, key: str = "todos") -> None:
        self._storage = storage
        self._key = key

    def read(self) -> list[Todo]:
        raw = self._storage.get_item(self._key)
        if raw is None:
            return []
        try:
            data = json.loads(raw)
        except json.JSONDecodeError as e:
            raise TodoCacheError(f"Cached {self._key!r} is not valid JSON") from e

        if data is None:
            return []
        if not isinstance(data, list) or not all(isinstance(x, dict) for x in data):
            raise TodoCacheError(f"Cached {self._key!r} is not a list of todo objects")

        try:
            return [Todo.from_dict(x) for x in data]
        except ValueError as e:
            raise TodoCacheError(f"Cached {self._key!r} holds an invalid todo: {e}") from e

    def write(self, todos: list[Todo]) -> None:
        payload = json.dumps([t.to_dict() for t in todos], ensure_ascii=False)
        self._storage.set_item(self._key, payload)
        logger.debug("Cache write key=%s todos=%d", self._key, len(todos))

    def clear(self) -> None:
        self._storage.remove_item(self._key)
