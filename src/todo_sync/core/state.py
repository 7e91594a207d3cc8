# src/todo_sync/core/state.py

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Literal

from .models import Todo
from .ports import TodoApi, TodoCacheRepo

Phase = Literal["loading", "error", "ready"]


@dataclass
class AppState:
    # Store Settings on the state for easy access in other modules later.
    settings: object

    api: TodoApi
    cache: TodoCacheRepo

    todos: list[Todo] = field(default_factory=list)
    loading: bool = True
    error: str | None = None

    @property
    def phase(self) -> Phase:
        if self.loading:
            return "loading"
        if self.error is not None:
            return "error"
        return "ready"

    def find(self, todo_id: object) -> Todo | None:
        for t in self.todos:
            if t.id == todo_id:
                return t
        return None
