# src/todo_sync/core/models.py

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

TodoId = int | str

_KNOWN_KEYS = frozenset({"id", "title", "completed"})


@dataclass(slots=True)
class Todo:
    """
    A single todo record.

    `extra` keeps any other fields the server sent (e.g. "userId") so that
    a cache round trip writes back exactly what was read.
    """

    id: TodoId
    title: str
    completed: bool = False
    extra: dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Todo:
        if "id" not in data or data["id"] is None:
            raise ValueError("todo record has no id")
        return cls(
            id=data["id"],
            title=str(data.get("title") or ""),
            completed=bool(data.get("completed", False)),
            extra={k: v for k, v in data.items() if k not in _KNOWN_KEYS},
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            **self.extra,
            "id": self.id,
            "title": self.title,
            "completed": self.completed,
        }
