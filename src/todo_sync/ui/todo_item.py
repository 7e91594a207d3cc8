# src/todo_sync/ui/todo_item.py

from __future__ import annotations

from ..core.context import use_todo
from ..core.models import Todo

CHECKED = "[x]"
UNCHECKED = "[ ]"


def _strike(text: str) -> str:
    # U+0336 combining long stroke overlay after each character
    return "".join(ch + "\u0336" for ch in text)


class TodoItem:
    """
    Renders one todo and forwards its actions to the active TodoContext.

    Editing is a two-step flow (begin_edit -> set_message -> save), and is
    refused for completed todos.
    """

    def __init__(self, todo: Todo) -> None:
        self.todo = todo
        self.editable = False
        self.message = todo.title

    def render(self, position: int | None = None, *, strike: bool = True) -> str:
        box = CHECKED if self.todo.completed else UNCHECKED
        title = self.message if self.editable else self.todo.title
        if self.todo.completed and strike:
            title = _strike(title)
        prefix = f"{position:>2}. " if position is not None else ""
        suffix = "  (editing)" if self.editable else ""
        return f"{prefix}{box} {title}{suffix}"

    def begin_edit(self) -> bool:
        if self.todo.completed:
            return False
        self.editable = True
        self.message = self.todo.title
        return True

    def set_message(self, message: str) -> None:
        self.message = message

    async def save(self) -> bool:
        if not self.editable:
            return False
        await use_todo().update_todo(self.todo.id, {**self.todo.to_dict(), "title": self.message})
        self.editable = False
        return True

    async def toggle(self) -> None:
        await use_todo().toggle_complete(self.todo.id)

    async def delete(self) -> None:
        await use_todo().delete_todo(self.todo.id)
