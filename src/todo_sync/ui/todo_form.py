# src/todo_sync/ui/todo_form.py

from __future__ import annotations

import logging

from ..core.context import use_todo

logger = logging.getLogger(__name__)


class TodoForm:
    """Single-line "Write Todo..." input with an Add action."""

    placeholder = "Write Todo..."

    def __init__(self) -> None:
        self.text = ""

    def set_text(self, text: str) -> None:
        self.text = text

    async def submit(self) -> bool:
        """Add the draft as a new todo. Blank drafts are ignored."""
        title = self.text.strip()
        if not title:
            return False

        await use_todo().add_todo({"title": title})
        self.text = ""
        return True
