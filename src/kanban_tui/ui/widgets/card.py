"""TaskCard widget for displaying a Kanban task."""

from __future__ import annotations

from typing import TYPE_CHECKING

from textual.reactive import reactive, var
from textual.widget import Widget
from textual.widgets import Label

from kanban_tui.constants import EMPTY_DESCRIPTION

if TYPE_CHECKING:
    from textual.app import ComposeResult

    from kanban_tui.core.models.entities import Task


def truncate(text: str, max_length: int) -> str:
    """Truncate text to ``max_length`` characters, marking the cut with '...'."""
    if len(text) <= max_length:
        return text
    return text[: max_length - 3] + "..."


class TaskCard(Widget):
    """A card showing a task's title and description."""

    ALLOW_SELECT = False
    can_focus = False

    task_model: reactive[Task | None] = reactive(None, recompose=True)
    is_selected: var[bool] = var(False, toggle_class="selected")

    def __init__(self, task: Task, *, text_width: int = 24, **kwargs) -> None:
        super().__init__(id=f"card-{task.id}", **kwargs)
        self._text_width = text_width
        self.task_model = task

    def compose(self) -> ComposeResult:
        if self.task_model is None:
            return
        yield Label(truncate(self.task_model.label, self._text_width), classes="card-title")
        desc = self.task_model.description or EMPTY_DESCRIPTION
        yield Label(truncate(desc, self._text_width), classes="card-desc")
