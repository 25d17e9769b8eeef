"""Widgets for the board and the entry form."""

from kanban_tui.ui.widgets.base import DescriptionArea, TitleInput
from kanban_tui.ui.widgets.card import TaskCard
from kanban_tui.ui.widgets.column import KanbanColumn

__all__ = ["DescriptionArea", "KanbanColumn", "TaskCard", "TitleInput"]
