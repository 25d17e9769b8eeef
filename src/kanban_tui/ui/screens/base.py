"""Base screen class for kanban-tui screens."""

from __future__ import annotations

from typing import TYPE_CHECKING, cast

from textual.screen import Screen

if TYPE_CHECKING:
    from kanban_tui.app import KanbanApp
    from kanban_tui.core.controller import Controller


class KanbanScreen(Screen):
    @property
    def kanban_app(self) -> KanbanApp:
        """Get the typed KanbanApp instance."""
        return cast("KanbanApp", self.app)

    @property
    def controller(self) -> Controller:
        return self.kanban_app.controller
