"""Main kanban-tui application."""

from __future__ import annotations

from typing import TYPE_CHECKING

from textual.app import App

from kanban_tui.config import KanbanConfig
from kanban_tui.core.board import Board, seed_demo_tasks
from kanban_tui.core.controller import Controller
from kanban_tui.core.models.enums import ActiveView
from kanban_tui.debug_log import log, setup_debug_logging
from kanban_tui.keybindings import APP_BINDINGS
from kanban_tui.terminal import supports_truecolor
from kanban_tui.theme import KANBAN_THEME, KANBAN_THEME_256
from kanban_tui.ui.modals import DebugLogModal, EntryFormModal
from kanban_tui.ui.screens import BoardScreen

if TYPE_CHECKING:
    from textual import events

    from kanban_tui.core.models.entities import TaskCreated


class KanbanApp(App):
    """Three-column Kanban board.

    Hosts the Controller: the board screen stays at the bottom of the screen
    stack, and the entry form is pushed over it as a modal while a task is
    being written.
    """

    TITLE = "Kanban"
    CSS_PATH = "styles/kanban.tcss"

    BINDINGS = APP_BINDINGS

    def __init__(self, config: KanbanConfig | None = None) -> None:
        super().__init__()
        self.config = config or KanbanConfig()

        self.register_theme(KANBAN_THEME)
        self.register_theme(KANBAN_THEME_256)
        self.theme = self._pick_theme()

        board = Board(layout=self.config.layout)
        if self.config.board.seed_demo_tasks:
            seed_demo_tasks(board)
        self.controller = Controller(board)

    def _pick_theme(self) -> str:
        if self.config.ui.theme != "auto":
            return self.config.ui.theme
        return "kanban" if supports_truecolor() else "kanban-256"

    @property
    def board_screen(self) -> BoardScreen | None:
        for screen in self.screen_stack:
            if isinstance(screen, BoardScreen):
                return screen
        return None

    async def on_mount(self) -> None:
        setup_debug_logging()
        self.controller.resize(self.size.width, self.size.height)
        await self.push_screen(BoardScreen())
        log.info("Board ready", tasks=self.controller.board.task_count)

    def on_resize(self, event: events.Resize) -> None:
        # The board owns column layout, so it is resized even under the form
        geometry = self.controller.resize(event.size.width, event.size.height)
        log.debug("Resized", width=geometry.width, height=geometry.height)
        if (screen := self.board_screen) is not None:
            screen.refresh_board()

    def open_entry_form(self) -> None:
        """Push the entry form for the focused column."""
        if self.controller.active is ActiveView.ENTRY_FORM:
            return
        form = self.controller.open_entry_form()
        self.push_screen(EntryFormModal(form), callback=self._on_entry_form_closed)

    def _on_entry_form_closed(self, result: TaskCreated | None) -> None:
        task = self.controller.finish_entry(result)
        if task is not None:
            log.info("Task created", task_id=task.id, column=task.column.value)
        if (screen := self.board_screen) is not None:
            screen.refresh_board()

    def action_toggle_debug_log(self) -> None:
        if isinstance(self.screen, DebugLogModal):
            self.screen.dismiss(None)
        else:
            self.push_screen(DebugLogModal())

    async def action_quit(self) -> None:
        self.controller.request_quit()
        log.info("Quitting")
        self.exit()
