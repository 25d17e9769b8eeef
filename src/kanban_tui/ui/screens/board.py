"""Main Kanban board screen."""

from __future__ import annotations

from typing import TYPE_CHECKING

from textual.containers import Container, Horizontal
from textual.widgets import Footer, Static

from kanban_tui.constants import COLUMN_ORDER
from kanban_tui.keybindings import BOARD_BINDINGS
from kanban_tui.ui.screens.base import KanbanScreen
from kanban_tui.ui.widgets.column import KanbanColumn

if TYPE_CHECKING:
    from textual.app import ComposeResult

    from kanban_tui.core.board import Board
    from kanban_tui.core.models.enums import ColumnKind


class BoardScreen(KanbanScreen):
    """Three columns; all keys here act on the board."""

    BINDINGS = BOARD_BINDINGS

    @property
    def board(self) -> Board:
        return self.controller.board

    def compose(self) -> ComposeResult:
        layout = self.board.layout
        with Container(classes="board-container"):
            with Horizontal(classes="board"):
                for kind in COLUMN_ORDER:
                    yield KanbanColumn(kind, text_width=layout.card_text_width)
        with Container(classes="size-warning"):
            yield Static(
                f"Terminal too small\n\n"
                f"Minimum size: {layout.min_width}x{layout.min_height}\n"
                f"Please resize your terminal",
                classes="size-warning-text",
            )
        yield Footer()

    def on_mount(self) -> None:
        self.refresh_board()

    def on_screen_resume(self) -> None:
        self.refresh_board()

    def get_column(self, kind: ColumnKind) -> KanbanColumn:
        return self.query_one(f"#column-{kind.value.lower()}", KanbanColumn)

    def refresh_board(self) -> None:
        """Render the board state: cards, focus, selection and geometry."""
        board = self.board
        for kind in COLUMN_ORDER:
            widget = self.get_column(kind)
            widget.sync(board.column(kind), focused=kind is board.focus)
            if board.geometry is not None:
                widget.apply_geometry(board.geometry)

        size = self.app.size
        self.set_class(board.layout.is_too_small(size.width, size.height), "too-small")

    # =========================================================================
    # Navigation
    # =========================================================================

    def action_focus_next(self) -> None:
        self.board.focus_next()
        self.refresh_board()

    def action_focus_previous(self) -> None:
        self.board.focus_previous()
        self.refresh_board()

    def action_select_down(self) -> None:
        self.board.select_next()
        self.refresh_board()

    def action_select_up(self) -> None:
        self.board.select_previous()
        self.refresh_board()

    # =========================================================================
    # Task actions
    # =========================================================================

    def action_advance(self) -> None:
        moved = self.board.advance_selected()
        if moved is None:
            return
        self.refresh_board()

    def action_new_task(self) -> None:
        self.kanban_app.open_entry_form()
