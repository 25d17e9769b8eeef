from kanban_tui.ui.screens.board import BoardScreen

__all__ = ["BoardScreen"]
