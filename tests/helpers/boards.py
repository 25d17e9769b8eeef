"""Board builders shared by unit and TUI tests."""

from __future__ import annotations

from kanban_tui.core.board import Board
from kanban_tui.core.models import ColumnKind, Task


def make_board(
    todo: list[str] | None = None,
    in_progress: list[str] | None = None,
    done: list[str] | None = None,
) -> Board:
    """Build a board from column title lists; descriptions are ``<title> desc``."""
    board = Board()
    for column, names in (
        (ColumnKind.TODO, todo),
        (ColumnKind.IN_PROGRESS, in_progress),
        (ColumnKind.DONE, done),
    ):
        for title in names or []:
            board.receive_created_task(Task(title=title, description=f"{title} desc", column=column))
    return board


def titles(board: Board, column: ColumnKind) -> list[str]:
    return [task.title for task in board.column(column)]


def snapshot(board: Board) -> dict[ColumnKind, tuple[Task, ...]]:
    return {kind: board.column(kind).tasks for kind in board.columns}
