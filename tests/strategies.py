"""Hypothesis strategies for board and form tests."""

from __future__ import annotations

from hypothesis import strategies as st

from kanban_tui.core.board import Board
from kanban_tui.core.models import ColumnKind, Task

column_kinds = st.sampled_from(list(ColumnKind))

task_titles = st.text(max_size=40)
task_descriptions = st.text(max_size=120)

# Printable text without characters that Textual treats as control keys
typed_text = st.text(
    alphabet=st.characters(min_codepoint=0x21, max_codepoint=0x7E),
    min_size=1,
    max_size=12,
)

board_ops = st.lists(
    st.sampled_from(
        ["focus_next", "focus_previous", "select_next", "select_previous", "advance_selected"]
    ),
    max_size=40,
)


@st.composite
def boards(draw: st.DrawFn, max_tasks: int = 12) -> Board:
    """Boards with random tasks, focus and per-column selection."""
    board = Board()
    for column in draw(st.lists(column_kinds, max_size=max_tasks)):
        board.receive_created_task(
            Task(title=draw(task_titles), description=draw(task_descriptions), column=column)
        )
    board.focus = draw(column_kinds)
    for column in board.columns.values():
        if len(column):
            column.select(draw(st.integers(min_value=0, max_value=len(column) - 1)))
    return board
