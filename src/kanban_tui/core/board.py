"""Board state: three columns, focus, selection and task advancement."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from kanban_tui.constants import COLUMN_ORDER, DEMO_TASKS
from kanban_tui.core.layout import LayoutConfig
from kanban_tui.core.models.entities import Task
from kanban_tui.core.models.enums import ColumnKind

if TYPE_CHECKING:
    from collections.abc import Iterator

    from kanban_tui.core.layout import ColumnGeometry

logger = logging.getLogger(__name__)


class Column:
    """Ordered tasks of one kind with a selection cursor."""

    def __init__(self, kind: ColumnKind) -> None:
        self.kind = kind
        self._tasks: list[Task] = []
        self._cursor = 0

    def __len__(self) -> int:
        return len(self._tasks)

    def __iter__(self) -> Iterator[Task]:
        return iter(self._tasks)

    @property
    def tasks(self) -> tuple[Task, ...]:
        return tuple(self._tasks)

    @property
    def index(self) -> int | None:
        """Position of the selected task, or None when the column is empty."""
        if not self._tasks:
            return None
        return self._cursor

    @property
    def selected_item(self) -> Task | None:
        if not self._tasks:
            return None
        return self._tasks[self._cursor]

    def select(self, index: int) -> None:
        if not self._tasks:
            self._cursor = 0
            return
        self._cursor = min(max(index, 0), len(self._tasks) - 1)

    def select_next(self) -> None:
        self.select(self._cursor + 1)

    def select_previous(self) -> None:
        self.select(self._cursor - 1)

    def insert_at_end(self, task: Task) -> None:
        if task.column is not self.kind:
            msg = f"Task {task.id} belongs to {task.column}, not {self.kind}"
            raise ValueError(msg)
        self._tasks.append(task)

    def remove_at(self, index: int) -> Task:
        task = self._tasks.pop(index)
        self.select(self._cursor)
        return task


class Board:
    """The three columns plus which one has focus.

    Owns the task id counter and the column geometry. None of the user-facing
    operations fail: an empty column simply makes advance a no-op.
    """

    def __init__(self, layout: LayoutConfig | None = None) -> None:
        self.layout = layout or LayoutConfig()
        self.columns: dict[ColumnKind, Column] = {kind: Column(kind) for kind in COLUMN_ORDER}
        self.focus: ColumnKind = COLUMN_ORDER[0]
        self.geometry: ColumnGeometry | None = None
        self._next_id = 1

    @property
    def focused_column(self) -> Column:
        return self.columns[self.focus]

    @property
    def task_count(self) -> int:
        return sum(len(column) for column in self.columns.values())

    def column(self, kind: ColumnKind) -> Column:
        return self.columns[kind]

    def all_tasks(self) -> list[Task]:
        return [task for kind in COLUMN_ORDER for task in self.columns[kind]]

    # Navigation

    def focus_next(self) -> None:
        self.focus = self.focus.next()

    def focus_previous(self) -> None:
        self.focus = self.focus.previous()

    def select_next(self) -> None:
        self.focused_column.select_next()

    def select_previous(self) -> None:
        self.focused_column.select_previous()

    # Mutation

    def advance_selected(self) -> Task | None:
        """Move the focused column's selected task to the end of the next column."""
        source = self.focused_column
        index = source.index
        if index is None:
            return None
        moved = source.remove_at(index).advanced()
        self.columns[moved.column].insert_at_end(moved)
        logger.debug("Advanced task %s to %s", moved.id, moved.column)
        return moved

    def receive_created_task(self, task: Task) -> Task:
        """Append a new task to its column, assigning an id if it has none."""
        if task.id is None:
            task = task.with_id(self._allocate_id())
        elif any(existing.id == task.id for existing in self.all_tasks()):
            msg = f"Task id {task.id} is already on the board"
            raise ValueError(msg)
        else:
            self._next_id = max(self._next_id, task.id + 1)
        self.columns[task.column].insert_at_end(task)
        logger.debug("Added task %s to %s", task.id, task.column)
        return task

    def resize(self, width: int, height: int) -> ColumnGeometry:
        self.geometry = self.layout.geometry_for(width, height)
        return self.geometry

    def _allocate_id(self) -> int:
        task_id = self._next_id
        self._next_id += 1
        return task_id


def seed_demo_tasks(board: Board) -> None:
    """Fill an empty board with the starter tasks."""
    for column, title, description in DEMO_TASKS:
        board.receive_created_task(Task(title=title, description=description, column=column))
