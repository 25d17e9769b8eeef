"""Hand-off between the board and the entry form."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from kanban_tui.core.form import EntryForm, EntryFormError
from kanban_tui.core.models.enums import ActiveView, FormPhase

if TYPE_CHECKING:
    from kanban_tui.core.board import Board
    from kanban_tui.core.layout import ColumnGeometry
    from kanban_tui.core.models.entities import Task, TaskCreated

logger = logging.getLogger(__name__)


class Controller:
    """Owns the long-lived board and at most one live entry form.

    Exactly one of the two is active: the form while it exists, the board
    otherwise. The board is never reset while a form is open.
    """

    def __init__(self, board: Board) -> None:
        self.board = board
        self._form: EntryForm | None = None
        self.quitting = False

    @property
    def active(self) -> ActiveView:
        return ActiveView.BOARD if self._form is None else ActiveView.ENTRY_FORM

    @property
    def form(self) -> EntryForm | None:
        return self._form

    def open_entry_form(self) -> EntryForm:
        """Start a form targeting the column focused right now."""
        if self._form is not None:
            return self._form
        self._form = EntryForm(target_column=self.board.focus)
        logger.info("Opened entry form for %s", self._form.target_column)
        return self._form

    def finish_entry(self, result: TaskCreated | None) -> Task | None:
        """Close the finished form, delivering its task to the board if it produced one."""
        form = self._form
        if form is None or not form.is_finished:
            msg = "No finished entry form to close"
            raise EntryFormError(msg)
        if result is not None and form.phase is not FormPhase.SUBMITTED:
            msg = "A cancelled entry form cannot deliver a task"
            raise EntryFormError(msg)
        self._form = None
        if result is None:
            logger.info("Entry form closed without a task")
            return None
        task = self.board.receive_created_task(result.task)
        logger.info("Created task %s in %s", task.id, task.column)
        return task

    def resize(self, width: int, height: int) -> ColumnGeometry:
        return self.board.resize(width, height)

    def request_quit(self) -> None:
        self.quitting = True
