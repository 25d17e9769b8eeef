"""Two-phase entry form: title, then description."""

from __future__ import annotations

import logging

from kanban_tui.core.models.entities import Task, TaskCreated
from kanban_tui.core.models.enums import ColumnKind, FormField, FormPhase

logger = logging.getLogger(__name__)

_PHASE_FIELDS = {
    FormPhase.TITLE: FormField.TITLE,
    FormPhase.DESCRIPTION: FormField.DESCRIPTION,
}


class EntryFormError(Exception):
    """Raised when a finished form is driven further."""


class EntryForm:
    """Linear state machine TITLE -> DESCRIPTION -> SUBMITTED, with CANCELLED from either.

    Text editing belongs to the widgets; the form only records the text of the
    field that matches its phase and produces the result.
    """

    def __init__(self, target_column: ColumnKind) -> None:
        self._target_column = target_column
        self.title = ""
        self.description = ""
        self.phase = FormPhase.TITLE

    @property
    def target_column(self) -> ColumnKind:
        return self._target_column

    @property
    def active_field(self) -> FormField | None:
        return _PHASE_FIELDS.get(self.phase)

    @property
    def is_finished(self) -> bool:
        return self.phase.is_terminal

    def edit(self, field: FormField, text: str) -> bool:
        """Record ``text`` for ``field`` if it is the field being edited."""
        if field is not self.active_field:
            return False
        if field is FormField.TITLE:
            self.title = text
        else:
            self.description = text
        return True

    def confirm(self) -> TaskCreated | None:
        """Advance one phase; returns the result once the description is confirmed."""
        if self.phase is FormPhase.TITLE:
            self.phase = FormPhase.DESCRIPTION
            return None
        if self.phase is FormPhase.DESCRIPTION:
            self.phase = FormPhase.SUBMITTED
            task = Task(title=self.title, description=self.description, column=self._target_column)
            logger.debug("Entry form submitted for %s", self._target_column)
            return TaskCreated(task)
        msg = f"Entry form is already {self.phase.name.lower()}"
        raise EntryFormError(msg)

    def cancel(self) -> None:
        if self.is_finished:
            return
        self.phase = FormPhase.CANCELLED
        logger.debug("Entry form cancelled")
