"""Core domain enums."""

from __future__ import annotations

from enum import Enum, StrEnum, auto


class ColumnKind(StrEnum):
    """Kanban column a task lives in, in board order."""

    TODO = "TODO"
    IN_PROGRESS = "IN_PROGRESS"
    DONE = "DONE"

    def next(self) -> ColumnKind:
        """Return the following column, wrapping from DONE back to TODO."""
        from kanban_tui.constants import COLUMN_ORDER

        idx = COLUMN_ORDER.index(self)
        return COLUMN_ORDER[(idx + 1) % len(COLUMN_ORDER)]

    def previous(self) -> ColumnKind:
        """Return the preceding column, wrapping from TODO back to DONE."""
        from kanban_tui.constants import COLUMN_ORDER

        idx = COLUMN_ORDER.index(self)
        return COLUMN_ORDER[(idx - 1) % len(COLUMN_ORDER)]


class FormPhase(Enum):
    """Entry form phases. SUBMITTED and CANCELLED are terminal."""

    TITLE = auto()
    DESCRIPTION = auto()
    SUBMITTED = auto()
    CANCELLED = auto()

    @property
    def is_terminal(self) -> bool:
        return self in (FormPhase.SUBMITTED, FormPhase.CANCELLED)


class FormField(StrEnum):
    """Text fields of the entry form."""

    TITLE = "title"
    DESCRIPTION = "description"


class ActiveView(Enum):
    """Which view currently receives input."""

    BOARD = auto()
    ENTRY_FORM = auto()
