"""Domain models shared by the board, the entry form and the UI."""

from kanban_tui.core.models.entities import Task, TaskCreated
from kanban_tui.core.models.enums import ActiveView, ColumnKind, FormField, FormPhase

__all__ = ["ActiveView", "ColumnKind", "FormField", "FormPhase", "Task", "TaskCreated"]
