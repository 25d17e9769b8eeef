"""Core domain entities."""

from __future__ import annotations

from dataclasses import dataclass

from pydantic import BaseModel, ConfigDict

from kanban_tui.core.models.enums import ColumnKind


class Task(BaseModel):
    """Unit of work (Kanban card).

    ``column`` says which Column holds the task. Tasks are frozen; moving one
    produces a copy via :meth:`advanced`.
    """

    model_config = ConfigDict(frozen=True)

    id: int | None = None
    title: str
    description: str = ""
    column: ColumnKind = ColumnKind.TODO

    @property
    def label(self) -> str:
        return self.title

    def advanced(self) -> Task:
        """Return a copy placed in the next column."""
        return self.model_copy(update={"column": self.column.next()})

    def with_id(self, task_id: int) -> Task:
        return self.model_copy(update={"id": task_id})


@dataclass(frozen=True, slots=True)
class TaskCreated:
    """Result of a completed entry form."""

    task: Task
