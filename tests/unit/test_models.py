"""Unit tests for domain models."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from kanban_tui.core.models import ColumnKind, FormPhase, Task

pytestmark = pytest.mark.unit


class TestTask:
    def test_defaults(self):
        task = Task(title="Write docs")
        assert task.id is None
        assert task.description == ""
        assert task.column is ColumnKind.TODO
        assert task.label == "Write docs"

    def test_frozen(self):
        task = Task(title="x")
        with pytest.raises(ValidationError):
            task.title = "y"  # type: ignore[misc]

    def test_advanced_returns_copy_in_next_column(self):
        task = Task(id=4, title="x", description="d", column=ColumnKind.IN_PROGRESS)
        moved = task.advanced()
        assert moved.column is ColumnKind.DONE
        assert (moved.id, moved.title, moved.description) == (4, "x", "d")
        assert task.column is ColumnKind.IN_PROGRESS

    def test_with_id(self):
        assert Task(title="x").with_id(9).id == 9


class TestFormPhase:
    @pytest.mark.parametrize(
        ("phase", "terminal"),
        [
            (FormPhase.TITLE, False),
            (FormPhase.DESCRIPTION, False),
            (FormPhase.SUBMITTED, True),
            (FormPhase.CANCELLED, True),
        ],
    )
    def test_is_terminal(self, phase: FormPhase, terminal: bool):
        assert phase.is_terminal is terminal
