"""Tests for the board column and card widgets."""

from __future__ import annotations

import pytest
from textual.app import App, ComposeResult
from textual.widgets import Label

from kanban_tui.constants import EMPTY_COLUMN_MESSAGE, EMPTY_DESCRIPTION
from kanban_tui.core.board import Column
from kanban_tui.core.layout import ColumnGeometry
from kanban_tui.core.models import ColumnKind, Task
from kanban_tui.ui.widgets import KanbanColumn, TaskCard
from kanban_tui.ui.widgets.card import truncate

pytestmark = pytest.mark.tui


class ColumnHarness(App):
    def compose(self) -> ComposeResult:
        yield KanbanColumn(ColumnKind.TODO, text_width=12)


def make_column(*titles: str) -> Column:
    column = Column(ColumnKind.TODO)
    for task_id, title in enumerate(titles, start=1):
        column.insert_at_end(Task(id=task_id, title=title))
    return column


def label_texts(widget) -> list[str]:
    return [str(label.content) for label in widget.query(Label)]


class TestTruncate:
    def test_short_text_unchanged(self):
        assert truncate("abc", 10) == "abc"

    def test_exact_length_unchanged(self):
        assert truncate("a" * 10, 10) == "a" * 10

    def test_long_text_marked(self):
        assert truncate("abcdefghijkl", 10) == "abcdefg..."


class TestKanbanColumn:
    async def test_empty_column_shows_placeholder(self):
        app = ColumnHarness()
        async with app.run_test() as pilot:
            widget = app.query_one(KanbanColumn)
            widget.sync(Column(ColumnKind.TODO), focused=False)
            await pilot.pause()

            assert widget.get_cards() == []
            assert EMPTY_COLUMN_MESSAGE in label_texts(widget)
            assert "TO DO (0)" in label_texts(widget)

    async def test_sync_mounts_cards_in_order(self):
        app = ColumnHarness()
        async with app.run_test() as pilot:
            widget = app.query_one(KanbanColumn)
            widget.sync(make_column("a", "b", "c"), focused=True)
            await pilot.pause()

            cards = widget.get_cards()
            assert [card.task_model.title for card in cards] == ["a", "b", "c"]
            assert [card.id for card in cards] == ["card-1", "card-2", "card-3"]
            assert EMPTY_COLUMN_MESSAGE not in label_texts(widget)
            assert "TO DO (3)" in label_texts(widget)
            assert widget.has_class("focused")

    async def test_selected_card_is_marked(self):
        app = ColumnHarness()
        async with app.run_test() as pilot:
            widget = app.query_one(KanbanColumn)
            column = make_column("a", "b")
            column.select(1)
            widget.sync(column, focused=False)
            await pilot.pause()

            first, second = widget.get_cards()
            assert not first.has_class("selected")
            assert second.has_class("selected")
            assert not widget.has_class("focused")

    async def test_removed_tasks_drop_their_cards(self):
        app = ColumnHarness()
        async with app.run_test() as pilot:
            widget = app.query_one(KanbanColumn)
            column = make_column("a", "b")
            widget.sync(column, focused=True)
            await pilot.pause()

            column.remove_at(0)
            widget.sync(column, focused=True)
            await pilot.pause()
            assert [card.task_model.title for card in widget.get_cards()] == ["b"]

            column.remove_at(0)
            widget.sync(column, focused=True)
            await pilot.pause()
            assert widget.get_cards() == []
            assert EMPTY_COLUMN_MESSAGE in label_texts(widget)

    async def test_apply_geometry_sets_size(self):
        app = ColumnHarness()
        async with app.run_test(size=(90, 30)) as pilot:
            widget = app.query_one(KanbanColumn)
            widget.apply_geometry(ColumnGeometry(width=30, height=27))
            await pilot.pause()
            assert widget.outer_size.width == 30
            assert widget.outer_size.height == 27


class TestTaskCard:
    async def test_card_truncates_and_fills_missing_description(self):
        app = ColumnHarness()
        async with app.run_test() as pilot:
            widget = app.query_one(KanbanColumn)
            column = make_column("A very long task title")
            widget.sync(column, focused=True)
            await pilot.pause()

            card = app.query_one(TaskCard)
            assert label_texts(card) == ["A very lo...", truncate(EMPTY_DESCRIPTION, 12)]
