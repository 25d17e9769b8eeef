"""KanbanColumn widget for displaying one board column."""

from __future__ import annotations

from typing import TYPE_CHECKING

from textual.containers import Container, ScrollableContainer, Vertical
from textual.css.query import NoMatches
from textual.reactive import var
from textual.widget import Widget
from textual.widgets import Label

from kanban_tui.constants import COLUMN_LABELS, EMPTY_COLUMN_MESSAGE
from kanban_tui.ui.widgets.card import TaskCard

if TYPE_CHECKING:
    from textual.app import ComposeResult

    from kanban_tui.core.board import Column
    from kanban_tui.core.layout import ColumnGeometry
    from kanban_tui.core.models.enums import ColumnKind


class _NSLabel(Label):
    ALLOW_SELECT = False
    can_focus = False


class _NSVertical(Vertical):
    ALLOW_SELECT = False
    can_focus = False


class _NSScrollable(ScrollableContainer):
    ALLOW_SELECT = False
    can_focus = False


class _NSContainer(Container):
    ALLOW_SELECT = False
    can_focus = False


class KanbanColumn(Widget):
    """Renders a board Column; the board screen pushes state in via :meth:`sync`."""

    ALLOW_SELECT = False
    can_focus = False

    is_focused: var[bool] = var(False, toggle_class="focused")

    def __init__(self, kind: ColumnKind, *, text_width: int = 24, **kwargs) -> None:
        super().__init__(id=f"column-{kind.value.lower()}", **kwargs)
        self.kind = kind
        self._text_width = text_width

    @property
    def _slug(self) -> str:
        return self.kind.value.lower()

    def compose(self) -> ComposeResult:
        with _NSVertical():
            with _NSVertical(classes="column-header"):
                yield _NSLabel(
                    f"{COLUMN_LABELS[self.kind]} (0)",
                    id=f"header-{self._slug}",
                    classes="column-header-text",
                )
            with _NSScrollable(classes="column-content", id=f"content-{self._slug}"):
                with _NSContainer(classes="column-empty", id=f"empty-{self._slug}"):
                    yield _NSLabel(EMPTY_COLUMN_MESSAGE, classes="empty-message")

    def get_cards(self) -> list[TaskCard]:
        return list(self.query(TaskCard))

    def sync(self, column: Column, *, focused: bool) -> None:
        """Bring cards, header and selection in line with ``column``.

        Cards are matched by task id so only moved tasks are mounted or removed.
        """
        self.is_focused = focused
        tasks = column.tasks

        try:
            header = self.query_one(f"#header-{self._slug}", _NSLabel)
            header.update(f"{COLUMN_LABELS[self.kind]} ({len(tasks)})")
            content = self.query_one(f"#content-{self._slug}", _NSScrollable)
        except NoMatches:
            return

        current_cards = {card.task_model.id: card for card in self.get_cards() if card.task_model}
        wanted = {task.id: task for task in tasks}

        for task_id in current_cards.keys() - wanted.keys():
            current_cards.pop(task_id).remove()

        for task in tasks:
            card = current_cards.get(task.id)
            if card is None:
                card = TaskCard(task, text_width=self._text_width)
                content.mount(card)
                current_cards[task.id] = card
            elif card.task_model != task:
                card.task_model = task

        selected = column.selected_item
        for task_id, card in current_cards.items():
            card.is_selected = selected is not None and selected.id == task_id

        self._sync_empty_state(content, has_tasks=bool(tasks))

    def _sync_empty_state(self, content: _NSScrollable, *, has_tasks: bool) -> None:
        empty_id = f"empty-{self._slug}"
        try:
            empty = self.query_one(f"#{empty_id}", _NSContainer)
        except NoMatches:
            empty = None

        if has_tasks and empty is not None:
            empty.remove()
        elif not has_tasks and empty is None:
            empty = _NSContainer(classes="column-empty", id=empty_id)
            content.mount(empty)
            empty.mount(_NSLabel(EMPTY_COLUMN_MESSAGE, classes="empty-message"))

    def apply_geometry(self, geometry: ColumnGeometry) -> None:
        self.styles.width = geometry.width
        self.styles.height = geometry.height
