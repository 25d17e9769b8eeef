"""New-task entry form modal: title first, then description."""

from __future__ import annotations

from typing import TYPE_CHECKING

from textual import on
from textual.containers import Vertical
from textual.screen import ModalScreen
from textual.widgets import Input, Label, TextArea

from kanban_tui.constants import COLUMN_LABELS
from kanban_tui.core.models.entities import TaskCreated
from kanban_tui.core.models.enums import FormField
from kanban_tui.keybindings import ENTRY_FORM_BINDINGS, get_key_for_action
from kanban_tui.ui.widgets.base import DescriptionArea, TitleInput

if TYPE_CHECKING:
    from textual.app import ComposeResult

    from kanban_tui.core.form import EntryForm


class EntryFormModal(ModalScreen[TaskCreated | None]):
    """Drives an EntryForm; exactly one text field is enabled at a time.

    Returns:
        TaskCreated: the form was completed
        None: the form was cancelled
    """

    BINDINGS = ENTRY_FORM_BINDINGS

    def __init__(self, form: EntryForm, **kwargs) -> None:
        super().__init__(**kwargs)
        self._form = form

    @property
    def form(self) -> EntryForm:
        return self._form

    def compose(self) -> ComposeResult:
        confirm_key = get_key_for_action(ENTRY_FORM_BINDINGS, "confirm")
        cancel_key = get_key_for_action(ENTRY_FORM_BINDINGS, "cancel")
        with Vertical(id="entry-form-container"):
            yield Label(
                f"New task in {COLUMN_LABELS[self._form.target_column]}",
                classes="modal-title",
            )
            yield Label("Title", classes="form-label")
            yield TitleInput()
            yield Label("Description", classes="form-label")
            yield DescriptionArea(disabled=True)
            yield Label(
                f"{confirm_key}: next field / create  {cancel_key}: cancel",
                classes="modal-hint",
            )

    def on_mount(self) -> None:
        self.query_one(TitleInput).focus()

    @on(Input.Changed, "#title-input")
    def _on_title_changed(self, event: Input.Changed) -> None:
        self._form.edit(FormField.TITLE, event.value)

    @on(TextArea.Changed, "#description-input")
    def _on_description_changed(self, event: TextArea.Changed) -> None:
        self._form.edit(FormField.DESCRIPTION, event.text_area.text)

    def _flush_active_field(self) -> None:
        # A Changed message can still be queued behind the confirm key
        if self._form.active_field is FormField.TITLE:
            self._form.edit(FormField.TITLE, self.query_one(TitleInput).value)
        elif self._form.active_field is FormField.DESCRIPTION:
            self._form.edit(FormField.DESCRIPTION, self.query_one(DescriptionArea).text)

    def _start_description(self) -> None:
        title = self.query_one(TitleInput)
        description = self.query_one(DescriptionArea)
        title.disabled = True
        description.disabled = False
        description.focus()
        self.add_class("editing-description")

    def action_confirm(self) -> None:
        if self._form.is_finished:
            return
        self._flush_active_field()
        result = self._form.confirm()
        if result is None:
            self._start_description()
            return
        self.dismiss(result)

    def action_cancel(self) -> None:
        if self._form.is_finished:
            return
        self._form.cancel()
        self.dismiss(None)
