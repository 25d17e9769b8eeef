"""Reusable text-field widgets for the entry form."""

from __future__ import annotations

from textual.widgets import Input, TextArea


class TitleInput(Input):
    """Single-line task title input."""

    DEFAULT_PLACEHOLDER = "Task title..."

    def __init__(
        self,
        value: str = "",
        *,
        placeholder: str | None = None,
        widget_id: str = "title-input",
        **kwargs,
    ) -> None:
        super().__init__(
            value=value,
            placeholder=placeholder or self.DEFAULT_PLACEHOLDER,
            id=widget_id,
            **kwargs,
        )


class DescriptionArea(TextArea):
    """Multi-line task description."""

    def __init__(
        self,
        text: str = "",
        *,
        show_line_numbers: bool = False,
        widget_id: str = "description-input",
        **kwargs,
    ) -> None:
        super().__init__(
            text=text,
            show_line_numbers=show_line_numbers,
            id=widget_id,
            **kwargs,
        )
