"""Keybindings for the kanban-tui application, using Textual's Binding class directly."""

from __future__ import annotations

from textual.binding import Binding, BindingType

# =============================================================================
# App Bindings
# =============================================================================

APP_BINDINGS: list[BindingType] = [
    Binding("ctrl+c", "quit", "Quit", show=False, priority=True),
    Binding("f12", "toggle_debug_log", "Debug", show=False, priority=True),
]

# =============================================================================
# Board Bindings
# =============================================================================

BOARD_BINDINGS: list[BindingType] = [
    Binding("q", "app.quit", "Quit"),
    Binding("n", "new_task", "New"),
    Binding("enter", "advance", "Advance"),
    # Navigation - vim style
    Binding("h", "focus_previous", "Left", show=False),
    Binding("l", "focus_next", "Right", show=False),
    Binding("j", "select_down", "Down", show=False),
    Binding("k", "select_up", "Up", show=False),
    # Navigation - arrow keys
    Binding("left", "focus_previous", "Left", show=False),
    Binding("right", "focus_next", "Right", show=False),
    Binding("down", "select_down", "Down", show=False),
    Binding("up", "select_up", "Up", show=False),
    # Navigation - tab
    Binding("tab", "focus_next", "Next Column", show=False),
    Binding("shift+tab", "focus_previous", "Prev Column", show=False),
]

# =============================================================================
# Modal Bindings
# =============================================================================

# Priority so the text widgets never see these keys
ENTRY_FORM_BINDINGS: list[BindingType] = [
    Binding("enter", "confirm", "Next / Create", priority=True),
    Binding("escape", "cancel", "Cancel", priority=True),
]

DEBUG_LOG_BINDINGS: list[BindingType] = [
    Binding("escape", "close", "Close"),
    Binding("c", "clear_logs", "Clear"),
    Binding("s", "save_logs", "Save"),
]


def get_key_for_action(bindings: list[BindingType], action: str, default: str = "?") -> str:
    """Get the display key for an action.

    Returns the ``key_display`` if set, else the raw key, or ``default`` when the
    action is not bound.
    """
    for b in bindings:
        if isinstance(b, Binding) and b.action == action:
            return b.key_display or b.key
    return default
