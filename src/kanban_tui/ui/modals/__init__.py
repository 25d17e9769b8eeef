"""Modal components for kanban-tui."""

from kanban_tui.ui.modals.debug_log import DebugLogModal
from kanban_tui.ui.modals.entry_form import EntryFormModal

__all__ = ["DebugLogModal", "EntryFormModal"]
