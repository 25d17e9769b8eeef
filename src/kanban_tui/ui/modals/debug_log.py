"""F12 viewer for the in-app debug log."""

from __future__ import annotations

from datetime import datetime
from typing import TYPE_CHECKING

from textual.containers import Vertical
from textual.screen import ModalScreen
from textual.widgets import Footer, Label, RichLog, Rule

from kanban_tui.debug_log import export_logs_to_file, log_buffer
from kanban_tui.keybindings import DEBUG_LOG_BINDINGS
from kanban_tui.paths import get_debug_log_path

if TYPE_CHECKING:
    from textual.app import ComposeResult

    from kanban_tui.debug_log import LogEntry

_LEVEL_COLORS = {
    "DEBUG": "dim",
    "INFO": "blue",
    "WARNING": "yellow",
    "ERROR": "red",
    "CRITICAL": "bold red",
}

REFRESH_INTERVAL = 0.5


class DebugLogModal(ModalScreen[None]):
    """Streams new buffer entries while open; ``c`` clears, ``s`` saves."""

    BINDINGS = DEBUG_LOG_BINDINGS

    def __init__(self, **kwargs) -> None:
        super().__init__(**kwargs)
        self.shown_through = 0
        self._generation = log_buffer.generation

    def compose(self) -> ComposeResult:
        with Vertical(id="debug-log-container"):
            yield Label("Debug Log", classes="modal-title")
            yield Label(
                "[dim]F12 to toggle | c to clear | s to save | Escape to close[/dim]",
                classes="modal-subtitle",
            )
            yield Rule()
            yield RichLog(id="debug-log", markup=True, auto_scroll=True, wrap=True)
        yield Footer()

    def on_mount(self) -> None:
        self.refresh_entries()
        self.set_interval(REFRESH_INTERVAL, self.refresh_entries)

    def refresh_entries(self) -> None:
        """Write every entry newer than the last one shown."""
        rich_log = self.query_one("#debug-log", RichLog)
        if log_buffer.generation != self._generation:
            self._generation = log_buffer.generation
            self.shown_through = 0
            rich_log.clear()

        for entry in log_buffer.since(self.shown_through):
            rich_log.write(self._format_entry(entry))
            self.shown_through = entry.seq

    def _format_entry(self, entry: LogEntry) -> str:
        ts = datetime.fromtimestamp(entry.timestamp).strftime("%H:%M:%S")
        color = _LEVEL_COLORS.get(entry.level, "white")
        level = f"[{color}]{ts} {entry.level:<7}[/{color}]"
        return f"{level} [bold]{entry.area}[/bold] {entry.message}"

    def action_close(self) -> None:
        self.dismiss(None)

    def action_clear_logs(self) -> None:
        log_buffer.clear()
        self.refresh_entries()
        self.query_one("#debug-log", RichLog).write("[dim]Log cleared[/dim]")

    def action_save_logs(self) -> None:
        log_path = get_debug_log_path()
        rich_log = self.query_one("#debug-log", RichLog)
        try:
            count = export_logs_to_file(log_path)
        except OSError as e:
            rich_log.write(f"[red]Failed to save log: {e}[/red]")
            return
        rich_log.write(f"[green]Saved {count} entries to {log_path}[/green]")
