"""In-app debug log behind the F12 viewer.

Board, form and controller events arrive through the ``logging`` tree under
``kanban_tui``; the app itself writes through :data:`log`. Every entry gets a
sequence number that keeps increasing after the buffer starts dropping old
entries, so a viewer can always ask for what it has not shown yet.
"""

from __future__ import annotations

import logging
import time
from collections import deque
from dataclasses import dataclass
from datetime import datetime
from pathlib import Path
from typing import TYPE_CHECKING, Any

from kanban_tui.constants import MAX_LOG_LINES, MAX_LOG_MESSAGE_LENGTH

if TYPE_CHECKING:
    from collections.abc import Iterator

PACKAGE_LOGGER = "kanban_tui"
APP_AREA = "app"

# Logger name suffix -> area shown in the viewer
_AREAS = {
    "core.board": "board",
    "core.form": "form",
    "core.controller": "controller",
    "config": "config",
}


def area_for(logger_name: str) -> str:
    """Map a ``kanban_tui.*`` logger name to the part of the app it reports on."""
    prefix = f"{PACKAGE_LOGGER}."
    if not logger_name.startswith(prefix):
        return logger_name
    suffix = logger_name.removeprefix(prefix)
    return _AREAS.get(suffix, suffix.rsplit(".", 1)[-1])


@dataclass(frozen=True, slots=True)
class LogEntry:
    seq: int
    level: str
    area: str
    message: str
    timestamp: float

    def format_line(self) -> str:
        ts = datetime.fromtimestamp(self.timestamp).strftime("%Y-%m-%d %H:%M:%S.%f")[:-3]
        return f"{ts} [{self.level}] {self.area}: {self.message}"


class LogBuffer:
    """Bounded entry store with a sequence number that never wraps."""

    def __init__(self, maxlen: int = MAX_LOG_LINES) -> None:
        self._entries: deque[LogEntry] = deque(maxlen=maxlen)
        self._last_seq = 0
        self.generation = 0

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[LogEntry]:
        return iter(tuple(self._entries))

    @property
    def last_seq(self) -> int:
        """Sequence number of the newest entry ever appended (0 if none)."""
        return self._last_seq

    def append(
        self, level: str, area: str, message: str, timestamp: float | None = None
    ) -> LogEntry:
        if len(message) > MAX_LOG_MESSAGE_LENGTH:
            message = message[:MAX_LOG_MESSAGE_LENGTH] + "... [truncated]"
        self._last_seq += 1
        entry = LogEntry(
            seq=self._last_seq,
            level=level,
            area=area,
            message=message,
            timestamp=time.time() if timestamp is None else timestamp,
        )
        self._entries.append(entry)
        return entry

    def since(self, seq: int) -> list[LogEntry]:
        """Entries still held whose sequence number is greater than ``seq``."""
        return [entry for entry in self._entries if entry.seq > seq]

    def clear(self) -> None:
        self._entries.clear()
        self.generation += 1


log_buffer = LogBuffer()


class KanbanLogger:
    """Writes app-level events to the buffer and to the Textual devtools log."""

    def __init__(self, area: str = APP_AREA, buffer: LogBuffer | None = None) -> None:
        self.area = area
        self._buffer = buffer

    @property
    def buffer(self) -> LogBuffer:
        return self._buffer if self._buffer is not None else log_buffer

    def _log(self, level: str, message: str, fields: dict[str, Any]) -> LogEntry:
        if fields:
            pairs = " ".join(f"{key}={value!r}" for key, value in fields.items())
            message = f"{message} {pairs}" if message else pairs
        entry = self.buffer.append(level, self.area, message)

        from textual import log as textual_log

        textual_log(f"{self.area}: {entry.message}")
        return entry

    def debug(self, message: str = "", **fields: Any) -> LogEntry:
        return self._log("DEBUG", message, fields)

    def info(self, message: str = "", **fields: Any) -> LogEntry:
        return self._log("INFO", message, fields)

    def warning(self, message: str = "", **fields: Any) -> LogEntry:
        return self._log("WARNING", message, fields)

    def error(self, message: str = "", **fields: Any) -> LogEntry:
        return self._log("ERROR", message, fields)


class DebugLogHandler(logging.Handler):
    """Copies ``kanban_tui.*`` records into the buffer, tagged with their area."""

    def __init__(self, buffer: LogBuffer | None = None) -> None:
        super().__init__()
        self._buffer = buffer

    def emit(self, record: logging.LogRecord) -> None:
        try:
            buffer = self._buffer if self._buffer is not None else log_buffer
            buffer.append(
                record.levelname,
                area_for(record.name),
                record.getMessage(),
                timestamp=record.created,
            )
        except Exception:
            self.handleError(record)


def setup_debug_logging(level: int = logging.DEBUG) -> None:
    """Attach the buffer handler to the package logger once."""
    package_logger = logging.getLogger(PACKAGE_LOGGER)
    if any(isinstance(h, DebugLogHandler) for h in package_logger.handlers):
        return
    package_logger.addHandler(DebugLogHandler())
    package_logger.setLevel(level)
    log.info("Debug logging ready, press F12 to view")


def export_logs_to_file(file_path: str | Path, buffer: LogBuffer | None = None) -> int:
    """Write the buffered entries to ``file_path``; returns how many were written."""
    buffer = buffer if buffer is not None else log_buffer
    output_path = Path(file_path)
    output_path.parent.mkdir(parents=True, exist_ok=True)

    entries = list(buffer)
    with output_path.open("w", encoding="utf-8") as f:
        f.write(f"# kanban-tui debug log, {len(entries)} entries\n")
        if entries:
            f.write(f"# sequence {entries[0].seq}..{entries[-1].seq}\n")
        for entry in entries:
            f.write(entry.format_line() + "\n")

    return len(entries)


log = KanbanLogger()
