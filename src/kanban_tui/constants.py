from kanban_tui.core.models.enums import ColumnKind

COLUMN_ORDER = [
    ColumnKind.TODO,
    ColumnKind.IN_PROGRESS,
    ColumnKind.DONE,
]

COLUMN_LABELS = {
    ColumnKind.TODO: "TO DO",
    ColumnKind.IN_PROGRESS: "IN PROGRESS",
    ColumnKind.DONE: "DONE",
}

# (column, title, description) shown on a fresh board
DEMO_TASKS = (
    (ColumnKind.TODO, "Write documentation", "Write documentation for the project"),
    (
        ColumnKind.TODO,
        "Implement feature X",
        "Implement feature X and cover it with tests",
    ),
    (ColumnKind.TODO, "Fix bug Y", "Fix bug Y that causes the application to crash"),
    (ColumnKind.IN_PROGRESS, "In progress", "In progress"),
    (ColumnKind.DONE, "Done", "Done"),
)

EMPTY_COLUMN_MESSAGE = "No tasks"
EMPTY_DESCRIPTION = "No description"

MAX_LOG_MESSAGE_LENGTH = 4000
MAX_LOG_LINES = 2000

__all__ = [
    "COLUMN_LABELS",
    "COLUMN_ORDER",
    "DEMO_TASKS",
    "EMPTY_COLUMN_MESSAGE",
    "EMPTY_DESCRIPTION",
    "MAX_LOG_LINES",
    "MAX_LOG_MESSAGE_LENGTH",
]
