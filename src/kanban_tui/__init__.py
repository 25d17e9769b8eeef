"""kanban-tui: a three-column Kanban board for the terminal."""

__version__ = "0.1.0"

__all__ = ["__version__"]
