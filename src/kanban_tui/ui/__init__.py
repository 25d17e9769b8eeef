"""Textual UI for kanban-tui."""
