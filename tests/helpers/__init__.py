"""Test helpers package."""

from tests.helpers.boards import make_board, snapshot, titles
from tests.helpers.pilot import type_text

__all__ = ["make_board", "snapshot", "titles", "type_text"]
