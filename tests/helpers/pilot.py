"""Pilot helpers for driving the Textual app."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from textual.pilot import Pilot

_KEY_NAMES = {" ": "space"}


async def type_text(pilot: Pilot, text: str) -> None:
    for char in text:
        await pilot.press(_KEY_NAMES.get(char, char))
