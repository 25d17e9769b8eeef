"""Terminal capability detection."""

from __future__ import annotations

import os

# Checked before COLORTERM, which some shell configs set incorrectly
_NO_TRUECOLOR_TERMINALS = {
    "apple_terminal",
}

_TRUECOLOR_TERMINALS = {
    "iterm.app",
    "vscode",
    "hyper",
    "alacritty",
    "kitty",
    "wezterm",
    "ghostty",
    "warp",
}


def supports_truecolor() -> bool:
    """Check if the terminal supports truecolor (24-bit colors).

    Detection order:
    1. TEXTUAL_COLOR_SYSTEM=truecolor (explicit user override)
    2. TERM_PROGRAM known to lack truecolor
    3. TERM_PROGRAM known to support truecolor
    4. COLORTERM set to 'truecolor' or '24bit'
    5. WT_SESSION set (Windows Terminal)
    """
    if os.environ.get("TEXTUAL_COLOR_SYSTEM", "").lower() == "truecolor":
        return True

    term_program = os.environ.get("TERM_PROGRAM", "").lower()
    if term_program in _NO_TRUECOLOR_TERMINALS:
        return False
    if term_program in _TRUECOLOR_TERMINALS:
        return True

    colorterm = os.environ.get("COLORTERM", "").lower()
    if colorterm in ("truecolor", "24bit"):
        return True

    return bool(os.environ.get("WT_SESSION"))
