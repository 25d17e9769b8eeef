"""Textual themes for kanban-tui."""

from __future__ import annotations

from textual.theme import Theme

# Slate blue focus border with muted grey help text
KANBAN_THEME = Theme(
    name="kanban",
    primary="#5f5fd7",
    secondary="#87afd7",
    accent="#af87ff",
    foreground="#d0d0d0",
    background="#1a1b26",
    surface="#1f2030",
    panel="#24283b",
    warning="#e0af68",
    error="#f7768e",
    success="#9ece6a",
    dark=True,
    variables={
        "border": "#3b4261",
        "border-blurred": "#3b426180",
        "text-muted": "#626262",
        "text-disabled": "#62626280",
        "input-cursor-foreground": "#1a1b26",
        "input-cursor-background": "#87afd7",
        "input-selection-background": "#5f5fd733",
        "footer-key-foreground": "#626262",
        "footer-key-background": "transparent",
        "footer-description-foreground": "#62626280",
    },
)

# xterm-256 fallback; use when supports_truecolor() is False
KANBAN_THEME_256 = Theme(
    name="kanban-256",
    primary="#5f5fd7",  # color(62)
    secondary="#87afd7",  # color(110)
    accent="#af87ff",  # color(141)
    foreground="#d0d0d0",  # color(252)
    background="#121212",  # color(233)
    surface="#1c1c1c",  # color(234)
    panel="#262626",  # color(235)
    warning="#d7af5f",  # color(179)
    error="#d75f5f",  # color(167)
    success="#87af5f",  # color(107)
    dark=True,
    variables={
        "border": "#303030",
        "border-blurred": "#30303080",
        "text-muted": "#626262",  # color(241)
        "text-disabled": "#62626280",
        "input-cursor-foreground": "#121212",
        "input-cursor-background": "#87afd7",
        "input-selection-background": "#5f5fd733",
        "footer-key-foreground": "#626262",
        "footer-key-background": "transparent",
        "footer-description-foreground": "#62626280",
    },
)
