"""Platform path helpers for kanban-tui configuration and logs."""

from __future__ import annotations

import os
from pathlib import Path

from platformdirs import user_config_dir, user_data_dir

APP_NAME = "kanban-tui"


def get_data_dir() -> Path:
    """Get the data directory (debug log exports)."""
    override = os.environ.get("KANBAN_TUI_DATA_DIR")
    if override:
        return Path(override)
    return Path(user_data_dir(APP_NAME))


def get_config_dir() -> Path:
    override = os.environ.get("KANBAN_TUI_CONFIG_DIR")
    if override:
        return Path(override)
    return Path(user_config_dir(APP_NAME))


def get_config_path() -> Path:
    """Get the path to the main config file."""
    return get_config_dir() / "config.toml"


def get_debug_log_path() -> Path:
    """Get the path to the debug log export file."""
    return get_data_dir() / "debug.log"
