"""Configuration loader for kanban-tui."""

from __future__ import annotations

import tomllib
from typing import TYPE_CHECKING, Literal, TypeAlias

from pydantic import BaseModel, Field, ValidationError

from kanban_tui.core.layout import LayoutConfig
from kanban_tui.paths import get_config_path

if TYPE_CHECKING:
    from pathlib import Path


ThemeName: TypeAlias = Literal["auto", "kanban", "kanban-256"]


class ConfigError(Exception):
    """Raised when the config file exists but cannot be used."""


class BoardConfig(BaseModel):
    """Initial board contents."""

    seed_demo_tasks: bool = Field(default=True, description="Start with the demo tasks")


class UIConfig(BaseModel):
    """UI-related user preferences."""

    theme: ThemeName = Field(
        default="auto",
        description="'auto' picks the 256-color theme on terminals without truecolor",
    )


class KanbanConfig(BaseModel):
    """Root configuration model."""

    layout: LayoutConfig = Field(default_factory=LayoutConfig)
    board: BoardConfig = Field(default_factory=BoardConfig)
    ui: UIConfig = Field(default_factory=UIConfig)

    @classmethod
    def load(cls, config_path: Path | None = None) -> KanbanConfig:
        """Load configuration from TOML file or use defaults."""
        if config_path is None:
            config_path = get_config_path()

        if not config_path.exists():
            return cls()

        try:
            with open(config_path, "rb") as f:
                data = tomllib.load(f)
            return cls.model_validate(data)
        except (OSError, tomllib.TOMLDecodeError, ValidationError) as exc:
            msg = f"Invalid config file {config_path}: {exc}"
            raise ConfigError(msg) from exc
