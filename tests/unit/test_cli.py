"""Tests for the kanban-tui command line."""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest
from click.testing import CliRunner

from kanban_tui import __version__
from kanban_tui.__main__ import cli

if TYPE_CHECKING:
    from pathlib import Path

pytestmark = pytest.mark.unit


def test_version() -> None:
    result = CliRunner().invoke(cli, ["--version"])
    assert result.exit_code == 0
    assert result.output.strip() == f"kanban-tui {__version__}"


def test_invalid_config_exits_with_error(tmp_path: Path) -> None:
    path = tmp_path / "config.toml"
    path.write_text("[layout]\ndivisor = 0\n")

    result = CliRunner().invoke(cli, ["--config", str(path)])

    assert result.exit_code == 1
    assert "Invalid config file" in result.output


def test_config_option_rejects_directory(tmp_path: Path) -> None:
    result = CliRunner().invoke(cli, ["--config", str(tmp_path)])
    assert result.exit_code == 2
