"""Pytest fixtures for kanban-tui tests."""

from __future__ import annotations

import os
import tempfile
from pathlib import Path
from typing import TYPE_CHECKING

import pytest
from hypothesis import Phase, Verbosity, settings

_TEST_BASE_DIR = Path(tempfile.mkdtemp(prefix="kanban-tui-tests-"))
os.environ["KANBAN_TUI_DATA_DIR"] = str(_TEST_BASE_DIR / "data")
os.environ["KANBAN_TUI_CONFIG_DIR"] = str(_TEST_BASE_DIR / "config")

from kanban_tui.config import BoardConfig, KanbanConfig  # noqa: E402
from kanban_tui.core.board import Board  # noqa: E402
from kanban_tui.core.controller import Controller  # noqa: E402
from tests.helpers.boards import make_board  # noqa: E402

if TYPE_CHECKING:
    from kanban_tui.app import KanbanApp


settings.register_profile(
    "ci",
    max_examples=100,
    deadline=None,
    phases=[Phase.explicit, Phase.reuse, Phase.generate, Phase.shrink],
)
settings.register_profile(
    "dev",
    max_examples=30,
    deadline=500,
)
settings.register_profile(
    "debug",
    max_examples=10,
    verbosity=Verbosity.verbose,
    deadline=None,
)
settings.load_profile(os.getenv("HYPOTHESIS_PROFILE", "dev"))


@pytest.fixture
def empty_board() -> Board:
    return Board()


@pytest.fixture
def scenario_board() -> Board:
    """ToDo=[T1,T2,T3], InProgress=[I1], Done=[D1], focus=ToDo."""
    return make_board(todo=["T1", "T2", "T3"], in_progress=["I1"], done=["D1"])


@pytest.fixture
def controller(scenario_board: Board) -> Controller:
    return Controller(scenario_board)


@pytest.fixture
def empty_config() -> KanbanConfig:
    return KanbanConfig(board=BoardConfig(seed_demo_tasks=False))


@pytest.fixture
def scenario_app(empty_config: KanbanConfig) -> KanbanApp:
    """App whose board holds the T1..T3 / I1 / D1 scenario."""
    from kanban_tui.app import KanbanApp

    app = KanbanApp(config=empty_config)
    app.controller.board = make_board(todo=["T1", "T2", "T3"], in_progress=["I1"], done=["D1"])
    return app
