"""CLI entry point for kanban-tui."""

from __future__ import annotations

import sys
from pathlib import Path

import click

from kanban_tui import __version__
from kanban_tui.config import ConfigError, KanbanConfig


@click.command()
@click.option("--version", is_flag=True, help="Show version and exit")
@click.option(
    "--config",
    "config_path",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="Path to config.toml (defaults to the platform config directory)",
)
def cli(version: bool, config_path: Path | None) -> None:
    """Three-column Kanban board for the terminal."""
    if version:
        click.echo(f"kanban-tui {__version__}")
        return

    try:
        config = KanbanConfig.load(config_path)
    except ConfigError as exc:
        click.secho(f"Error: {exc}", fg="red", err=True)
        sys.exit(1)

    from kanban_tui.app import KanbanApp

    app = KanbanApp(config=config)
    app.run()
    if app.return_code:
        click.secho("kanban-tui exited with an error", fg="red", err=True)
    sys.exit(app.return_code or 0)


if __name__ == "__main__":
    cli()
