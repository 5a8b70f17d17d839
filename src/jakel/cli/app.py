"""Typer CLI application."""

from pathlib import Path
from typing import Annotated, Optional

import typer
from rich.console import Console

from jakel.core.constants import VERSION
from jakel.core.errors import TerminalError
from jakel.core.log import configure_logging


def _version_callback(value: bool) -> None:
    if value:
        Console().print(f"jakel {VERSION}")
        raise typer.Exit()


def create_app() -> typer.Typer:
    """Create and configure the CLI application."""
    app = typer.Typer(
        name="jakel",
        help="A small always-insert terminal text editor.",
        add_completion=False,
        rich_markup_mode="rich",
    )
    err_console = Console(stderr=True)

    @app.command()
    def edit(
        path: Annotated[Optional[Path], typer.Argument(help="File to edit (created on first save)")] = None,
        version: Annotated[
            bool,
            typer.Option("--version", "-V", callback=_version_callback, is_eager=True, help="Show version and exit"),
        ] = False,
    ) -> None:
        """Edit FILE, or start an empty unnamed buffer.

        Keys: [bold]Ctrl-S[/] save, [bold]Ctrl-Q[/] quit, [bold]Ctrl-F[/] find.
        """
        from jakel.cli.studio.editor import run_editor

        logger = configure_logging()
        try:
            run_editor(path)
        except TerminalError as e:
            logger.error("Fatal terminal error: %s", e)
            err_console.print(f"[red]jakel: {e}[/]")
            raise typer.Exit(1)

    return app
