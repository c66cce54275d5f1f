"""Typer application for release-gen."""

from __future__ import annotations

from typing import Annotated

import typer
from rich.console import Console

from release_gen import __version__
from release_gen.log import setup_logging

console = Console()
err_console = Console(stderr=True)

app = typer.Typer(
    name="release-gen",
    help="Generate four-part version releases from conventional commits.",
    add_completion=False,
    no_args_is_help=True,
    rich_markup_mode="rich",
)


@app.callback()
def main(
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Enable debug logging."),
    ] = False,
) -> None:
    """Generate four-part version releases from conventional commits."""
    setup_logging(verbose)


@app.command()
def generate(
    path: Annotated[
        str | None,
        typer.Argument(help="Project directory (defaults to the current directory)."),
    ] = None,
    dry_run: Annotated[
        bool,
        typer.Option("--dry-run", help="Show the calculated version without tagging or releasing."),
    ] = False,
) -> None:
    """Generate a tag, a version history file and a GitHub release."""
    from release_gen.cli.commands.generate import run_generate

    run_generate(path=path, dry_run=dry_run, console=console, err_console=err_console)


@app.command()
def version() -> None:
    """Show the release-gen version."""
    console.print(f"release-gen [green]{__version__}[/]")
