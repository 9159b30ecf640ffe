"""Shared CLI helpers."""

from typing import Any

import typer
from rich.console import Console
from rich.markup import escape

console = Console()
err_console = Console(stderr=True)


def graph_argument() -> Any:
    """Positional argument for the graph JSON file."""
    return typer.Argument(
        ...,
        help="Dependency graph JSON file",
        exists=True,
        file_okay=True,
        dir_okay=False,
        readable=True,
    )


def fail(message: str) -> typer.Exit:
    """Print an error and build the exit to raise."""
    err_console.print(f"[red]Error:[/red] {escape(message)}")
    return typer.Exit(1)
