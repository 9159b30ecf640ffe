"""CLI entry point. Registers all subcommands."""

from typing import Optional

import typer

from .. import __version__
from ._common import console

app = typer.Typer(
    name="modgraph",
    help="modgraph - module dependency graphs as Mermaid diagrams",
    add_completion=False,
    rich_markup_mode="rich",
    no_args_is_help=True,
)


def _version_callback(value: bool) -> None:
    if value:
        console.print(f"modgraph {__version__}")
        raise typer.Exit()


@app.callback()
def _root(
    version: Optional[bool] = typer.Option(
        None,
        "--version",
        help="Show version and exit",
        callback=_version_callback,
        is_eager=True,
    ),
):
    """Analyze a module dependency graph and render it as Mermaid text."""


def main() -> None:
    app()


# Import subcommands to register them
from .render import render as _render  # noqa: F401, E402
from .summary import classify as _classify, formats as _formats, layers as _layers  # noqa: F401, E402
