"""Diagram rendering command."""

from pathlib import Path
from typing import Optional

import typer

from ..api import render as render_graph
from ..config import load_config
from ..exceptions import ModgraphError
from ..graph import load_graph
from ..logging_config import setup_logging
from ..renderers import available_renderers
from . import app
from ._common import console, fail, graph_argument


@app.command()
def render(
    graph_file: Path = graph_argument(),
    fmt: str = typer.Option(
        "flowchart",
        "--format",
        "-f",
        help="Diagram type: flowchart, class or timeline",
    ),
    output: Optional[Path] = typer.Option(
        None,
        "--output",
        "-o",
        help="Write the diagram to this file instead of stdout",
        dir_okay=False,
    ),
    no_exports: Optional[bool] = typer.Option(
        None,
        "--no-exports",
        help="Hide exported services on module nodes",
    ),
    no_services: Optional[bool] = typer.Option(
        None,
        "--no-services",
        help="Hide service labels on edges",
    ),
    max_service_length: Optional[int] = typer.Option(
        None,
        "--max-service-length",
        help="Truncate edge labels longer than this",
    ),
    title: Optional[str] = typer.Option(
        None,
        "--title",
        help="Timeline title (empty string hides it)",
    ),
    no_counts: Optional[bool] = typer.Option(
        None,
        "--no-counts",
        help="Hide export/import counts in the timeline",
    ),
    config: Optional[Path] = typer.Option(
        None,
        "--config",
        "-c",
        help="Configuration file (TOML)",
        exists=True,
        file_okay=True,
        dir_okay=False,
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Debug logging"),
    quiet: bool = typer.Option(False, "--quiet", "-q", help="Only log errors"),
):
    """
    Render a dependency graph as a Mermaid diagram.

    [bold cyan]Examples:[/bold cyan]

      modgraph render graph.json

      modgraph render graph.json --format timeline -o boot.mmd

      modgraph render graph.json -f class --no-exports --max-service-length 30
    """
    logger = setup_logging(verbose=verbose, quiet=quiet)

    if fmt not in available_renderers():
        raise fail(f"Unknown format {fmt!r}. Choose from: {', '.join(available_renderers())}")

    try:
        settings = load_config(
            config_file=config,
            show_exports=False if no_exports else None,
            show_services=False if no_services else None,
            max_service_length=max_service_length,
            title=title,
            show_counts=False if no_counts else None,
        )
        graph = load_graph(graph_file)
        text = render_graph(graph, fmt, settings)
    except ModgraphError as e:
        raise fail(str(e))
    except Exception as e:
        logger.exception("Unexpected error")
        raise fail(f"Unexpected error: {e}")

    if output is None:
        typer.echo(text, nl=False)
        return

    try:
        output.parent.mkdir(parents=True, exist_ok=True)
        output.write_text(text, encoding="utf-8")
    except OSError as e:
        raise fail(f"Cannot write {output}: {e}")
    if not quiet:
        console.print(f"Wrote [green]{fmt}[/green] diagram to {output}")
