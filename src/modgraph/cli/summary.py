"""Inspection commands: layering, classification, available formats."""

import json
from pathlib import Path
from typing import Optional

import typer
from rich.table import Table

from ..api import analyze
from ..config import load_config
from ..exceptions import ModgraphError
from ..graph import load_graph
from ..logging_config import setup_logging
from ..renderers import RENDERERS, GraphView
from ..semantics import Category
from . import app
from ._common import console, fail, graph_argument


def _load_view(graph_file: Path, config: Optional[Path]) -> GraphView:
    try:
        return analyze(load_graph(graph_file), load_config(config_file=config))
    except ModgraphError as e:
        raise fail(str(e))


def _check_format(fmt: str) -> None:
    if fmt not in ("rich", "json"):
        raise fail(f"Unknown output format {fmt!r}. Choose from: json, rich")


@app.command()
def layers(
    graph_file: Path = graph_argument(),
    fmt: str = typer.Option("rich", "--format", "-f", help="Output format: rich or json"),
    config: Optional[Path] = typer.Option(
        None, "--config", "-c", help="Configuration file (TOML)", exists=True, dir_okay=False
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Debug logging"),
):
    """Show the initialization phases computed from dependency edges."""
    setup_logging(verbose=verbose)
    _check_format(fmt)
    view = _load_view(graph_file, config)
    layering = view.layering

    if fmt == "json":
        output = {
            "phases": [
                {
                    "index": phase.index,
                    "cycle_fallback": phase.is_cycle_fallback,
                    "modules": phase.class_names,
                }
                for phase in layering.phases
            ],
            "has_cycles": layering.has_cycles,
        }
        typer.echo(json.dumps(output, indent=2))
        return

    table = Table(title="Initialization phases")
    table.add_column("Phase", justify="right", style="cyan")
    table.add_column("Module")
    table.add_column("Exports", justify="right")
    table.add_column("Imports", justify="right")

    for phase in layering.phases:
        label = f"{phase.index}*" if phase.is_cycle_fallback else str(phase.index)
        for module in phase.modules:
            exports, imports = layering.counts[module.class_name]
            table.add_row(label, module.short_name, str(exports), str(imports))
            label = ""

    console.print(table)
    if layering.has_cycles:
        console.print(
            f"[yellow]* {len(layering.unplaced)} module(s) sit on dependency cycles[/yellow]"
        )


@app.command()
def classify(
    graph_file: Path = graph_argument(),
    fmt: str = typer.Option("rich", "--format", "-f", help="Output format: rich or json"),
    config: Optional[Path] = typer.Option(
        None, "--config", "-c", help="Configuration file (TOML)", exists=True, dir_okay=False
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Debug logging"),
):
    """Show the infrastructure/domain label and scores of every module."""
    setup_logging(verbose=verbose)
    _check_format(fmt)
    view = _load_view(graph_file, config)
    classification = view.classification

    if fmt == "json":
        output = {
            name: {
                "category": label.value,
                "infra_score": classification.scores[name].infra,
                "domain_score": classification.scores[name].domain,
            }
            for name, label in classification.labels.items()
        }
        typer.echo(json.dumps(output, indent=2))
        return

    table = Table(title="Module classification")
    table.add_column("Module")
    table.add_column("Category")
    table.add_column("Infra", justify="right")
    table.add_column("Domain", justify="right")

    for module in view.modules:
        label = classification.labels[module.class_name]
        score = classification.scores[module.class_name]
        style = "magenta" if label is Category.INFRASTRUCTURE else "green"
        table.add_row(
            module.short_name,
            f"[{style}]{label.value}[/{style}]",
            str(score.infra),
            str(score.domain),
        )

    console.print(table)


@app.command()
def formats():
    """List the available diagram formats."""
    table = Table(title="Diagram formats")
    table.add_column("Format", style="cyan")
    table.add_column("Renderer")
    table.add_column("Version")
    table.add_column("Description")

    for name, cls in sorted(RENDERERS.items()):
        meta = cls.metadata
        table.add_row(name, meta.name, meta.version, meta.description)

    console.print(table)
