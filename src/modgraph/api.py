"""Public API for modgraph.

Example:
    >>> from modgraph import GraphBuilder, render
    >>>
    >>> graph = (
    ...     GraphBuilder()
    ...     .module("app.DbModule", exports=["app.db.Connection"])
    ...     .module("app.UserModule", imports=["app.db.Connection"])
    ...     .edge("app.UserModule", "app.DbModule", ["app.db.Connection"])
    ...     .build()
    ... )
    >>> print(render(graph, "timeline"))
"""

from __future__ import annotations

from typing import Optional

from .config import ModgraphConfig
from .graph.models import DependencyGraph
from .logging_config import get_logger
from .renderers import GraphView, build_view, get_renderer

logger = get_logger(__name__)


def analyze(graph: DependencyGraph, config: Optional[ModgraphConfig] = None) -> GraphView:
    """Compute every derived view of the graph.

    Args:
        graph: The module dependency graph (not modified)
        config: Configuration; built-in defaults when omitted. Pass
            load_config() to pick up modgraph.toml and MODGRAPH_* variables

    Returns:
        GraphView with modules, resolved edges, independent and unused
        modules, layering and classification
    """
    config = config or ModgraphConfig()
    return build_view(graph, config.classifier.build_classifier())


def render(
    graph: DependencyGraph,
    fmt: str = "flowchart",
    config: Optional[ModgraphConfig] = None,
) -> str:
    """Render the graph as diagram text.

    Args:
        graph: The module dependency graph (not modified)
        fmt: Renderer name, see modgraph.renderers.available_renderers()
        config: Configuration; built-in defaults when omitted. Pass
            load_config() to pick up modgraph.toml and MODGRAPH_* variables

    Raises:
        ValueError: If fmt names no renderer
    """
    config = config or ModgraphConfig()
    options = config.render.renderer_options(fmt)
    if fmt == "timeline":
        options["classifier"] = config.classifier.build_classifier()
    renderer = get_renderer(fmt, **options)
    logger.debug("Rendering %d modules with %s", len(graph), renderer.metadata.name)
    return renderer.render(graph)
