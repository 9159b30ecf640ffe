"""Diagram renderers for module dependency graphs."""

from typing import Any

from .base import (
    GraphView,
    Renderer,
    RendererMetadata,
    build_view,
    sanitize_identifier,
    service_label,
    truncate_label,
)
from .class_diagram import MermaidClassDiagram
from .flowchart import MermaidFlowchart
from .timeline import MermaidTimeline

RENDERERS: dict[str, type] = {
    "flowchart": MermaidFlowchart,
    "class": MermaidClassDiagram,
    "timeline": MermaidTimeline,
}


def available_renderers() -> list[str]:
    """Registered renderer names in sorted order."""
    return sorted(RENDERERS)


def get_renderer(name: str, **options: Any) -> Renderer:
    """Get a renderer instance by name.

    Args:
        name: One of "flowchart", "class", "timeline"
        **options: Constructor arguments for the renderer

    Returns:
        Renderer instance

    Raises:
        ValueError: If name is not recognized
    """
    cls = RENDERERS.get(name)
    if cls is None:
        raise ValueError(
            f"Unknown renderer: {name!r}. Choose from: {', '.join(available_renderers())}"
        )
    return cls(**options)


__all__ = [
    "GraphView",
    "MermaidClassDiagram",
    "MermaidFlowchart",
    "MermaidTimeline",
    "RENDERERS",
    "Renderer",
    "RendererMetadata",
    "available_renderers",
    "build_view",
    "get_renderer",
    "sanitize_identifier",
    "service_label",
    "truncate_label",
]
