"""Rendering contract shared by all diagram renderers.

A renderer turns a DependencyGraph into diagram text. Everything it may
look at is collected in a GraphView, so output depends only on the graph
and the renderer's own options.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import ClassVar, Optional, Protocol, runtime_checkable

from ..architecture import Layering, compute_levels
from ..graph.models import DependencyEdge, DependencyGraph, ModuleNode, ResolvedEdge, short_name
from ..semantics import Classification, ModuleClassifier

ELLIPSIS = "..."

_UNSAFE_ID_CHARS = re.compile(r"[^a-zA-Z0-9_]")


@dataclass(frozen=True)
class RendererMetadata:
    """Plugin metadata describing a renderer."""

    name: str
    description: str
    version: str


@runtime_checkable
class Renderer(Protocol):
    """Anything that can turn a dependency graph into diagram text."""

    metadata: ClassVar[RendererMetadata]
    file_extension: ClassVar[str]
    mime_type: ClassVar[str]
    description: ClassVar[str]

    def render(self, graph: DependencyGraph) -> str: ...


@dataclass
class GraphView:
    """The artifacts a renderer works from.

    ``edges`` keeps unresolved edges (``is_resolved`` is False) so a
    renderer can decide to skip them; it never has to look anything up.
    """

    modules: list[ModuleNode] = field(default_factory=list)
    edges: list[ResolvedEdge] = field(default_factory=list)
    independent: list[ModuleNode] = field(default_factory=list)
    unused: list[ModuleNode] = field(default_factory=list)
    layering: Layering = field(default_factory=Layering)
    classification: Classification = field(default_factory=Classification)

    @property
    def resolved_edges(self) -> list[ResolvedEdge]:
        return [e for e in self.edges if e.is_resolved]

    @property
    def independent_names(self) -> set[str]:
        return {m.class_name for m in self.independent}

    @property
    def unused_names(self) -> set[str]:
        return {m.class_name for m in self.unused}


def build_view(
    graph: DependencyGraph, classifier: Optional[ModuleClassifier] = None
) -> GraphView:
    """Derive every renderer input from the graph in one pass."""
    classifier = classifier or ModuleClassifier()
    return GraphView(
        modules=graph.get_modules(),
        edges=list(graph.resolve_edges()),
        independent=graph.get_independent_modules(),
        unused=graph.get_unused_modules(),
        layering=compute_levels(graph),
        classification=classifier.classify(graph),
    )


def sanitize_identifier(name: str) -> str:
    """Replace every character Mermaid cannot use in an identifier with ``_``."""
    return _UNSAFE_ID_CHARS.sub("_", name)


def truncate_label(label: str, max_length: int) -> str:
    """Cut ``label`` to ``max_length`` characters, ending in an ellipsis."""
    if len(label) > max_length:
        return label[: max(max_length - len(ELLIPSIS), 0)] + ELLIPSIS
    return label


def service_label(edge: DependencyEdge, max_length: int) -> str:
    """Comma-joined short names of the services an edge carries."""
    if not edge.imported_services:
        return ""
    label = ", ".join(short_name(s) for s in edge.imported_services)
    return truncate_label(label, max_length)
