"""Mermaid class diagram renderer.

Each module becomes a class whose members are its exported services.
Dependencies are dashed relations, optionally labelled with the services
they carry.
"""

from __future__ import annotations

from ..graph.models import DependencyGraph, ModuleNode, ResolvedEdge, short_name
from .base import GraphView, RendererMetadata, build_view, sanitize_identifier, service_label

FRONT_MATTER = "---\nconfig:\n  class:\n    hideEmptyMembersBox: true\n---\n"
INDEPENDENT_STYLE = "fill:#e1f5fe, stroke:#0277bd, stroke-width:2px;"
UNUSED_STYLE = "fill:#fff3e0, stroke:#f57c00, stroke-width:2px, stroke-dasharray: 2;"


class MermaidClassDiagram:
    """Render modules as a Mermaid classDiagram.

    Args:
        show_exports: List exported services as public members
        show_services: Label relations with the imported services
        max_service_length: Relation labels longer than this are truncated
    """

    metadata = RendererMetadata(
        name="Mermaid Class Diagram Renderer",
        description="Renders dependency graphs as Mermaid classDiagram with modules as classes.",
        version="0.1.0",
    )
    file_extension = "mmd"
    mime_type = "text/plain"
    description = "Mermaid class diagram"

    def __init__(
        self,
        show_exports: bool = True,
        show_services: bool = True,
        max_service_length: int = 50,
    ):
        self.show_exports = show_exports
        self.show_services = show_services
        self.max_service_length = max_service_length

    def render(self, graph: DependencyGraph) -> str:
        return self.render_view(build_view(graph))

    def render_view(self, view: GraphView) -> str:
        output = FRONT_MATTER + "classDiagram\ndirection TB\n"
        for module in view.modules:
            output += self._render_class(module)
        output += "\n"
        # Stereotypes have to sit outside the class blocks
        output += self._render_stereotypes(view)
        output += "\n"
        for edge in view.resolved_edges:
            output += self._render_relation(edge)
        output += self._render_class_assignments(view)
        output += self._render_class_defs(view)
        return output

    def _render_class(self, module: ModuleNode) -> str:
        name = sanitize_identifier(module.short_name)
        output = f"    class {name} {{\n"
        if self.show_exports:
            for export in module.exports:
                output += f"        + {short_name(export)}\n"
        output += "    }\n"
        return output

    def _render_relation(self, edge: ResolvedEdge) -> str:
        from_name = sanitize_identifier(edge.source.short_name)
        to_name = sanitize_identifier(edge.target.short_name)
        label = service_label(edge.edge, self.max_service_length) if self.show_services else ""
        if label:
            return f"    {from_name} ..> {to_name} : {label}\n"
        return f"    {from_name} ..> {to_name}\n"

    @staticmethod
    def _render_stereotypes(view: GraphView) -> str:
        out = ""
        for module in view.independent:
            out += f"    <<independent>> {sanitize_identifier(module.short_name)}\n"
        for module in view.unused:
            out += f"    <<unused>> {sanitize_identifier(module.short_name)}\n"
        return out

    @staticmethod
    def _render_class_assignments(view: GraphView) -> str:
        out = "\n"
        for module in view.independent:
            out += f"    class {sanitize_identifier(module.short_name)}:::independent\n"
        for module in view.unused:
            out += f"    class {sanitize_identifier(module.short_name)}:::unused\n"
        return out

    @staticmethod
    def _render_class_defs(view: GraphView) -> str:
        out = "\n"
        if view.independent:
            out += f"    classDef independent {INDEPENDENT_STYLE}\n"
        if view.unused:
            out += f"    classDef unused {UNUSED_STYLE}\n"
        return out
