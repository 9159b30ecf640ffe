"""Mermaid flowchart renderer."""

from __future__ import annotations

from ..graph.models import DependencyGraph, ModuleNode, ResolvedEdge, short_name
from .base import GraphView, RendererMetadata, build_view, sanitize_identifier, service_label

INDEPENDENT_STYLE = "fill:#e1f5fe,stroke:#0277bd,stroke-width:2px"
UNUSED_STYLE = "fill:#fff3e0,stroke:#f57c00,stroke-width:2px"


class MermaidFlowchart:
    """Render modules as flowchart nodes and dependencies as arrows.

    Args:
        show_exports: List exported services inside each node
        show_services: Label arrows with the imported services
        max_service_length: Arrow labels longer than this are truncated
    """

    metadata = RendererMetadata(
        name="Mermaid Renderer",
        description="A renderer that visualizes module dependency graphs using Mermaid syntax.",
        version="0.1.0",
    )
    file_extension = "mmd"
    mime_type = "text/plain"
    description = "Mermaid flowchart diagram"

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
        output = "graph LR\n"
        for module in view.modules:
            output += self._render_node(module)
        output += "\n"
        for edge in view.resolved_edges:
            output += self._render_edge(edge)
        output += self._render_styling(view)
        return output

    def _render_node(self, module: ModuleNode) -> str:
        node_id = sanitize_identifier(module.short_name)
        label = module.short_name
        if self.show_exports and module.has_exports():
            exports = [short_name(e) for e in module.exports]
            label += "<br/>exports:<br/>" + "<br/>".join(exports)
        return f"    {node_id}[{label}]\n"

    def _render_edge(self, edge: ResolvedEdge) -> str:
        from_id = sanitize_identifier(edge.source.short_name)
        to_id = sanitize_identifier(edge.target.short_name)
        label = service_label(edge.edge, self.max_service_length) if self.show_services else ""
        if label:
            return f"    {from_id} --> |{label}| {to_id}\n"
        return f"    {from_id} --> {to_id}\n"

    def _render_styling(self, view: GraphView) -> str:
        independent = view.independent_names
        unused = view.unused_names

        # A node may carry both classes
        styling = "\n"
        for module in view.modules:
            node_id = sanitize_identifier(module.short_name)
            if module.class_name in independent:
                styling += f"    class {node_id} independent\n"
            if module.class_name in unused:
                styling += f"    class {node_id} unused\n"

        if independent or unused:
            styling += "\n"
        if independent:
            styling += f"    classDef independent {INDEPENDENT_STYLE}\n"
        if unused:
            styling += f"    classDef unused {UNUSED_STYLE}\n"
        return styling
