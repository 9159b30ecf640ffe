"""Mermaid timeline renderer.

Groups modules into initialization phases from the layering engine, split
into an Infrastructure section and a Domain section by the classifier.
A phase with no modules of a section's category is left out of that
section, so phase numbers can skip.
"""

from __future__ import annotations

from typing import Optional

from ..architecture import Layering
from ..graph.models import DependencyGraph, ModuleNode
from ..semantics import Category, ModuleClassifier
from .base import GraphView, RendererMetadata, build_view

CONTINUATION_PREFIX = "            : "


class MermaidTimeline:
    """Render module boot order as a Mermaid timeline.

    Args:
        title: Diagram title, omitted when empty
        show_counts: Append export and import counts to each module
        classifier: Classifier for the two sections, defaults to the
            built-in keyword vocabularies
    """

    metadata = RendererMetadata(
        name="Mermaid Timeline Renderer",
        description="Renders module boot order as a Mermaid timeline grouped by dependency levels.",
        version="0.1.0",
    )
    file_extension = "mmd"
    mime_type = "text/plain"
    description = "Mermaid timeline"

    def __init__(
        self,
        title: str = "Module initialization timeline",
        show_counts: bool = True,
        classifier: Optional[ModuleClassifier] = None,
    ):
        self.title = title
        self.show_counts = show_counts
        self.classifier = classifier or ModuleClassifier()

    def render(self, graph: DependencyGraph) -> str:
        return self.render_view(build_view(graph, self.classifier))

    def render_view(self, view: GraphView) -> str:
        out = "timeline\n"
        if self.title:
            out += f"title {self.title}\n"

        out += "section Infrastructure\n"
        out += self._emit_phases(view, Category.INFRASTRUCTURE)
        out += "section Domain\n"
        out += self._emit_phases(view, Category.DOMAIN)
        return out

    def module_label(self, module: ModuleNode, layering: Layering) -> str:
        if self.show_counts:
            export_count, import_count = layering.counts.get(module.class_name, (0, 0))
            return f"{module.short_name} (exports:{export_count}, imports:{import_count})"
        return module.short_name

    def _emit_phases(self, view: GraphView, category: Category) -> str:
        labels = view.classification.labels
        out = ""
        for phase in view.layering.phases:
            members = [m for m in phase.modules if labels.get(m.class_name) is category]
            if not members:
                continue
            prefix = f"  Phase {phase.index} : "
            for module in members:
                out += prefix + self.module_label(module, view.layering) + "\n"
                prefix = CONTINUATION_PREFIX
        return out
