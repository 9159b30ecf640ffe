"""
Render every diagram variant for the example graphs into mermaid/ folders.

Run from repo root: python examples/generate_diagrams.py
"""

from pathlib import Path

from modgraph.graph import load_graph
from modgraph.renderers import MermaidClassDiagram, MermaidFlowchart, MermaidTimeline

HERE = Path(__file__).parent

VARIANTS = {
    "full.mmd": MermaidFlowchart(),
    "clean.mmd": MermaidFlowchart(show_exports=False, show_services=True, max_service_length=30),
    "minimal.mmd": MermaidFlowchart(show_exports=False, show_services=False),
    "class_full.mmd": MermaidClassDiagram(),
    "class_clean.mmd": MermaidClassDiagram(show_exports=False, show_services=True, max_service_length=30),
    "class_minimal.mmd": MermaidClassDiagram(show_exports=False, show_services=False),
    "timeline.mmd": MermaidTimeline(),
}


def main() -> None:
    for example in ("ecommerce", "microservices"):
        graph = load_graph(HERE / example / "graph.json")
        out_dir = HERE / example / "mermaid"
        out_dir.mkdir(parents=True, exist_ok=True)
        for filename, renderer in VARIANTS.items():
            (out_dir / f"{example}_{filename}").write_text(renderer.render(graph), encoding="utf-8")
        print(f"Wrote {len(VARIANTS)} diagrams to {out_dir}")


if __name__ == "__main__":
    main()
