"""
modgraph - module dependency graph analysis and Mermaid rendering.

Orders modules into initialization phases, labels each one as
infrastructure or domain, and renders the result as Mermaid flowcharts,
class diagrams and timelines.
"""

__version__ = "0.1.0"

from .api import analyze, render
from .architecture import Layering, Phase, compute_levels
from .exceptions import DuplicateModuleError, ModgraphError
from .graph import DependencyEdge, DependencyGraph, GraphBuilder, ModuleNode, load_graph
from .semantics import Category, Classification, ModuleClassifier

__all__ = [
    "analyze",
    "render",
    "Category",
    "Classification",
    "DependencyEdge",
    "DependencyGraph",
    "DuplicateModuleError",
    "GraphBuilder",
    "Layering",
    "ModgraphError",
    "ModuleClassifier",
    "ModuleNode",
    "Phase",
    "compute_levels",
    "load_graph",
]
