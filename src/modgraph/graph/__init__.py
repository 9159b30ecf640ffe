"""Module dependency graph: nodes, edges, structural queries."""

from .builder import GraphBuilder, graph_from_dict, graph_to_dict, load_graph
from .models import DependencyEdge, DependencyGraph, ModuleNode, ResolvedEdge, short_name

__all__ = [
    "DependencyEdge",
    "DependencyGraph",
    "GraphBuilder",
    "ModuleNode",
    "ResolvedEdge",
    "graph_from_dict",
    "graph_to_dict",
    "load_graph",
    "short_name",
]
