"""Layer inference for module initialization order.

Orders modules into phases from their dependency edges:
1. Build prerequisite and dependent sets (duplicate edges collapse)
2. Seed the first phase with modules that have no prerequisites
3. Kahn-style BFS, one phase per wave, each phase sorted by short name
4. Anything left over sits on a cycle (or depends on one) and goes into
   a single trailing fallback phase

Edges naming an unregistered module are ignored here; they never become
prerequisites.
"""

from __future__ import annotations

from ..graph.models import DependencyGraph, ModuleNode
from ..logging_config import get_logger
from .models import Layering, Phase

logger = get_logger(__name__)


def build_dependency_sets(
    graph: DependencyGraph,
) -> tuple[dict[str, set[str]], dict[str, set[str]]]:
    """Build prerequisite and dependent sets from the graph's edges.

    Args:
        graph: The module dependency graph

    Returns:
        Tuple of (prerequisites, dependents), both keyed by class name for
        every registered module. prerequisites[A] holds the distinct modules
        A depends on; dependents[B] holds the distinct modules depending on B.
    """
    prerequisites: dict[str, set[str]] = {m.class_name: set() for m in graph.get_modules()}
    dependents: dict[str, set[str]] = {m.class_name: set() for m in graph.get_modules()}

    for edge in graph.get_edges():
        if edge.from_module not in prerequisites or edge.to_module not in prerequisites:
            logger.debug(
                "Skipping edge with unknown endpoint: %s -> %s",
                edge.from_module,
                edge.to_module,
            )
            continue
        prerequisites[edge.from_module].add(edge.to_module)
        dependents[edge.to_module].add(edge.from_module)

    return prerequisites, dependents


def compute_levels(graph: DependencyGraph) -> Layering:
    """Partition modules into initialization phases.

    Every module lands in a phase strictly after all modules it depends
    on. Modules on a cycle, including self-loops, never become ready and
    are collected into one final phase instead of failing.

    Args:
        graph: The module dependency graph (not modified)

    Returns:
        Layering with ordered phases and per-module (exports, imports) counts
    """
    modules = {m.class_name: m for m in graph.get_modules()}
    counts = {name: (m.export_count, m.import_count) for name, m in modules.items()}

    if not modules:
        return Layering(phases=[], counts=counts)

    prerequisites, dependents = build_dependency_sets(graph)
    remaining = {name: len(prereqs) for name, prereqs in prerequisites.items()}

    phases: list[Phase] = []
    ready = [name for name, count in remaining.items() if count == 0]

    while ready:
        phases.append(Phase(index=len(phases), modules=_sorted_modules(ready, modules)))
        for name in ready:
            del remaining[name]

        next_ready: list[str] = []
        for name in ready:
            for dependent in dependents[name]:
                if dependent not in remaining:
                    continue
                remaining[dependent] -= 1
                if remaining[dependent] == 0:
                    next_ready.append(dependent)
        ready = next_ready

    if remaining:
        logger.info(
            "%d module(s) on dependency cycles placed in fallback phase %d",
            len(remaining),
            len(phases),
        )
        phases.append(
            Phase(
                index=len(phases),
                modules=_sorted_modules(remaining, modules),
                is_cycle_fallback=True,
            )
        )

    return Layering(phases=phases, counts=counts)


def _sorted_modules(names, modules: dict[str, ModuleNode]) -> tuple[ModuleNode, ...]:
    """Modules for the given class names ordered by short name."""
    return tuple(
        sorted((modules[n] for n in names), key=lambda m: (m.short_name, m.class_name))
    )
