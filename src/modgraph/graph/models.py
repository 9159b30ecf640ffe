"""Data models for the module dependency graph.

Two kinds of relationship live here and must not be confused:
  - declared imports: metadata carried on each ModuleNode, used by the
    classifier and the independent-module query
  - dependency edges: the resolved structural graph, used by layering,
    hub detection and the unused-module query
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import Iterable, Iterator, Optional

from ..exceptions import DuplicateModuleError
from ..logging_config import get_logger

logger = get_logger(__name__)

_SEPARATORS = re.compile(r"[\\./]")


def short_name(identifier: str) -> str:
    """Return the final segment of a namespaced identifier.

    ``App\\Service\\UserService`` and ``app.service.UserService`` both
    yield ``UserService``.
    """
    return _SEPARATORS.split(identifier)[-1]


@dataclass(frozen=True)
class ModuleNode:
    """A registered module: a unit exporting and importing services."""

    class_name: str  # globally unique, namespaced
    short_name: str  # display name
    exports: tuple[str, ...] = ()
    imports: tuple[str, ...] = ()

    def __post_init__(self) -> None:
        # Accept any iterable from callers, store immutable sequences
        object.__setattr__(self, "exports", tuple(self.exports))
        object.__setattr__(self, "imports", tuple(self.imports))

    @property
    def export_count(self) -> int:
        return len(self.exports)

    @property
    def import_count(self) -> int:
        return len(self.imports)

    def has_exports(self) -> bool:
        return bool(self.exports)

    def has_imports(self) -> bool:
        return bool(self.imports)


@dataclass(frozen=True)
class DependencyEdge:
    """A directed link from an importing module to the module it depends on."""

    from_module: str
    to_module: str
    imported_services: tuple[str, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "imported_services", tuple(self.imported_services))


@dataclass(frozen=True)
class ResolvedEdge:
    """An edge with both endpoints looked up in the graph.

    ``source`` or ``target`` is None when the edge names a module that was
    never registered. Such edges are kept so callers can report them, but
    renderers and layering skip them.
    """

    edge: DependencyEdge
    source: Optional[ModuleNode]
    target: Optional[ModuleNode]

    @property
    def is_resolved(self) -> bool:
        return self.source is not None and self.target is not None


@dataclass
class DependencyGraph:
    """Modules keyed by class identifier plus an ordered list of edges.

    Module iteration follows registration order and edge iteration follows
    insertion order, so every derived view is deterministic. All queries
    recompute from the current state; nothing is cached.
    """

    _modules: dict[str, ModuleNode] = field(default_factory=dict)
    _edges: list[DependencyEdge] = field(default_factory=list)

    @classmethod
    def from_parts(
        cls,
        modules: Iterable[ModuleNode],
        edges: Iterable[DependencyEdge] = (),
    ) -> DependencyGraph:
        """Build a graph from ready-made modules and edges."""
        graph = cls()
        for module in modules:
            graph.add_module(module)
        graph.set_edges(edges)
        return graph

    # ── Mutation (construction time only) ────────────────────────────

    def add_module(self, module: ModuleNode) -> None:
        """Register a module.

        Raises:
            DuplicateModuleError: If the class identifier is already registered
        """
        if module.class_name in self._modules:
            raise DuplicateModuleError(module.class_name)
        self._modules[module.class_name] = module

    def add_edge(self, edge: DependencyEdge) -> None:
        """Append an edge. Endpoints are not validated."""
        self._edges.append(edge)

    def set_edges(self, edges: Iterable[DependencyEdge]) -> None:
        """Replace the whole edge list."""
        self._edges = list(edges)

    # ── Queries ──────────────────────────────────────────────────────

    def get_module(self, class_name: str) -> Optional[ModuleNode]:
        return self._modules.get(class_name)

    def get_modules(self) -> list[ModuleNode]:
        return list(self._modules.values())

    def get_edges(self) -> list[DependencyEdge]:
        return list(self._edges)

    def get_incoming_edges(self, class_name: str) -> list[DependencyEdge]:
        return [e for e in self._edges if e.to_module == class_name]

    def get_outgoing_edges(self, class_name: str) -> list[DependencyEdge]:
        return [e for e in self._edges if e.from_module == class_name]

    def get_independent_modules(self) -> list[ModuleNode]:
        """Modules that declare no imports."""
        return [m for m in self._modules.values() if not m.has_imports()]

    def get_unused_modules(self) -> list[ModuleNode]:
        """Modules never targeted by any edge."""
        targeted = {e.to_module for e in self._edges}
        return [m for m in self._modules.values() if m.class_name not in targeted]

    def resolve_edges(self) -> Iterator[ResolvedEdge]:
        """Yield every edge with its endpoints looked up, in edge order."""
        for edge in self._edges:
            source = self._modules.get(edge.from_module)
            target = self._modules.get(edge.to_module)
            if source is None or target is None:
                logger.debug(
                    "Unresolved edge %s -> %s", edge.from_module, edge.to_module
                )
            yield ResolvedEdge(edge=edge, source=source, target=target)

    def __len__(self) -> int:
        return len(self._modules)

    def __contains__(self, class_name: object) -> bool:
        return class_name in self._modules
