"""Dependency graph construction from code or from a JSON document."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Iterable, Optional

from ..exceptions import GraphLoadError
from .models import DependencyEdge, DependencyGraph, ModuleNode, short_name


class GraphBuilder:
    """Fluent builder for DependencyGraph.

    Example:
        >>> graph = (
        ...     GraphBuilder()
        ...     .module("app.DbModule", exports=["app.db.Connection"])
        ...     .module("app.UserModule", imports=["app.db.Connection"])
        ...     .edge("app.UserModule", "app.DbModule", ["app.db.Connection"])
        ...     .build()
        ... )
    """

    def __init__(self) -> None:
        self._modules: list[ModuleNode] = []
        self._edges: list[DependencyEdge] = []

    def module(
        self,
        class_name: str,
        short: Optional[str] = None,
        exports: Iterable[str] = (),
        imports: Iterable[str] = (),
    ) -> GraphBuilder:
        self._modules.append(
            ModuleNode(
                class_name=class_name,
                short_name=short if short is not None else short_name(class_name),
                exports=tuple(exports),
                imports=tuple(imports),
            )
        )
        return self

    def edge(
        self, from_module: str, to_module: str, services: Iterable[str] = ()
    ) -> GraphBuilder:
        self._edges.append(DependencyEdge(from_module, to_module, tuple(services)))
        return self

    def build(self) -> DependencyGraph:
        """Create the graph.

        Raises:
            DuplicateModuleError: If two modules share a class identifier
        """
        return DependencyGraph.from_parts(self._modules, self._edges)


def graph_from_dict(data: Any, source: str = "<dict>") -> DependencyGraph:
    """Build a graph from a decoded JSON document.

    Expected shape::

        {"modules": [{"class": "...", "short_name": "...",
                      "exports": [...], "imports": [...]}],
         "edges": [{"from": "...", "to": "...", "services": [...]}]}

    Raises:
        GraphLoadError: If the document does not have that shape
        DuplicateModuleError: If two modules share a class identifier
    """
    if not isinstance(data, dict):
        raise GraphLoadError(source, "top-level value must be an object")

    builder = GraphBuilder()

    for i, entry in enumerate(_list_field(data, "modules", source)):
        if not isinstance(entry, dict) or not isinstance(entry.get("class"), str):
            raise GraphLoadError(source, f"modules[{i}] needs a string 'class'")
        short = entry.get("short_name")
        if short is not None and not isinstance(short, str):
            raise GraphLoadError(source, f"modules[{i}].short_name must be a string")
        builder.module(
            entry["class"],
            short=short,
            exports=_string_list(entry, "exports", f"modules[{i}]", source),
            imports=_string_list(entry, "imports", f"modules[{i}]", source),
        )

    for i, entry in enumerate(_list_field(data, "edges", source)):
        if not isinstance(entry, dict):
            raise GraphLoadError(source, f"edges[{i}] must be an object")
        from_module, to_module = entry.get("from"), entry.get("to")
        if not isinstance(from_module, str) or not isinstance(to_module, str):
            raise GraphLoadError(source, f"edges[{i}] needs string 'from' and 'to'")
        builder.edge(
            from_module,
            to_module,
            _string_list(entry, "services", f"edges[{i}]", source),
        )

    return builder.build()


def load_graph(path: Path) -> DependencyGraph:
    """Read a graph JSON file.

    Raises:
        GraphLoadError: If the file cannot be read or decoded
    """
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as e:
        raise GraphLoadError(str(path), str(e)) from e
    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        raise GraphLoadError(str(path), f"invalid JSON: {e}") from e
    return graph_from_dict(data, source=str(path))


def graph_to_dict(graph: DependencyGraph) -> dict[str, Any]:
    """Inverse of graph_from_dict, used for JSON output."""
    return {
        "modules": [
            {
                "class": m.class_name,
                "short_name": m.short_name,
                "exports": list(m.exports),
                "imports": list(m.imports),
            }
            for m in graph.get_modules()
        ],
        "edges": [
            {
                "from": e.from_module,
                "to": e.to_module,
                "services": list(e.imported_services),
            }
            for e in graph.get_edges()
        ],
    }


def _list_field(data: dict, key: str, source: str) -> list:
    value = data.get(key, [])
    if not isinstance(value, list):
        raise GraphLoadError(source, f"'{key}' must be a list")
    return value


def _string_list(entry: dict, key: str, where: str, source: str) -> list[str]:
    value = entry.get(key, [])
    if not isinstance(value, list) or not all(isinstance(v, str) for v in value):
        raise GraphLoadError(source, f"{where}.{key} must be a list of strings")
    return value
