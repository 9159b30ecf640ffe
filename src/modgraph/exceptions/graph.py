"""Graph construction exceptions: duplicate registration, unreadable input."""

from .base import ModgraphError


class GraphError(ModgraphError):
    """Base class for dependency-graph errors."""

    pass


class DuplicateModuleError(GraphError):
    """Raised when a module class identifier is registered twice."""

    def __init__(self, class_name: str):
        super().__init__(
            f"Module already registered: {class_name}",
            details={"class_name": class_name},
        )
        self.class_name = class_name


class GraphLoadError(GraphError):
    """Raised when a serialized graph document cannot be turned into a graph."""

    def __init__(self, source: str, reason: str):
        super().__init__(
            f"Cannot load dependency graph from {source}",
            details={"source": source, "reason": reason},
        )
        self.source = source
        self.reason = reason
