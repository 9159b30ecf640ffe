"""Exception hierarchy for modgraph."""

from .base import ModgraphError
from .config import ConfigurationError, InvalidConfigError
from .graph import DuplicateModuleError, GraphError, GraphLoadError

__all__ = [
    "ModgraphError",
    "GraphError",
    "DuplicateModuleError",
    "GraphLoadError",
    "ConfigurationError",
    "InvalidConfigError",
]
