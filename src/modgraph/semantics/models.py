"""Classification models.

Every module gets exactly one Category. Ties between the two scores go to
DOMAIN so that infrastructure is never over-reported.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional

from ..graph.models import ModuleNode


class Category(Enum):
    """Module category."""

    INFRASTRUCTURE = "infrastructure"
    DOMAIN = "domain"


@dataclass(frozen=True)
class ModuleScore:
    """Accumulated heuristic scores for one module.

    Attributes:
        infra: Points for infrastructure signals
        domain: Points for domain signals
    """

    infra: int = 0
    domain: int = 0

    @property
    def category(self) -> Category:
        if self.infra > self.domain:
            return Category.INFRASTRUCTURE
        return Category.DOMAIN


@dataclass
class Classification:
    """Partition of a graph's modules into infrastructure and domain.

    ``labels`` and ``scores`` follow the graph's module order.
    """

    modules: dict[str, ModuleNode] = field(default_factory=dict)
    labels: dict[str, Category] = field(default_factory=dict)
    scores: dict[str, ModuleScore] = field(default_factory=dict)

    @property
    def infrastructure(self) -> list[ModuleNode]:
        return self._members(Category.INFRASTRUCTURE)

    @property
    def domain(self) -> list[ModuleNode]:
        return self._members(Category.DOMAIN)

    def category_of(self, class_name: str) -> Optional[Category]:
        return self.labels.get(class_name)

    def is_infrastructure(self, class_name: str) -> bool:
        return self.labels.get(class_name) is Category.INFRASTRUCTURE

    def _members(self, category: Category) -> list[ModuleNode]:
        return [self.modules[name] for name, label in self.labels.items() if label is category]
