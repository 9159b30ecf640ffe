"""Layering models.

Defines Phase and Layering dataclasses for representing the initialization
order computed from module dependency edges.
"""

from dataclasses import dataclass, field
from typing import Optional

from ..graph.models import ModuleNode


@dataclass(frozen=True)
class Phase:
    """One initialization step: modules whose prerequisites are all earlier."""

    index: int
    modules: tuple[ModuleNode, ...] = ()
    is_cycle_fallback: bool = False  # catch-all for modules stuck in cycles

    @property
    def class_names(self) -> list[str]:
        return [m.class_name for m in self.modules]

    @property
    def short_names(self) -> list[str]:
        return [m.short_name for m in self.modules]


@dataclass
class Layering:
    """Top-level result of layer computation."""

    phases: list[Phase] = field(default_factory=list)
    # class name -> (export count, import count)
    counts: dict[str, tuple[int, int]] = field(default_factory=dict)

    @property
    def levels(self) -> dict[str, int]:
        """Class name -> phase index, in phase order."""
        return {m.class_name: phase.index for phase in self.phases for m in phase.modules}

    @property
    def has_cycles(self) -> bool:
        return bool(self.phases) and self.phases[-1].is_cycle_fallback

    @property
    def unplaced(self) -> list[str]:
        """Class names that could only be placed by the cycle fallback."""
        if self.has_cycles:
            return self.phases[-1].class_names
        return []

    def level_of(self, class_name: str) -> Optional[int]:
        return self.levels.get(class_name)

    def __len__(self) -> int:
        return len(self.phases)
