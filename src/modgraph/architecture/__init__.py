"""Layering: initialization phases from module dependency edges."""

from .layers import build_dependency_sets, compute_levels
from .models import Layering, Phase

__all__ = [
    "Layering",
    "Phase",
    "build_dependency_sets",
    "compute_levels",
]
