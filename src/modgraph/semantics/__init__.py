"""Module classification: infrastructure vs domain."""

from .classifier import ModuleClassifier
from .keywords import DEFAULT_DOMAIN_KEYWORDS, DEFAULT_INFRA_KEYWORDS
from .models import Category, Classification, ModuleScore

__all__ = [
    "Category",
    "Classification",
    "DEFAULT_DOMAIN_KEYWORDS",
    "DEFAULT_INFRA_KEYWORDS",
    "ModuleClassifier",
    "ModuleScore",
]
