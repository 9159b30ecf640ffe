"""Infrastructure vs domain classification.

Scores each module on structural signals and keyword hits, then picks the
higher score. Ties go to domain.

Signals:
  - no declared imports: infra +3, otherwise domain +2
  - two or more incoming edges (a hub): infra +2
  - short name contains an infra keyword: infra +1
  - short name contains a domain keyword: domain +1
  - first export whose short name contains any keyword: +1 to that side,
    infra keywords checked before domain keywords
  - three or more exports: domain +1
"""

from __future__ import annotations

from collections import Counter
from typing import Iterable, Optional

from ..graph.models import DependencyGraph, ModuleNode, short_name
from ..logging_config import get_logger
from .keywords import DEFAULT_DOMAIN_KEYWORDS, DEFAULT_INFRA_KEYWORDS
from .models import Classification, ModuleScore

logger = get_logger(__name__)

# Scoring weights
ROOT_INFRA_POINTS = 3
IMPORTER_DOMAIN_POINTS = 2
HUB_INFRA_POINTS = 2
HUB_MIN_INCOMING = 2
KEYWORD_POINTS = 1
MANY_EXPORTS_DOMAIN_POINTS = 1
MANY_EXPORTS_MIN = 3


def _normalize(keywords: Iterable[str]) -> tuple[str, ...]:
    # An empty keyword would match every name
    return tuple(kw.lower() for kw in keywords if kw)


class ModuleClassifier:
    """Heuristic two-way module classifier.

    Args:
        infra_keywords: Infrastructure vocabulary, None for the defaults
        domain_keywords: Domain vocabulary, None for the defaults

    Empty vocabularies are allowed; scoring then relies on structure only.
    """

    def __init__(
        self,
        infra_keywords: Optional[Iterable[str]] = None,
        domain_keywords: Optional[Iterable[str]] = None,
    ):
        self.infra_keywords = _normalize(
            DEFAULT_INFRA_KEYWORDS if infra_keywords is None else infra_keywords
        )
        self.domain_keywords = _normalize(
            DEFAULT_DOMAIN_KEYWORDS if domain_keywords is None else domain_keywords
        )

    def classify(self, graph: DependencyGraph) -> Classification:
        """Label every module in the graph.

        Args:
            graph: The module dependency graph (not modified)

        Returns:
            Classification covering every module, in module order
        """
        incoming = Counter(edge.to_module for edge in graph.get_edges())
        result = Classification()

        for module in graph.get_modules():
            score = self.score(module, incoming[module.class_name])
            result.modules[module.class_name] = module
            result.scores[module.class_name] = score
            result.labels[module.class_name] = score.category

        logger.debug(
            "Classified %d modules: %d infrastructure, %d domain",
            len(result.labels),
            len(result.infrastructure),
            len(result.domain),
        )
        return result

    def score(self, module: ModuleNode, incoming_degree: int) -> ModuleScore:
        """Compute infra and domain scores for a single module."""
        infra = 0
        domain = 0

        if module.import_count == 0:
            infra += ROOT_INFRA_POINTS
        else:
            domain += IMPORTER_DOMAIN_POINTS

        if incoming_degree >= HUB_MIN_INCOMING:
            infra += HUB_INFRA_POINTS

        name = module.short_name.lower()
        if self._matches(name, self.infra_keywords):
            infra += KEYWORD_POINTS
        if self._matches(name, self.domain_keywords):
            domain += KEYWORD_POINTS

        # Only the first export that hits any keyword counts
        for export in module.exports:
            export_name = short_name(export).lower()
            if self._matches(export_name, self.infra_keywords):
                infra += KEYWORD_POINTS
                break
            if self._matches(export_name, self.domain_keywords):
                domain += KEYWORD_POINTS
                break

        if module.export_count >= MANY_EXPORTS_MIN:
            domain += MANY_EXPORTS_DOMAIN_POINTS

        return ModuleScore(infra=infra, domain=domain)

    @staticmethod
    def _matches(name: str, keywords: tuple[str, ...]) -> bool:
        return any(kw in name for kw in keywords)
