"""Domain data type and the helpers used to declare domain tables."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable, Mapping

from histoscore.classifier.threshold import ThresholdTable
from histoscore.ensemble.aggregator import ConfidencePolicy
from histoscore.ensemble.algorithm import AlgorithmSpec, Extractor
from histoscore.extractors import (
    architectural_pattern,
    edge_density,
    eosinophilic_differentiation,
    intensity_profile,
    mitotic_activity,
    multiscale_cellularity,
    nuclear_morphometry,
)

# Reference extractor behind each algorithm kind. Morphological stages use the
# structural kinds; AI stages use the global descriptors.
EXTRACTOR_FACTORIES: dict[str, Callable[[], Extractor]] = {
    "cellularity": multiscale_cellularity,
    "nuclear": nuclear_morphometry,
    "architecture": architectural_pattern,
    "differentiation": eosinophilic_differentiation,
    "mitoses": mitotic_activity,
    "intensity": intensity_profile,
    "edges": edge_density,
}

STRUCTURAL_KINDS = frozenset({"cellularity", "nuclear", "architecture", "differentiation", "mitoses"})


@dataclass(frozen=True)
class DiagnosticDomain:
    """Configuration of one diagnostic domain.

    Attributes:
        name: Domain identifier.
        math_algorithms: Algorithms of the mathematical (morphological) ensemble.
        ai_algorithms: Algorithms of the AI ensemble.
        math_weight: Integration weight of the mathematical ensemble.
        ai_weight: Integration weight of the AI ensemble.
        category_table: Table producing the primary diagnostic category.
        secondary_tables: Additional label tables keyed by name.
        confidence_ceiling: Domain-specific confidence cap, or None for the global default.
        confidence_policy: Confidence policy, or None for the global default.
    """

    name: str
    math_algorithms: tuple[AlgorithmSpec, ...]
    ai_algorithms: tuple[AlgorithmSpec, ...]
    math_weight: float
    ai_weight: float
    category_table: ThresholdTable
    secondary_tables: Mapping[str, ThresholdTable] = field(default_factory=dict)
    confidence_ceiling: float | None = None
    confidence_policy: ConfidencePolicy | None = None


def stage(*entries: tuple[str, float, str], share: float = 100.0) -> tuple[AlgorithmSpec, ...]:
    """Build an ensemble stage from ``(name, weight, kind)`` entries.

    Args:
        entries: Algorithm name, declared weight and extractor kind.
        share: Percentage of the whole analysis the declared weights add up to.
            Weights are rescaled so the stage totals 100.

    Returns:
        Tuple of AlgorithmSpec in declaration order.

    Raises:
        KeyError: If an extractor kind is unknown.
    """

    scale = 100.0 / share
    return tuple(AlgorithmSpec(name, weight * scale, EXTRACTOR_FACTORIES[kind]()) for name, weight, kind in entries)


def morphological_stage(
    nuclear: str,
    cellularity: str,
    architecture: str,
    differentiation: str,
    mitoses: str,
) -> tuple[AlgorithmSpec, ...]:
    """Standard five-algorithm morphological stage with domain-specific names."""

    return stage(
        (cellularity, 32.7, "cellularity"),
        (nuclear, 25.4, "nuclear"),
        (architecture, 18.9, "architecture"),
        (differentiation, 14.6, "differentiation"),
        (mitoses, 8.4, "mitoses"),
    )


def table(name: str, *pairs: tuple[float, str]) -> ThresholdTable:
    return ThresholdTable.from_pairs(name, list(pairs))
