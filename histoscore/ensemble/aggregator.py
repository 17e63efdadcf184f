"""Weighted combination of algorithm outputs into one ensemble result."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Mapping

from histoscore.ensemble.algorithm import AlgorithmRegistry, AlgorithmResult, clamp_unit


class ConfidencePolicy(str, Enum):
    """How algorithm confidences are combined.

    MEAN: arithmetic mean over all algorithms.
    CONSERVATIVE: minimum confidence of the two highest-weighted algorithms.
    """

    MEAN = "mean"
    CONSERVATIVE = "conservative"

    @classmethod
    def parse(cls, value: "ConfidencePolicy | str") -> "ConfidencePolicy":
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).lower())
        except ValueError:
            choices = ", ".join(policy.value for policy in cls)
            raise ValueError(f"Unsupported confidence policy: {value!r} (expected one of {choices})") from None


@dataclass(frozen=True)
class EnsembleResult:
    """Combined output of one ensemble stage.

    Attributes:
        overall_score: Weight-normalized mean score in [0, 1].
        confidence: Combined confidence in [0, 1].
        breakdown: Per-algorithm results in registry order.
    """

    overall_score: float
    confidence: float
    breakdown: Mapping[str, AlgorithmResult] = field(default_factory=dict)

    @property
    def degraded_algorithms(self) -> tuple[str, ...]:
        return tuple(name for name, result in self.breakdown.items() if result.degraded)


class WeightedEnsembleAggregator:
    """Combine algorithm results with their declared weights.

    ``overall_score = sum(score_i * weight_i) / sum(weight_i)``; the divisor
    is the actual weight sum, so tables whose weights do not add up to 100
    still produce a convex combination.

    Args:
        policy: Confidence policy name or enum member.
    """

    def __init__(self, policy: ConfidencePolicy | str = ConfidencePolicy.MEAN) -> None:
        self.policy = ConfidencePolicy.parse(policy)
        self.logger = logging.getLogger(self.__class__.__name__)

    def aggregate(self, registry: AlgorithmRegistry, results: Mapping[str, AlgorithmResult]) -> EnsembleResult:
        """Aggregate per-algorithm results for a registry.

        Args:
            registry: Registry the results were produced by.
            results: Mapping of algorithm name to result.

        Returns:
            EnsembleResult with breakdown in registry order.

        Raises:
            KeyError: If a registered algorithm has no result.
        """

        missing = [spec.name for spec in registry if spec.name not in results]
        if missing:
            raise KeyError(f"Missing results for algorithms: {missing}")

        weighted_sum = 0.0
        weight_total = 0.0
        for spec in registry:
            weighted_sum += results[spec.name].score * float(spec.weight)
            weight_total += float(spec.weight)

        overall_score = clamp_unit(weighted_sum / weight_total)
        confidence = clamp_unit(self._combine_confidence(registry, results))
        breakdown = {spec.name: results[spec.name] for spec in registry}

        self.logger.debug(
            "%s: score=%.4f confidence=%.4f (%s policy)",
            registry.name,
            overall_score,
            confidence,
            self.policy.value,
        )
        return EnsembleResult(overall_score=overall_score, confidence=confidence, breakdown=breakdown)

    def _combine_confidence(self, registry: AlgorithmRegistry, results: Mapping[str, AlgorithmResult]) -> float:
        if self.policy is ConfidencePolicy.CONSERVATIVE:
            # Stable sort keeps registry order among equal weights.
            ranked = sorted(registry, key=lambda spec: -float(spec.weight))
            return min(results[spec.name].confidence for spec in ranked[:2])

        confidences = [results[spec.name].confidence for spec in registry]
        return sum(confidences) / len(confidences)
