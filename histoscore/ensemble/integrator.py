"""Second-stage integration of the mathematical and AI ensembles."""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass

from histoscore.ensemble.aggregator import EnsembleResult
from histoscore.ensemble.algorithm import clamp_unit


@dataclass(frozen=True)
class IntegratedResult:
    """Final score and confidence before classification.

    Attributes:
        final_score: Weighted combination of both ensemble scores.
        confidence: Capped minimum of both ensemble confidences.
        math_contribution: ``math.overall_score * math_weight``.
        ai_contribution: ``ai.overall_score * ai_weight``.
    """

    final_score: float
    confidence: float
    math_contribution: float
    ai_contribution: float


class TwoStageIntegrator:
    """Combine the mathematical and AI ensemble results.

    Args:
        math_weight: Weight of the mathematical ensemble.
        ai_weight: Weight of the AI ensemble; ``math_weight + ai_weight == 1``.
        confidence_ceiling: Upper bound applied to the final confidence.
    """

    def __init__(self, math_weight: float, ai_weight: float, confidence_ceiling: float) -> None:
        for label, weight in (("math_weight", math_weight), ("ai_weight", ai_weight)):
            if not 0.0 <= weight <= 1.0:
                raise ValueError(f"{label} must lie in [0, 1], got {weight}.")
        if not math.isclose(math_weight + ai_weight, 1.0, rel_tol=0.0, abs_tol=1e-9):
            raise ValueError(f"math_weight + ai_weight must equal 1, got {math_weight + ai_weight}.")
        if not 0.0 < confidence_ceiling <= 1.0:
            raise ValueError(f"confidence_ceiling must lie in (0, 1], got {confidence_ceiling}.")

        self.math_weight = float(math_weight)
        self.ai_weight = float(ai_weight)
        self.confidence_ceiling = float(confidence_ceiling)
        self.logger = logging.getLogger(self.__class__.__name__)

    def integrate(self, math_result: EnsembleResult, ai_result: EnsembleResult) -> IntegratedResult:
        """Integrate two ensemble results.

        Args:
            math_result: Mathematical ensemble output.
            ai_result: AI ensemble output.

        Returns:
            IntegratedResult with clamped score and capped confidence.
        """

        math_contribution = math_result.overall_score * self.math_weight
        ai_contribution = ai_result.overall_score * self.ai_weight
        final_score = clamp_unit(math_contribution + ai_contribution)
        confidence = min(math_result.confidence, ai_result.confidence, self.confidence_ceiling)

        self.logger.debug("Integrated score=%.4f confidence=%.4f", final_score, confidence)
        return IntegratedResult(
            final_score=final_score,
            confidence=clamp_unit(confidence),
            math_contribution=math_contribution,
            ai_contribution=ai_contribution,
        )
