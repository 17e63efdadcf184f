"""End-to-end analysis pipeline: stain separation to diagnostic label."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Mapping

from histoscore.classifier.threshold import ThresholdClassifier
from histoscore.domains import DiagnosticDomain
from histoscore.ensemble.aggregator import ConfidencePolicy, EnsembleResult, WeightedEnsembleAggregator
from histoscore.ensemble.algorithm import AlgorithmRegistry, AlgorithmResult
from histoscore.ensemble.config import EnsembleConfig, load_ensemble_config
from histoscore.ensemble.integrator import IntegratedResult, TwoStageIntegrator
from histoscore.image import Image, validate_image
from histoscore.stain.config import StainConfig, load_stain_config
from histoscore.stain.deconvolution import StainDeconvolver
from histoscore.stain.preprocessing import ChannelPreprocessor


@dataclass(frozen=True)
class DiagnosticResult:
    """Final output of one analysis.

    Attributes:
        domain: Name of the diagnostic domain.
        final_score: Integrated score in [0, 1].
        confidence: Capped integrated confidence in [0, 1].
        category: Label from the domain's category table.
        secondary_labels: Labels from the domain's secondary tables.
        math_ensemble: Mathematical ensemble result with per-algorithm breakdown.
        ai_ensemble: AI ensemble result with per-algorithm breakdown.
        integration: Contributions of both ensembles to the final score.
    """

    domain: str
    final_score: float
    confidence: float
    category: str
    secondary_labels: Mapping[str, str] = field(default_factory=dict)
    math_ensemble: EnsembleResult | None = None
    ai_ensemble: EnsembleResult | None = None
    integration: IntegratedResult | None = None

    def to_dict(self) -> dict[str, Any]:
        """Return a JSON-ready representation.

        Returns:
            Nested dictionary of plain Python values.
        """

        payload: dict[str, Any] = {
            "domain": self.domain,
            "final_score": self.final_score,
            "confidence": self.confidence,
            "category": self.category,
            "secondary_labels": dict(self.secondary_labels),
        }
        if self.integration is not None:
            payload["integration"] = {
                "math_contribution": self.integration.math_contribution,
                "ai_contribution": self.integration.ai_contribution,
            }
        for key, ensemble in (("math_ensemble", self.math_ensemble), ("ai_ensemble", self.ai_ensemble)):
            if ensemble is not None:
                payload[key] = _ensemble_to_dict(ensemble)
        return payload


def _ensemble_to_dict(ensemble: EnsembleResult) -> dict[str, Any]:
    return {
        "overall_score": ensemble.overall_score,
        "confidence": ensemble.confidence,
        "breakdown": {name: _algorithm_to_dict(result) for name, result in ensemble.breakdown.items()},
    }


def _algorithm_to_dict(result: AlgorithmResult) -> dict[str, Any]:
    payload: dict[str, Any] = {
        "score": result.score,
        "confidence": result.confidence,
        "features": {name: _plain(value) for name, value in result.features.items()},
    }
    if result.error is not None:
        payload["error"] = result.error
    return payload


def _plain(value: Any) -> Any:
    """Convert numpy scalars to built-in Python values."""

    if hasattr(value, "item"):
        return value.item()
    return value


class DiagnosticPipeline:
    """Run the full analysis for one diagnostic domain.

    Stages: validation, stain deconvolution, channel preprocessing, the
    mathematical and AI ensembles, two-stage integration, and threshold
    classification. The pipeline keeps no per-call state, so one instance
    can serve concurrent callers.

    Args:
        domain: Diagnostic domain configuration.
        stain_config: Stain configuration; loaded from the environment when None.
        ensemble_config: Ensemble configuration; loaded from the environment when None.
    """

    def __init__(
        self,
        domain: DiagnosticDomain,
        stain_config: StainConfig | None = None,
        ensemble_config: EnsembleConfig | None = None,
    ) -> None:
        self.domain = domain
        self.stain_config = stain_config or load_stain_config()
        self.ensemble_config = ensemble_config or load_ensemble_config()
        self.logger = logging.getLogger(self.__class__.__name__)

        self.deconvolver = StainDeconvolver(self.stain_config)
        self.preprocessor = ChannelPreprocessor(self.stain_config)
        self.math_registry = AlgorithmRegistry(domain.math_algorithms, name=f"{domain.name}.math")
        self.ai_registry = AlgorithmRegistry(domain.ai_algorithms, name=f"{domain.name}.ai")

        policy = domain.confidence_policy or ConfidencePolicy.parse(self.ensemble_config.confidence_policy)
        self.aggregator = WeightedEnsembleAggregator(policy)

        ceiling = domain.confidence_ceiling
        if ceiling is None:
            ceiling = self.ensemble_config.confidence_ceiling
        self.integrator = TwoStageIntegrator(domain.math_weight, domain.ai_weight, ceiling)
        self.classifier = ThresholdClassifier(domain.category_table, domain.secondary_tables)

    def analyze(self, image: Image) -> DiagnosticResult:
        """Analyze one image.

        Args:
            image: Decoded RGBA image.

        Returns:
            DiagnosticResult for the image.

        Raises:
            InputValidationError: If the image is malformed. Raised before any stage runs.
        """

        validate_image(image, self.stain_config.min_image_size)

        channels = self.preprocessor.process(self.deconvolver.deconvolve(image))

        max_workers = self.ensemble_config.max_workers
        math_results = self.math_registry.run(image, channels, max_workers=max_workers)
        ai_results = self.ai_registry.run(image, channels, max_workers=max_workers)

        math_ensemble = self.aggregator.aggregate(self.math_registry, math_results)
        ai_ensemble = self.aggregator.aggregate(self.ai_registry, ai_results)
        integrated = self.integrator.integrate(math_ensemble, ai_ensemble)
        category, secondary_labels = self.classifier.classify(integrated.final_score)

        degraded = len(math_ensemble.degraded_algorithms) + len(ai_ensemble.degraded_algorithms)
        self.logger.info(
            "%s analysis of %dx%d image: score=%.4f confidence=%.4f category=%r (%d degraded algorithms)",
            self.domain.name,
            image.width,
            image.height,
            integrated.final_score,
            integrated.confidence,
            category,
            degraded,
        )
        return DiagnosticResult(
            domain=self.domain.name,
            final_score=integrated.final_score,
            confidence=integrated.confidence,
            category=category,
            secondary_labels=secondary_labels,
            math_ensemble=math_ensemble,
            ai_ensemble=ai_ensemble,
            integration=integrated,
        )
