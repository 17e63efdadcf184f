"""Algorithm registry, weighted ensembles and two-stage integration."""

from histoscore.ensemble.aggregator import ConfidencePolicy, EnsembleResult, WeightedEnsembleAggregator
from histoscore.ensemble.algorithm import (
    AlgorithmRegistry,
    AlgorithmResult,
    AlgorithmSpec,
    Extractor,
    clamp_unit,
)
from histoscore.ensemble.config import EnsembleConfig, load_ensemble_config
from histoscore.ensemble.integrator import IntegratedResult, TwoStageIntegrator

__all__ = [
    "AlgorithmRegistry",
    "AlgorithmResult",
    "AlgorithmSpec",
    "ConfidencePolicy",
    "EnsembleConfig",
    "EnsembleResult",
    "Extractor",
    "IntegratedResult",
    "TwoStageIntegrator",
    "WeightedEnsembleAggregator",
    "clamp_unit",
    "load_ensemble_config",
]
