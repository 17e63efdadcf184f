"""Algorithm plug-in contract and the registry that executes it."""

from __future__ import annotations

import logging
import math
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass, field, replace
from typing import TYPE_CHECKING, Any, Callable, Iterable, Mapping

if TYPE_CHECKING:
    from histoscore.image import Image
    from histoscore.stain.deconvolution import StainChannels

DECLARED_WEIGHT_TOTAL = 100.0


def clamp_unit(value: float) -> float:
    """Clamp a value to [0, 1]; non-finite values map to 0."""

    value = float(value)
    if not math.isfinite(value):
        return 0.0
    return min(max(value, 0.0), 1.0)


@dataclass(frozen=True)
class AlgorithmResult:
    """Output of a single feature-extraction algorithm.

    Attributes:
        score: Suspicion score in [0, 1].
        confidence: Confidence in [0, 1].
        features: Named feature values reported for audit.
        error: Description of a data shortfall, or None when the algorithm
            found enough structure to run normally.
    """

    score: float
    confidence: float
    features: Mapping[str, Any] = field(default_factory=dict)
    error: str | None = None

    @classmethod
    def create(
        cls,
        score: float,
        confidence: float,
        features: Mapping[str, Any] | None = None,
        error: str | None = None,
    ) -> "AlgorithmResult":
        """Build a result with score and confidence clamped to [0, 1]."""

        return cls(
            score=clamp_unit(score),
            confidence=clamp_unit(confidence),
            features=dict(features or {}),
            error=error,
        )

    @classmethod
    def insufficient(cls, score: float, confidence: float, error: str, **features: Any) -> "AlgorithmResult":
        """Build a degraded result for images with too little structure."""

        return cls.create(score=score, confidence=confidence, features=features, error=error)

    @property
    def degraded(self) -> bool:
        return self.error is not None

    def clamped(self) -> "AlgorithmResult":
        """Return a copy with score and confidence forced into [0, 1]."""

        return replace(self, score=clamp_unit(self.score), confidence=clamp_unit(self.confidence))


Extractor = Callable[["Image", "StainChannels"], AlgorithmResult]


@dataclass(frozen=True)
class AlgorithmSpec:
    """A named, weighted feature-extraction algorithm.

    Attributes:
        name: Unique name within one ensemble stage.
        weight: Relative weight in (0, 100].
        extractor: Pure function ``(Image, StainChannels) -> AlgorithmResult``.
    """

    name: str
    weight: float
    extractor: Extractor

    def __post_init__(self) -> None:
        if not self.name:
            raise ValueError("AlgorithmSpec.name cannot be empty.")
        if not (0.0 < float(self.weight) <= DECLARED_WEIGHT_TOTAL):
            raise ValueError(f"Weight for {self.name!r} must lie in (0, 100], got {self.weight}.")


class AlgorithmRegistry:
    """Ordered, immutable set of algorithms forming one ensemble stage.

    Args:
        specs: Algorithm specifications in evaluation order.
        name: Stage name used in log messages.
    """

    def __init__(self, specs: Iterable[AlgorithmSpec], name: str = "ensemble") -> None:
        self.name = name
        self.logger = logging.getLogger(self.__class__.__name__)
        self._specs: tuple[AlgorithmSpec, ...] = tuple(specs)

        if not self._specs:
            raise ValueError(f"Registry {name!r} needs at least one algorithm.")
        names = [spec.name for spec in self._specs]
        duplicates = sorted({n for n in names if names.count(n) > 1})
        if duplicates:
            raise ValueError(f"Duplicate algorithm names in {name!r}: {duplicates}")

        if not math.isclose(self.declared_weight_total, DECLARED_WEIGHT_TOTAL, abs_tol=1e-6):
            self.logger.warning(
                "Weights in %s sum to %.3f instead of %.0f; scores will be normalized by the actual sum.",
                name,
                self.declared_weight_total,
                DECLARED_WEIGHT_TOTAL,
            )

    def __iter__(self):
        return iter(self._specs)

    def __len__(self) -> int:
        return len(self._specs)

    @property
    def specs(self) -> tuple[AlgorithmSpec, ...]:
        return self._specs

    @property
    def declared_weight_total(self) -> float:
        return float(sum(spec.weight for spec in self._specs))

    def weight_of(self, name: str) -> float:
        for spec in self._specs:
            if spec.name == name:
                return float(spec.weight)
        raise KeyError(name)

    def run(
        self,
        image: "Image",
        channels: "StainChannels",
        max_workers: int | None = None,
    ) -> dict[str, AlgorithmResult]:
        """Run every extractor against one image.

        Args:
            image: Input image.
            channels: Preprocessed stain channels (read-only).
            max_workers: Thread count; None or 1 runs sequentially.

        Returns:
            Mapping of algorithm name to clamped result, in registry order.
        """

        if max_workers is None or max_workers <= 1 or len(self._specs) == 1:
            outputs = [spec.extractor(image, channels) for spec in self._specs]
        else:
            with ThreadPoolExecutor(max_workers=max_workers) as executor:
                futures = [executor.submit(spec.extractor, image, channels) for spec in self._specs]
                outputs = [future.result() for future in futures]

        results: dict[str, AlgorithmResult] = {}
        for spec, output in zip(self._specs, outputs):
            if not isinstance(output, AlgorithmResult):
                raise TypeError(
                    f"Extractor {spec.name!r} returned {type(output).__name__}, expected AlgorithmResult."
                )
            results[spec.name] = output.clamped()
            if output.error is not None:
                self.logger.debug("%s/%s degraded: %s", self.name, spec.name, output.error)
        return results
