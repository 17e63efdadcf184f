"""Whole-image descriptors for the AI ensemble.

These extractors summarize the channels globally instead of detecting
structures, so they always produce a full result. Flat, featureless
channels yield low scores and low confidence.
"""

from __future__ import annotations

import numpy as np
from skimage import filters

from histoscore.ensemble.algorithm import AlgorithmResult, Extractor

HALF_RANGE = 127.5


def intensity_profile() -> Extractor:
    """Stain contrast and separation between the hematoxylin and eosin channels.

    Returns:
        Extractor function.
    """

    def extract(image, channels) -> AlgorithmResult:
        hematoxylin = channels.hematoxylin
        eosin = channels.eosin

        contrast_h = min(float(hematoxylin.std()) / HALF_RANGE, 1.0)
        contrast_e = min(float(eosin.std()) / HALF_RANGE, 1.0)
        separation = abs(float(hematoxylin.mean()) - float(eosin.mean())) / 255.0

        score = contrast_h * 0.5 + contrast_e * 0.3 + separation * 0.2
        confidence = min(0.3 + 0.6 * (contrast_h + contrast_e) / 2.0, 0.9)
        return AlgorithmResult.create(
            score=score,
            confidence=confidence,
            features={
                "hematoxylin_contrast": contrast_h,
                "eosin_contrast": contrast_e,
                "stain_separation": separation,
            },
        )

    return extract


def edge_density(edge_threshold: float = 0.1) -> Extractor:
    """Fraction of strong Sobel edges in the hematoxylin channel.

    Args:
        edge_threshold: Sobel magnitude (on the [0, 1] intensity scale) counted as an edge.

    Returns:
        Extractor function.
    """

    def extract(image, channels) -> AlgorithmResult:
        hematoxylin = channels.channel_2d("hematoxylin") / 255.0
        magnitude = filters.sobel(hematoxylin)
        edge_fraction = float(np.mean(magnitude > edge_threshold))
        mean_magnitude = float(magnitude.mean())

        score = min(edge_fraction * 2.0, 1.0) * 0.7 + min(mean_magnitude * 4.0, 1.0) * 0.3
        confidence = min(0.4 + edge_fraction, 0.85)
        return AlgorithmResult.create(
            score=score,
            confidence=confidence,
            features={
                "edge_fraction": edge_fraction,
                "mean_edge_magnitude": mean_magnitude,
            },
        )

    return extract
