"""Window-based cellularity and spatial distribution extractor."""

from __future__ import annotations

import numpy as np

from histoscore.ensemble.algorithm import AlgorithmResult, Extractor
from histoscore.extractors.structures import threshold_mask


def window_densities(channel: np.ndarray, window: int, density_threshold: float) -> np.ndarray:
    """Fraction of dense pixels in each full, non-overlapping window.

    Partial windows at the right and bottom edges are ignored.

    Args:
        channel: 2D channel on the 0..255 scale.
        window: Window side length in pixels.
        density_threshold: Intensity at or above which a pixel counts as dense.

    Returns:
        Flat array of per-window dense-pixel fractions (row-major).
    """

    rows, cols = channel.shape[0] // window, channel.shape[1] // window
    if rows == 0 or cols == 0:
        return np.zeros(0, dtype=np.float64)
    cropped = threshold_mask(channel, density_threshold)[: rows * window, : cols * window]
    blocks = cropped.reshape(rows, window, cols, window)
    return blocks.mean(axis=(1, 3), dtype=np.float64).reshape(-1)


def quadrant_means(channel: np.ndarray) -> np.ndarray:
    """Mean intensity (scaled to [0, 1]) of the four image quadrants.

    Empty quadrants (for images one pixel wide or tall) contribute 0.
    """

    mid_row, mid_col = channel.shape[0] // 2, channel.shape[1] // 2
    quadrants = (
        channel[:mid_row, :mid_col],
        channel[:mid_row, mid_col:],
        channel[mid_row:, :mid_col],
        channel[mid_row:, mid_col:],
    )
    return np.array(
        [float(quadrant.mean()) / 255.0 if quadrant.size else 0.0 for quadrant in quadrants],
        dtype=np.float64,
    )


def multiscale_cellularity(
    window: int = 50,
    density_threshold: float = 150.0,
    min_density_fraction: float = 0.3,
    min_windows: int = 15,
) -> Extractor:
    """Cell density, chromatin texture and spatial heterogeneity.

    The hematoxylin channel is scanned in non-overlapping windows; windows
    whose dense-pixel fraction exceeds ``min_density_fraction`` count as
    cellular.

    Args:
        window: Window side length in pixels.
        density_threshold: Hematoxylin intensity marking nuclear pixels.
        min_density_fraction: Dense fraction for a window to count as cellular.
        min_windows: Minimum cellular windows required for a full analysis.

    Returns:
        Extractor function.
    """

    def extract(image, channels) -> AlgorithmResult:
        hematoxylin = channels.channel_2d("hematoxylin")
        densities = window_densities(hematoxylin, window, density_threshold)
        cellular = densities[densities > min_density_fraction]
        if cellular.size < min_windows:
            return AlgorithmResult.insufficient(
                score=0.2,
                confidence=0.3,
                error=(
                    "Insufficient cellular structures detected for multi-scale analysis "
                    f"({cellular.size} < {min_windows})."
                ),
                structure_count=int(cellular.size),
            )

        density_score = min(float(cellular.mean()), 1.0)
        variance = float(cellular.var())
        contrast = float(np.sqrt(variance))
        homogeneity = 1.0 / (1.0 + variance)
        texture_score = min((contrast + homogeneity) / 2.0, 1.0)

        distribution_variance = float(quadrant_means(hematoxylin).var())
        heterogeneity = min(distribution_variance * 20.0, 1.0)

        score = density_score * 0.4 + texture_score * 0.3 + heterogeneity * 0.3
        confidence = min((texture_score + density_score) / 2.0 + 0.1, 0.95)
        return AlgorithmResult.create(
            score=score,
            confidence=confidence,
            features={
                "windows_analyzed": int(densities.size),
                "cellular_windows": int(cellular.size),
                "cell_density_score": density_score,
                "chromatin_contrast": contrast,
                "chromatin_homogeneity": homogeneity,
                "chromatin_texture_score": texture_score,
                "distribution_variance": distribution_variance,
                "spatial_heterogeneity": heterogeneity,
            },
        )

    return extract
