"""Connected-structure detection shared by the morphological extractors."""

from __future__ import annotations

import math
from dataclasses import dataclass

import numpy as np
from skimage import measure


@dataclass(frozen=True)
class StructureStats:
    """Summary statistics for detected structures.

    Attributes:
        count: Number of structures after area filtering.
        mean_area: Mean structure area in pixels.
        area_cv: Coefficient of variation of structure areas.
        area_fraction: Total structure area divided by the image area.
        mean_solidity: Mean ratio of area to convex hull area.
        mean_eccentricity: Mean eccentricity of the fitted ellipses.
        mean_intensity: Mean channel value inside the structures.
    """

    count: int
    mean_area: float = 0.0
    area_cv: float = 0.0
    area_fraction: float = 0.0
    mean_solidity: float = 0.0
    mean_eccentricity: float = 0.0
    mean_intensity: float = 0.0

    def as_features(self, prefix: str) -> dict[str, float | int]:
        return {
            f"{prefix}_count": self.count,
            f"{prefix}_mean_area": self.mean_area,
            f"{prefix}_area_cv": self.area_cv,
            f"{prefix}_area_fraction": self.area_fraction,
            f"{prefix}_mean_solidity": self.mean_solidity,
            f"{prefix}_mean_eccentricity": self.mean_eccentricity,
            f"{prefix}_mean_intensity": self.mean_intensity,
        }


def threshold_mask(channel: np.ndarray, threshold: float, above: bool = True) -> np.ndarray:
    """Binary mask of pixels at or above (or strictly below) a threshold.

    Pixels must also lie strictly above (or below) the channel median. After
    histogram equalization the dominant tissue level sits high on the scale,
    and a flat channel yields an empty mask.

    Args:
        channel: 2D channel on the 0..255 scale.
        threshold: Intensity threshold.
        above: Select ``>= threshold`` when True, ``< threshold`` otherwise.

    Returns:
        Boolean mask.
    """

    median = float(np.median(channel))
    if above:
        return (channel >= threshold) & (channel > median)
    return (channel < threshold) & (channel < median)


def detect_structures(
    mask: np.ndarray,
    channel: np.ndarray,
    min_area: int,
    max_area: int | None = None,
) -> StructureStats:
    """Label connected components and summarize those within an area band.

    Args:
        mask: Binary mask of candidate structures.
        channel: 2D channel used for intensity statistics.
        min_area: Minimum area (in pixels) to keep a structure.
        max_area: Optional maximum area (in pixels).

    Returns:
        StructureStats for the kept structures.
    """

    labeled = measure.label(mask, connectivity=2)
    regions = [
        region
        for region in measure.regionprops(labeled)
        if region.area >= min_area and (max_area is None or region.area <= max_area)
    ]
    if not regions:
        return StructureStats(count=0)

    areas = np.array([region.area for region in regions], dtype=np.float64)
    solidity = np.array([_safe_solidity(region) for region in regions], dtype=np.float64)
    eccentricity = np.array([region.eccentricity for region in regions], dtype=np.float64)
    coords = np.concatenate([region.coords for region in regions], axis=0)
    intensity = float(channel[coords[:, 0], coords[:, 1]].mean())

    mean_area = float(areas.mean())
    return StructureStats(
        count=len(regions),
        mean_area=mean_area,
        area_cv=float(areas.std(ddof=0) / mean_area) if mean_area > 0 else 0.0,
        area_fraction=float(areas.sum() / mask.size),
        mean_solidity=float(solidity.mean()),
        mean_eccentricity=float(eccentricity.mean()),
        mean_intensity=intensity,
    )


def _safe_solidity(region) -> float:
    """Return region solidity, treating degenerate hulls as fully solid.

    Single-row, single-column and collinear regions have no 2D convex hull.
    """

    min_row, min_col, max_row, max_col = region.bbox
    if max_row - min_row < 2 or max_col - min_col < 2:
        return 1.0
    value = float(region.solidity)
    return value if math.isfinite(value) else 1.0
