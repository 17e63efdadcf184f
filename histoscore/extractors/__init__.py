"""Reference feature-extraction plug-ins.

Every factory returns a pure ``(Image, StainChannels) -> AlgorithmResult``
function with its domain parameters bound.
"""

from histoscore.extractors.cellularity import multiscale_cellularity
from histoscore.extractors.global_features import edge_density, intensity_profile
from histoscore.extractors.morphology import (
    architectural_pattern,
    eosinophilic_differentiation,
    mitotic_activity,
    nuclear_morphometry,
)
from histoscore.extractors.structures import StructureStats, detect_structures, threshold_mask

__all__ = [
    "StructureStats",
    "architectural_pattern",
    "detect_structures",
    "edge_density",
    "eosinophilic_differentiation",
    "intensity_profile",
    "mitotic_activity",
    "multiscale_cellularity",
    "nuclear_morphometry",
    "threshold_mask",
]
