"""Structure-based extractors for the mathematical ensemble.

Each factory binds domain parameters and returns a pure extractor
``(Image, StainChannels) -> AlgorithmResult``. When fewer structures than the
declared minimum are found the extractor returns a degraded result with
``error`` set instead of raising.
"""

from __future__ import annotations

from histoscore.ensemble.algorithm import AlgorithmResult, Extractor
from histoscore.extractors.structures import detect_structures, threshold_mask


def nuclear_morphometry(threshold: float = 120.0, min_area: int = 20, min_nuclei: int = 20) -> Extractor:
    """Nuclear pleomorphism from hematoxylin-dense connected components.

    Args:
        threshold: Hematoxylin intensity marking nuclear pixels.
        min_area: Minimum nucleus area in pixels.
        min_nuclei: Minimum nuclei required for a full analysis.

    Returns:
        Extractor function.
    """

    def extract(image, channels) -> AlgorithmResult:
        hematoxylin = channels.channel_2d("hematoxylin")
        stats = detect_structures(threshold_mask(hematoxylin, threshold), hematoxylin, min_area)
        if stats.count < min_nuclei:
            return AlgorithmResult.insufficient(
                score=0.1,
                confidence=0.2,
                error=f"Insufficient nuclei detected for morphometry analysis ({stats.count} < {min_nuclei}).",
                nuclei_count=stats.count,
            )

        pleomorphism = min(stats.area_cv, 1.0)
        contour_irregularity = min((1.0 - stats.mean_solidity) * 2.0, 1.0)
        nuclear_density = min(stats.area_fraction * 2.0, 1.0)
        score = (
            pleomorphism * 0.35
            + contour_irregularity * 0.25
            + stats.mean_eccentricity * 0.2
            + nuclear_density * 0.2
        )
        confidence = min(0.55 + 0.4 * min(stats.count / (4.0 * min_nuclei), 1.0), 0.95)
        return AlgorithmResult.create(
            score=score,
            confidence=confidence,
            features={
                **stats.as_features("nuclei"),
                "pleomorphism_index": pleomorphism,
                "contour_irregularity": contour_irregularity,
            },
        )

    return extract


def mitotic_activity(
    threshold: float = 230.0,
    min_area: int = 8,
    max_area: int = 120,
    min_figures: int = 3,
) -> Extractor:
    """Mitotic figure density from small, intensely hyperchromatic blobs.

    Args:
        threshold: Hematoxylin intensity marking condensed chromatin.
        min_area: Minimum figure area in pixels.
        max_area: Maximum figure area in pixels.
        min_figures: Minimum figures required for a full analysis.

    Returns:
        Extractor function.
    """

    def extract(image, channels) -> AlgorithmResult:
        hematoxylin = channels.channel_2d("hematoxylin")
        stats = detect_structures(threshold_mask(hematoxylin, threshold), hematoxylin, min_area, max_area)
        if stats.count < min_figures:
            return AlgorithmResult.insufficient(
                score=0.1,
                confidence=0.2,
                error=f"Insufficient mitotic figures detected ({stats.count} < {min_figures}).",
                mitotic_count=stats.count,
            )

        per_10k_pixels = stats.count / (hematoxylin.size / 10_000.0)
        hyperchromasia = (stats.mean_intensity - threshold) / max(255.0 - threshold, 1.0)
        score = min(per_10k_pixels / 10.0, 1.0) * 0.7 + min(max(hyperchromasia, 0.0), 1.0) * 0.3
        confidence = min(0.5 + 0.4 * min(stats.count / (10.0 * min_figures), 1.0), 0.9)
        return AlgorithmResult.create(
            score=score,
            confidence=confidence,
            features={
                **stats.as_features("mitotic"),
                "mitotic_index_per_10k_px": per_10k_pixels,
            },
        )

    return extract


def architectural_pattern(threshold: float = 80.0, min_area: int = 30, min_spaces: int = 5) -> Extractor:
    """Glandular / alveolar architecture from low-eosin luminal spaces.

    Args:
        threshold: Eosin intensity below which pixels count as luminal space.
        min_area: Minimum space area in pixels.
        min_spaces: Minimum spaces required for a full analysis.

    Returns:
        Extractor function.
    """

    def extract(image, channels) -> AlgorithmResult:
        eosin = channels.channel_2d("eosin")
        stats = detect_structures(threshold_mask(eosin, threshold, above=False), eosin, min_area)
        if stats.count < min_spaces:
            return AlgorithmResult.insufficient(
                score=0.15,
                confidence=0.25,
                error=f"Insufficient luminal spaces detected for architecture analysis ({stats.count} < {min_spaces}).",
                space_count=stats.count,
            )

        # Loss of open spaces and irregular lumina both indicate disrupted architecture.
        space_loss = 1.0 - min(stats.area_fraction * 3.0, 1.0)
        irregularity = min(stats.area_cv, 1.0)
        score = space_loss * 0.4 + irregularity * 0.3 + (1.0 - stats.mean_solidity) * 0.3
        confidence = min(0.5 + 0.4 * min(stats.count / (4.0 * min_spaces), 1.0), 0.92)
        return AlgorithmResult.create(
            score=score,
            confidence=confidence,
            features={
                **stats.as_features("space"),
                "space_loss": space_loss,
                "lumen_irregularity": irregularity,
            },
        )

    return extract


def eosinophilic_differentiation(threshold: float = 200.0, min_area: int = 25, min_regions: int = 3) -> Extractor:
    """Keratinization-like differentiation from compact, intensely eosinophilic regions.

    Args:
        threshold: Eosin intensity marking keratinized material.
        min_area: Minimum region area in pixels.
        min_regions: Minimum regions required for a full analysis.

    Returns:
        Extractor function.
    """

    def extract(image, channels) -> AlgorithmResult:
        eosin = channels.channel_2d("eosin")
        stats = detect_structures(threshold_mask(eosin, threshold), eosin, min_area)
        if stats.count < min_regions:
            return AlgorithmResult.insufficient(
                score=0.15,
                confidence=0.25,
                error=f"Insufficient eosinophilic regions detected ({stats.count} < {min_regions}).",
                region_count=stats.count,
            )

        coverage = min(stats.area_fraction * 4.0, 1.0)
        score = coverage * 0.5 + stats.mean_solidity * 0.5
        confidence = min(0.5 + 0.35 * min(stats.count / (5.0 * min_regions), 1.0), 0.9)
        return AlgorithmResult.create(
            score=score,
            confidence=confidence,
            features={**stats.as_features("eosinophilic"), "eosinophilic_coverage": coverage},
        )

    return extract
