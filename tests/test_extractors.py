"""Tests for the reference feature extractors."""

from __future__ import annotations

import numpy as np
import pytest
from skimage import draw

from histoscore.extractors import (
    architectural_pattern,
    detect_structures,
    edge_density,
    eosinophilic_differentiation,
    intensity_profile,
    mitotic_activity,
    multiscale_cellularity,
    nuclear_morphometry,
    threshold_mask,
)
from histoscore.extractors.cellularity import quadrant_means, window_densities
from histoscore.stain.deconvolution import StainChannels
from tests.helpers import make_uniform_image


def make_channels(hematoxylin: np.ndarray, eosin: np.ndarray | None = None) -> StainChannels:
    height, width = hematoxylin.shape
    if eosin is None:
        eosin = np.full_like(hematoxylin, 100.0)
    return StainChannels(
        width=width,
        height=height,
        hematoxylin=hematoxylin.astype(np.float64).reshape(-1),
        eosin=eosin.astype(np.float64).reshape(-1),
        residual=np.zeros(width * height, dtype=np.float64),
    ).freeze()


def disks(size: int, background: float, value: float, radius: int, step: int, limit: int | None = None) -> np.ndarray:
    channel = np.full((size, size), background, dtype=np.float64)
    centers = [(row, col) for row in range(step // 2, size, step) for col in range(step // 2, size, step)]
    for center in centers[:limit]:
        rows, cols = draw.disk(center, radius, shape=channel.shape)
        channel[rows, cols] = value
    return channel


IMAGE = make_uniform_image()
FLAT = make_channels(np.full((64, 64), 180.0), np.full((64, 64), 180.0))


class TestStructures:
    """Mask and connected-component helpers."""

    def test_flat_channel_gives_empty_mask(self):
        channel = np.full((8, 8), 200.0)

        assert not threshold_mask(channel, 100.0).any()
        assert not threshold_mask(channel, 250.0, above=False).any()

    def test_mask_selects_pixels_beyond_threshold_and_median(self):
        channel = np.array([[10.0, 50.0, 50.0], [50.0, 200.0, 130.0]])

        np.testing.assert_array_equal(threshold_mask(channel, 120.0), channel >= 130.0)
        np.testing.assert_array_equal(threshold_mask(channel, 40.0, above=False), channel == 10.0)

    def test_detect_structures_filters_by_area(self):
        mask = np.zeros((20, 20), dtype=bool)
        mask[2:7, 2:7] = True
        mask[12, 12] = True
        channel = np.where(mask, 200.0, 0.0)

        stats = detect_structures(mask, channel, min_area=4)

        assert stats.count == 1
        assert stats.mean_area == 25.0
        assert stats.area_fraction == pytest.approx(25.0 / 400.0)
        assert stats.mean_solidity == pytest.approx(1.0)
        assert stats.mean_intensity == 200.0

    def test_line_shaped_structure_is_solid(self):
        mask = np.zeros((10, 10), dtype=bool)
        mask[5, 1:9] = True

        stats = detect_structures(mask, mask.astype(np.float64), min_area=2)

        assert stats.count == 1
        assert stats.mean_solidity == 1.0

    def test_empty_mask(self):
        stats = detect_structures(np.zeros((5, 5), dtype=bool), np.zeros((5, 5)), min_area=1)

        assert stats.count == 0
        assert stats.as_features("nuclei")["nuclei_count"] == 0


class TestMorphologyExtractors:
    """Structure-based extractors and their degraded results."""

    @pytest.mark.parametrize(
        ("factory", "score", "confidence"),
        [
            (nuclear_morphometry, 0.1, 0.2),
            (mitotic_activity, 0.1, 0.2),
            (architectural_pattern, 0.15, 0.25),
            (eosinophilic_differentiation, 0.15, 0.25),
            (multiscale_cellularity, 0.2, 0.3),
        ],
    )
    def test_flat_channels_degrade(self, factory, score, confidence):
        result = factory()(IMAGE, FLAT)

        assert result.degraded
        assert result.score == score
        assert result.confidence == confidence

    def test_nuclear_morphometry_on_regular_nuclei(self):
        channels = make_channels(disks(120, 100.0, 220.0, radius=4, step=24))

        result = nuclear_morphometry()(IMAGE, channels)

        assert result.error is None
        assert result.features["nuclei_count"] == 25
        assert result.features["pleomorphism_index"] == pytest.approx(0.0)
        assert 0.0 <= result.score <= 1.0
        assert 0.55 <= result.confidence <= 0.95

    def test_too_few_nuclei_reports_count(self):
        channels = make_channels(disks(120, 100.0, 220.0, radius=4, step=24, limit=5))

        result = nuclear_morphometry()(IMAGE, channels)

        assert result.degraded
        assert result.features == {"nuclei_count": 5}
        assert "5 < 20" in result.error

    def test_mitotic_activity_counts_small_dense_figures(self):
        channels = make_channels(disks(100, 100.0, 245.0, radius=2, step=20, limit=6))

        result = mitotic_activity()(IMAGE, channels)

        assert result.error is None
        assert result.features["mitotic_count"] == 6
        assert result.features["mitotic_index_per_10k_px"] == pytest.approx(6.0)

    def test_large_blobs_are_not_mitoses(self):
        channels = make_channels(disks(100, 100.0, 245.0, radius=9, step=25))

        assert mitotic_activity()(IMAGE, channels).degraded

    def test_architectural_pattern_finds_luminal_spaces(self):
        eosin = disks(120, 150.0, 20.0, radius=6, step=40)
        channels = make_channels(np.full((120, 120), 100.0), eosin)

        result = architectural_pattern()(IMAGE, channels)

        assert result.error is None
        assert result.features["space_count"] == 9

    def test_eosinophilic_regions(self):
        eosin = disks(120, 100.0, 240.0, radius=5, step=40)
        channels = make_channels(np.full((120, 120), 100.0), eosin)

        result = eosinophilic_differentiation()(IMAGE, channels)

        assert result.error is None
        assert result.features["eosinophilic_count"] == 9


class TestCellularity:
    """Window-based cellularity."""

    def test_window_densities_ignore_partial_windows(self):
        channel = np.zeros((120, 110))
        channel[:50, :] = 200.0

        densities = window_densities(channel, 50, 150.0)

        np.testing.assert_allclose(densities, [1.0, 1.0, 0.0, 0.0])

    def test_image_smaller_than_window(self):
        assert window_densities(np.zeros((10, 10)), 50, 150.0).size == 0

    def test_quadrant_means_single_pixel(self):
        np.testing.assert_allclose(quadrant_means(np.full((1, 1), 255.0)), [0.0, 0.0, 0.0, 1.0])

    def test_dense_half_is_analyzed(self):
        hematoxylin = np.full((300, 300), 50.0)
        hematoxylin[:150, :] = 200.0

        result = multiscale_cellularity()(IMAGE, make_channels(hematoxylin))

        assert result.error is None
        assert result.features["cellular_windows"] == 18
        assert result.features["cell_density_score"] == pytest.approx(1.0)
        assert result.features["spatial_heterogeneity"] > 0.0


class TestGlobalExtractors:
    """Whole-image descriptors always produce a full result."""

    def test_flat_channels_have_low_scores(self):
        profile = intensity_profile()(IMAGE, FLAT)
        edges = edge_density()(IMAGE, FLAT)

        assert profile.error is None and edges.error is None
        assert profile.score == pytest.approx(0.0)
        assert profile.confidence == pytest.approx(0.3)
        assert edges.score == pytest.approx(0.0)
        assert edges.confidence == pytest.approx(0.4)

    def test_edges_are_detected(self):
        channels = make_channels(disks(120, 0.0, 255.0, radius=8, step=30))

        result = edge_density()(IMAGE, channels)

        assert result.features["edge_fraction"] > 0.0
        assert result.score > 0.0

    def test_contrast_raises_profile_score(self):
        contrasted = make_channels(disks(120, 0.0, 255.0, radius=8, step=30))

        assert intensity_profile()(IMAGE, contrasted).score > intensity_profile()(IMAGE, FLAT).score
