"""Tests for stain deconvolution and channel preprocessing."""

from __future__ import annotations

import math

import numpy as np
import pytest

from histoscore.errors import InputValidationError
from histoscore.image import Image
from histoscore.stain import (
    CHANNEL_NAMES,
    ChannelPreprocessor,
    StainConfig,
    StainDeconvolver,
    equalize_histogram,
    load_stain_config,
    mean_filter_3x3,
    scale_optical_density,
)


class TestStainDeconvolver:
    """Optical density projection onto stain vectors."""

    def test_uniform_image_gives_uniform_channels(self, stain_config, uniform_image):
        channels = StainDeconvolver(stain_config).deconvolve(uniform_image)

        for name in CHANNEL_NAMES:
            values = channels.channel(name)
            assert values.shape == (16,)
            assert np.all(values == values[0])

    def test_projection_matches_formula(self, stain_config):
        image = Image(width=1, height=1, pixels=bytes([128, 64, 200, 255]))

        channels = StainDeconvolver(stain_config).deconvolve(image)

        od = [-math.log10(value / 255.0 + stain_config.epsilon) for value in (128, 64, 200)]
        expected_h = sum(o * v for o, v in zip(od, stain_config.hematoxylin_vector))
        expected_e = sum(o * v for o, v in zip(od, stain_config.eosin_vector))
        expected_r = sum(o * v for o, v in zip(od, stain_config.residual_vector))
        assert channels.hematoxylin[0] == pytest.approx(expected_h, rel=1e-12)
        assert channels.eosin[0] == pytest.approx(expected_e, rel=1e-12)
        assert channels.residual[0] == pytest.approx(expected_r, rel=1e-12)

    def test_black_pixel_is_finite(self, stain_config):
        image = Image(width=1, height=1, pixels=bytes([0, 0, 0, 255]))

        channels = StainDeconvolver(stain_config).deconvolve(image)

        assert np.isfinite(channels.hematoxylin[0])
        assert channels.hematoxylin[0] == pytest.approx(6.0 * sum(stain_config.hematoxylin_vector))

    def test_alpha_is_ignored(self, stain_config):
        opaque = Image(width=1, height=1, pixels=bytes([90, 60, 150, 255]))
        transparent = Image(width=1, height=1, pixels=bytes([90, 60, 150, 0]))
        deconvolver = StainDeconvolver(stain_config)

        assert deconvolver.deconvolve(opaque).eosin[0] == deconvolver.deconvolve(transparent).eosin[0]

    def test_short_buffer_fails_before_any_computation(self, stain_config, monkeypatch):
        deconvolver = StainDeconvolver(stain_config)

        def fail(*_args, **_kwargs):
            raise AssertionError("optical density computed for invalid input")

        monkeypatch.setattr(deconvolver, "_rgb_to_od", fail)
        with pytest.raises(InputValidationError):
            deconvolver.deconvolve(Image(width=4, height=4, pixels=bytes(4 * 4 * 4 - 1)))

    def test_channel_2d_shape(self, stain_config):
        image = Image(width=3, height=2, pixels=bytes(3 * 2 * 4))

        channels = StainDeconvolver(stain_config).deconvolve(image)

        assert channels.channel_2d("eosin").shape == (2, 3)
        with pytest.raises(KeyError):
            channels.channel("dab")


class TestMeanFilter:
    """3x3 mean filter with in-bounds border averaging."""

    def test_border_pixels_average_in_bounds_neighbours(self):
        grid = np.arange(1, 10, dtype=np.float64)

        filtered = mean_filter_3x3(grid, 3, 3).reshape((3, 3))

        assert filtered[0, 0] == pytest.approx((1 + 2 + 4 + 5) / 4)
        assert filtered[0, 1] == pytest.approx((1 + 2 + 3 + 4 + 5 + 6) / 6)
        assert filtered[1, 1] == pytest.approx(5.0)
        assert filtered[2, 2] == pytest.approx((5 + 6 + 8 + 9) / 4)

    def test_single_pixel_is_unchanged(self):
        assert mean_filter_3x3(np.array([7.5]), 1, 1)[0] == 7.5

    def test_single_row(self):
        filtered = mean_filter_3x3(np.array([0.0, 3.0, 6.0]), 3, 1)

        assert filtered.tolist() == pytest.approx([1.5, 3.0, 4.5])

    def test_input_is_not_modified(self):
        grid = np.arange(16, dtype=np.float64)
        original = grid.copy()

        mean_filter_3x3(grid, 4, 4)

        assert np.array_equal(grid, original)


class TestHistogramEqualization:
    """Histogram equalization on the 0..255 scale."""

    def test_single_valued_channel_maps_to_itself(self):
        channel = np.full(16, 41.73, dtype=np.float64)

        equalized = equalize_histogram(channel)

        assert np.array_equal(equalized, channel)
        assert not np.any(np.isnan(equalized))
        assert equalized is not channel

    def test_two_levels_stretch_to_full_range(self):
        channel = np.array([10.0, 10.0, 200.0, 200.0])

        assert equalize_histogram(channel).tolist() == [0.0, 0.0, 255.0, 255.0]

    def test_output_range_and_monotonicity(self):
        channel = np.linspace(0.0, 255.0, 1000)

        equalized = equalize_histogram(channel)

        assert equalized.min() >= 0.0
        assert equalized.max() == 255.0
        assert np.all(np.diff(equalized) >= 0.0)

    def test_scale_optical_density_clips(self):
        scaled = scale_optical_density(np.array([-0.1, 1.5, 9.0]), od_max=3.0)

        assert scaled.tolist() == pytest.approx([0.0, 127.5, 255.0])


class TestChannelPreprocessor:
    """Full preprocessing chain."""

    def test_process_returns_read_only_channels_in_range(self, stain_config, tissue_image):
        raw = StainDeconvolver(stain_config).deconvolve(tissue_image)

        processed = ChannelPreprocessor(stain_config).process(raw)

        for name in CHANNEL_NAMES:
            values = processed.channel(name)
            assert values.shape == raw.channel(name).shape
            assert values.min() >= 0.0 and values.max() <= 255.0
            assert not values.flags.writeable

    def test_uniform_channels_stay_uniform(self, stain_config, uniform_image):
        raw = StainDeconvolver(stain_config).deconvolve(uniform_image)

        processed = ChannelPreprocessor(stain_config).process(raw)

        for name in CHANNEL_NAMES:
            values = processed.channel(name)
            assert values.max() - values.min() < 1e-9

    def test_denoise_and_enhance_helpers(self, stain_config, tissue_image):
        preprocessor = ChannelPreprocessor(stain_config)
        raw = StainDeconvolver(stain_config).deconvolve(tissue_image)

        denoised = preprocessor.denoise(raw)
        enhanced = preprocessor.enhance_contrast(denoised.map(lambda c, _w, _h: scale_optical_density(c, 3.0)))

        assert enhanced.hematoxylin.max() == 255.0


class TestStainConfig:
    """Environment-driven stain configuration."""

    def test_defaults(self):
        config = StainConfig()

        assert config.hematoxylin_vector == (0.65, 0.70, 0.29)
        assert config.min_image_size == 1

    def test_environment_override(self, monkeypatch):
        monkeypatch.setenv("HISTOSCORE_STAIN_OD_MAX", "2.5")
        monkeypatch.setenv("HISTOSCORE_STAIN_EOSIN_VECTOR", "[0.1, 0.9, 0.2]")

        config = load_stain_config()

        assert config.od_max == 2.5
        assert config.eosin_vector == (0.1, 0.9, 0.2)
