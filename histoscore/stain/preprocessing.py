"""Denoising and contrast normalization of stain channels."""

from __future__ import annotations

import logging

import numpy as np

from histoscore.stain.config import StainConfig
from histoscore.stain.deconvolution import CHANNEL_NAMES, StainChannels

HISTOGRAM_BINS = 256


def mean_filter_3x3(channel: np.ndarray, width: int, height: int) -> np.ndarray:
    """Apply a 3x3 mean filter to a flat channel.

    Border pixels average only their in-bounds neighbours; there is no
    wraparound and no padding value.

    Args:
        channel: Flat channel of length ``width * height``.
        width: Image width.
        height: Image height.

    Returns:
        Filtered flat channel (float64).
    """

    grid = channel.reshape((height, width)).astype(np.float64, copy=False)
    totals = np.zeros((height, width), dtype=np.float64)
    counts = np.zeros((height, width), dtype=np.float64)

    for dy in (-1, 0, 1):
        for dx in (-1, 0, 1):
            dst_y, src_y = _shifted_slices(dy, height)
            dst_x, src_x = _shifted_slices(dx, width)
            totals[dst_y, dst_x] += grid[src_y, src_x]
            counts[dst_y, dst_x] += 1.0

    totals /= counts
    return totals.reshape(-1)


def _shifted_slices(offset: int, size: int) -> tuple[slice, slice]:
    """Return (destination, source) slices for a neighbour offset along one axis."""

    if offset < 0:
        return slice(-offset, size), slice(0, size + offset)
    if offset > 0:
        return slice(0, size - offset), slice(offset, size)
    return slice(0, size), slice(0, size)


def scale_optical_density(channel: np.ndarray, od_max: float) -> np.ndarray:
    """Map optical density onto the 0..255 intensity range.

    Args:
        channel: Flat optical-density channel.
        od_max: Optical density mapped to 255.

    Returns:
        Intensity channel clipped to [0, 255].
    """

    scaled = channel * (255.0 / od_max)
    np.clip(scaled, 0.0, 255.0, out=scaled)
    return scaled


def equalize_histogram(channel: np.ndarray) -> np.ndarray:
    """Histogram-equalize a 0..255 intensity channel.

    Values are quantized to 256 bins. Each pixel is remapped to
    ``round((cdf[v] - cdf_min) / (cdf_max - cdf_min) * 255)``. A channel with
    a single distinct quantized value is returned unchanged.

    Args:
        channel: Flat intensity channel.

    Returns:
        Equalized channel (float64) with values in [0, 255].
    """

    levels = np.clip(np.rint(channel), 0, HISTOGRAM_BINS - 1).astype(np.intp)
    histogram = np.bincount(levels, minlength=HISTOGRAM_BINS)
    cdf = np.cumsum(histogram)

    cdf_min = int(cdf[np.flatnonzero(histogram)[0]]) if levels.size else 0
    cdf_max = int(cdf[-1])
    if cdf_max == cdf_min:
        return np.array(channel, dtype=np.float64, copy=True)

    lookup = np.rint((cdf - cdf_min) / (cdf_max - cdf_min) * 255.0)
    np.clip(lookup, 0.0, 255.0, out=lookup)
    return lookup[levels]


class ChannelPreprocessor:
    """Denoise and contrast-normalize stain channels.

    Per channel: 3x3 mean filter, fixed optical-density to intensity
    scaling, then histogram equalization.

    Args:
        config: Stain configuration object.
    """

    def __init__(self, config: StainConfig) -> None:
        self.config = config
        self.logger = logging.getLogger(self.__class__.__name__)

    def process(self, channels: StainChannels) -> StainChannels:
        """Run the full preprocessing chain.

        Args:
            channels: Raw optical-density channels.

        Returns:
            Read-only preprocessed channels on the 0..255 scale.
        """

        processed = channels.map(self._process_channel)
        self.logger.debug("Preprocessed %d stain channels.", len(CHANNEL_NAMES))
        return processed.freeze()

    def denoise(self, channels: StainChannels) -> StainChannels:
        """Apply the 3x3 mean filter to every channel."""

        return channels.map(mean_filter_3x3)

    def enhance_contrast(self, channels: StainChannels) -> StainChannels:
        """Apply histogram equalization to every channel."""

        return channels.map(lambda channel, _w, _h: equalize_histogram(channel))

    def _process_channel(self, channel: np.ndarray, width: int, height: int) -> np.ndarray:
        denoised = mean_filter_3x3(channel, width, height)
        scaled = scale_optical_density(denoised, self.config.od_max)
        return equalize_histogram(scaled)
