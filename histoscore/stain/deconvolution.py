"""Colour deconvolution of RGBA pixel buffers into H&E stain channels."""

from __future__ import annotations

import logging
from dataclasses import dataclass

import numpy as np

from histoscore.image import Image, validate_image
from histoscore.stain.config import StainConfig

CHANNEL_NAMES: tuple[str, str, str] = ("hematoxylin", "eosin", "residual")


@dataclass(frozen=True)
class StainChannels:
    """Per-pixel stain values for one image.

    Attributes:
        width: Image width in pixels.
        height: Image height in pixels.
        hematoxylin: Flat array of length ``width * height``.
        eosin: Flat array of length ``width * height``.
        residual: Flat array of length ``width * height``.
    """

    width: int
    height: int
    hematoxylin: np.ndarray
    eosin: np.ndarray
    residual: np.ndarray

    def channel(self, name: str) -> np.ndarray:
        """Return a flat channel by name."""

        if name not in CHANNEL_NAMES:
            raise KeyError(f"Unknown stain channel: {name}")
        return getattr(self, name)

    def channel_2d(self, name: str) -> np.ndarray:
        """Return a channel reshaped to (H, W)."""

        return self.channel(name).reshape((self.height, self.width))

    def map(self, func) -> "StainChannels":
        """Apply a function to every channel and return new channels.

        Args:
            func: Callable ``(flat_channel, width, height) -> flat_channel``.

        Returns:
            StainChannels holding the transformed arrays.
        """

        return StainChannels(
            width=self.width,
            height=self.height,
            **{name: func(self.channel(name), self.width, self.height) for name in CHANNEL_NAMES},
        )

    def freeze(self) -> "StainChannels":
        """Mark every channel array read-only and return self."""

        for name in CHANNEL_NAMES:
            self.channel(name).flags.writeable = False
        return self


class StainDeconvolver:
    """Convert RGBA pixels into optical-density stain channels.

    Each pixel's RGB intensities are converted to optical density
    ``-log10(I / 255 + eps)`` and projected onto the hematoxylin, eosin and
    residual stain vectors by dot product. Alpha is ignored.

    Args:
        config: Stain configuration object.
    """

    def __init__(self, config: StainConfig) -> None:
        self.config = config
        self.logger = logging.getLogger(self.__class__.__name__)
        self.stain_matrix = np.array(
            [config.hematoxylin_vector, config.eosin_vector, config.residual_vector],
            dtype=np.float64,
        )

    def deconvolve(self, image: Image) -> StainChannels:
        """Deconvolve an image into stain channels.

        Args:
            image: Input RGBA image.

        Returns:
            StainChannels with one value per pixel per stain.

        Raises:
            InputValidationError: If the image is malformed.
        """

        validate_image(image, self.config.min_image_size)

        rgb = np.frombuffer(image.pixels, dtype=np.uint8).reshape((-1, 4))[:, :3]
        optical_density = self._rgb_to_od(rgb)
        projected = optical_density @ self.stain_matrix.T

        self.logger.debug("Deconvolved %dx%d image into stain channels.", image.width, image.height)
        return StainChannels(
            width=image.width,
            height=image.height,
            hematoxylin=np.ascontiguousarray(projected[:, 0]),
            eosin=np.ascontiguousarray(projected[:, 1]),
            residual=np.ascontiguousarray(projected[:, 2]),
        )

    def _rgb_to_od(self, rgb: np.ndarray) -> np.ndarray:
        """Convert RGB intensities to optical density.

        Args:
            rgb: Array of shape (N, 3) with uint8 intensities.

        Returns:
            Optical density array of shape (N, 3).
        """

        transmittance = rgb.astype(np.float64) / 255.0
        return -np.log10(transmittance + self.config.epsilon)
