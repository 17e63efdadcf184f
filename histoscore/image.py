"""Immutable RGBA image container handed to the pipeline."""

from __future__ import annotations

from dataclasses import dataclass

import numpy as np

from histoscore.errors import InputValidationError

RGBA_CHANNELS = 4


@dataclass(frozen=True)
class Image:
    """Decoded image as a flat RGBA byte buffer.

    Attributes:
        width: Image width in pixels.
        height: Image height in pixels.
        pixels: Row-major RGBA bytes of length ``width * height * 4``.
    """

    width: int
    height: int
    pixels: bytes

    @classmethod
    def from_array(cls, array: np.ndarray) -> "Image":
        """Build an image from a uint8 RGB or RGBA array.

        Args:
            array: Array with shape (H, W, 3) or (H, W, 4) and dtype uint8.

        Returns:
            Image instance. RGB input receives an opaque alpha channel.

        Raises:
            InputValidationError: If the array shape or dtype is unsupported.
        """

        array = np.asarray(array)
        if array.dtype != np.uint8:
            raise InputValidationError(f"Expected uint8 pixel array, got dtype={array.dtype}.")
        if array.ndim != 3 or array.shape[2] not in (3, RGBA_CHANNELS):
            raise InputValidationError(f"Expected (H, W, 3) or (H, W, 4) array, got shape={array.shape}.")

        height, width = int(array.shape[0]), int(array.shape[1])
        if array.shape[2] == 3:
            alpha = np.full((height, width, 1), 255, dtype=np.uint8)
            array = np.concatenate([array, alpha], axis=2)
        return cls(width=width, height=height, pixels=np.ascontiguousarray(array).tobytes())

    def as_array(self) -> np.ndarray:
        """Return a read-only (H, W, 4) uint8 view of the pixel buffer."""

        validate_image(self)
        view = np.frombuffer(self.pixels, dtype=np.uint8)
        return view.reshape((self.height, self.width, RGBA_CHANNELS))

    @property
    def pixel_count(self) -> int:
        return self.width * self.height


def validate_image(image: Image, min_size: int = 1) -> None:
    """Check that an image is well formed.

    Args:
        image: Image to validate.
        min_size: Minimum allowed width and height in pixels.

    Raises:
        InputValidationError: On non-integer or non-positive dimensions, a
            dimension below ``min_size``, a pixel buffer that is not
            bytes-like, or a buffer length mismatch.
    """

    if not isinstance(image.width, int) or not isinstance(image.height, int):
        raise InputValidationError(
            f"Image dimensions must be integers, got width={image.width!r}, height={image.height!r}."
        )
    if image.width <= 0 or image.height <= 0:
        raise InputValidationError(
            f"Image dimensions must be positive, got {image.width}x{image.height}."
        )
    if image.width < min_size or image.height < min_size:
        raise InputValidationError(
            f"Image {image.width}x{image.height} is below the minimum size of {min_size}x{min_size}."
        )

    if not isinstance(image.pixels, (bytes, bytearray, memoryview)):
        raise InputValidationError(
            f"Pixel buffer must be bytes, bytearray or memoryview, got {type(image.pixels).__name__}."
        )

    expected = image.width * image.height * RGBA_CHANNELS
    actual = memoryview(image.pixels).nbytes
    if actual != expected:
        raise InputValidationError(
            f"Pixel buffer length {actual} does not match {image.width}x{image.height}x4 = {expected}."
        )
