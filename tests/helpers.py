"""Image builders shared by the test modules."""

from __future__ import annotations

import numpy as np
from skimage import draw

from histoscore.image import Image

BACKGROUND_RGB = (232, 168, 204)
NUCLEUS_RGB = (72, 44, 138)
LUMEN_RGB = (246, 244, 246)


def make_uniform_image(width: int = 4, height: int = 4, rgba=(128, 128, 128, 255)) -> Image:
    """Image where every pixel has the same colour."""
    return Image(width=width, height=height, pixels=bytes(rgba) * (width * height))


def make_tissue_array(size: int = 256) -> np.ndarray:
    """Deterministic synthetic H&E-like RGB tile: pink stroma, purple nuclei, white lumina."""
    array = np.empty((size, size, 3), dtype=np.uint8)
    array[...] = BACKGROUND_RGB

    for index, center in enumerate(((48, 48), (48, 200), (200, 120))):
        rows, cols = draw.disk(center, 14 + 3 * index, shape=array.shape[:2])
        array[rows, cols] = LUMEN_RGB

    step = 20
    for i, row in enumerate(range(10, size - 10, step)):
        for j, col in enumerate(range(10, size - 10, step)):
            radius = 3 + (3 * i + j) % 4
            rows, cols = draw.disk((row, col), radius, shape=array.shape[:2])
            shade = 15 * ((i + j) % 3)
            array[rows, cols] = (NUCLEUS_RGB[0] - shade, NUCLEUS_RGB[1], NUCLEUS_RGB[2] - shade)

    return array


def make_tissue_image(size: int = 256) -> Image:
    return Image.from_array(make_tissue_array(size))
