"""I/O helpers: decode image files and export diagnostic results."""

from __future__ import annotations

import json
from pathlib import Path

import numpy as np
from PIL import Image as PILImage

from histoscore.image import Image
from histoscore.logging import get_logger
from histoscore.pipeline import DiagnosticResult

logger = get_logger("io")


def list_image_files(dataset_dir: Path, extensions: set[str]) -> list[Path]:
    """List image files under a dataset directory.

    Args:
        dataset_dir: Root directory containing images.
        extensions: Lowercase extensions to include.

    Returns:
        Sorted list of image file paths.
    """

    image_files: list[Path] = []
    for file_path in dataset_dir.rglob("*"):
        if file_path.is_file() and file_path.suffix.lower() in extensions:
            image_files.append(file_path)
    return sorted(image_files)


def load_image(image_path: Path, max_size: int | None = None) -> Image:
    """Load an image file as an RGBA :class:`Image`.

    Args:
        image_path: Path to any Pillow-readable image.
        max_size: Optional cap on the longest side; larger images are
            downsized with their aspect ratio preserved.

    Returns:
        Decoded image.
    """

    with PILImage.open(image_path) as pil_image:
        rgba = pil_image.convert("RGBA")
    if max_size is not None and max(rgba.size) > max_size:
        rgba.thumbnail((max_size, max_size), PILImage.Resampling.BILINEAR)
        logger.debug("Downsized %s to %dx%d.", image_path, *rgba.size)
    return Image.from_array(np.array(rgba, dtype=np.uint8))


def ensure_parent_dir(path: Path) -> None:
    """Ensure that the parent directory exists.

    Args:
        path: Output file path.
    """

    path.parent.mkdir(parents=True, exist_ok=True)


def result_to_json(result: DiagnosticResult) -> str:
    """Serialize a result with sorted keys so identical results give identical text."""

    return json.dumps(result.to_dict(), indent=2, sort_keys=True)


def write_result_json(result: DiagnosticResult, output_path: Path) -> None:
    """Write a result as JSON.

    Args:
        result: Diagnostic result.
        output_path: Output file path.
    """

    ensure_parent_dir(output_path)
    output_path.write_text(result_to_json(result) + "\n", encoding="utf-8")


def compute_output_path(image_path: Path, output_dir: Path, suffix: str = "diagnosis") -> Path:
    """Compute the JSON output path for an input image.

    Args:
        image_path: Original image path.
        output_dir: Output root directory.
        suffix: Suffix appended to the filename stem.

    Returns:
        ``output_dir / <stem>_<suffix>.json``.
    """

    return output_dir / f"{image_path.stem}_{suffix}.json"
