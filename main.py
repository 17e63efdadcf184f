"""Project entry point: score a directory of H&E images in every domain."""

from __future__ import annotations

import sys
from pathlib import Path

from PIL import UnidentifiedImageError

from histoscore.domains import available_domains, get_domain
from histoscore.errors import InputValidationError
from histoscore.io import compute_output_path, list_image_files, load_image, write_result_json
from histoscore.logging import setup_logger
from histoscore.pipeline import DiagnosticPipeline

IMAGE_EXTENSIONS = {".png", ".jpg", ".jpeg", ".tif", ".tiff"}


def main(dataset_dir: Path = Path("dataset"), output_dir: Path = Path("output")) -> None:
    """Run every shipped domain over all images under ``dataset_dir``."""
    logger = setup_logger()
    logger.info("Starting histoscore batch analysis in %s.", dataset_dir)

    image_files = list_image_files(dataset_dir, IMAGE_EXTENSIONS)
    if not image_files:
        logger.error("No image files found under %s.", dataset_dir)
        return

    pipelines = [DiagnosticPipeline(get_domain(name)) for name in available_domains()]
    for image_path in image_files:
        try:
            image = load_image(image_path)
        except (OSError, UnidentifiedImageError) as exc:
            logger.error("Cannot read %s: %s", image_path, exc)
            continue

        for pipeline in pipelines:
            try:
                result = pipeline.analyze(image)
            except InputValidationError as exc:
                logger.error("Skipping %s: %s", image_path, exc)
                break
            output_path = compute_output_path(image_path, output_dir / pipeline.domain.name)
            write_result_json(result, output_path)
            logger.info("%s [%s]: %s", image_path.name, pipeline.domain.name, result.category)

    logger.info("Batch analysis finished for %d images.", len(image_files))


if __name__ == "__main__":
    main(*(Path(arg) for arg in sys.argv[1:3]))
