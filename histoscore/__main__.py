"""Run the diagnostic pipeline on image files from the command line."""

from __future__ import annotations

import argparse
import logging
import sys
from dataclasses import replace
from pathlib import Path

from PIL import UnidentifiedImageError
from tqdm import tqdm

from histoscore.domains import available_domains, get_domain
from histoscore.ensemble.config import EnsembleConfig, load_ensemble_config
from histoscore.errors import InputValidationError
from histoscore.io import compute_output_path, load_image, result_to_json, write_result_json
from histoscore.pipeline import DiagnosticPipeline

EXIT_INVALID_INPUT = 2
EXIT_UNREADABLE_INPUT = 3


def _positive_int(value: str) -> int:
    try:
        number = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"expected a positive integer, got {value!r}") from None
    if number < 1:
        raise argparse.ArgumentTypeError(f"expected a positive integer, got {number}")
    return number


def _parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="H&E stain-ensemble diagnostic scoring.")

    parser.add_argument("images", nargs="+", type=Path, help="Image files to analyze.")
    parser.add_argument(
        "--domain",
        type=str,
        default="lung",
        choices=available_domains(),
        help="Diagnostic domain (default: lung).",
    )
    parser.add_argument(
        "--output-dir",
        type=Path,
        default=None,
        help="Optional: write <stem>_diagnosis.json files here instead of printing to stdout.",
    )
    parser.add_argument(
        "--policy",
        type=str,
        default=None,
        choices=("mean", "conservative"),
        help="Optional: confidence policy. Overrides the domain and config default.",
    )
    parser.add_argument(
        "--max-workers",
        type=_positive_int,
        default=None,
        help="Optional: threads used to run extractors. Overrides config.max_workers.",
    )
    parser.add_argument(
        "--max-size",
        type=_positive_int,
        default=None,
        help="Optional: downsize images so the longest side is at most this many pixels.",
    )

    return parser.parse_args(argv)


def _override_config(base: EnsembleConfig, args: argparse.Namespace) -> EnsembleConfig:
    overrides: dict[str, object] = {}
    if args.policy is not None:
        overrides["confidence_policy"] = args.policy
    if args.max_workers is not None:
        overrides["max_workers"] = args.max_workers

    if not overrides:
        return base

    payload = base.model_dump()
    payload.update(overrides)
    return EnsembleConfig(**payload)


def main(argv: list[str] | None = None) -> int:
    """Entry point for command-line analysis.

    Returns:
        Process exit status.
    """

    logging.basicConfig(
        level=logging.INFO,
        format="%(levelname)s:%(name)s:%(message)s",
    )
    logger = logging.getLogger(__name__)

    args = _parse_args(argv)
    ensemble_config = _override_config(load_ensemble_config(), args)

    domain = get_domain(args.domain)
    if args.policy is not None and domain.confidence_policy is not None:
        # An explicit CLI policy wins over the domain default.
        domain = replace(domain, confidence_policy=None)
    pipeline = DiagnosticPipeline(domain, ensemble_config=ensemble_config)

    status = 0
    for image_path in tqdm(args.images, desc=f"{domain.name} analysis", disable=len(args.images) < 2):
        try:
            image = load_image(image_path, max_size=args.max_size)
        except (OSError, UnidentifiedImageError) as exc:
            logger.error("Cannot read %s: %s", image_path, exc)
            status = EXIT_UNREADABLE_INPUT
            continue

        try:
            result = pipeline.analyze(image)
        except InputValidationError as exc:
            logger.error("Rejected %s: %s", image_path, exc)
            status = EXIT_INVALID_INPUT
            continue

        if args.output_dir is None:
            sys.stdout.write(result_to_json(result) + "\n")
        else:
            output_path = compute_output_path(image_path, args.output_dir)
            write_result_json(result, output_path)
            logger.info("Wrote %s", output_path)

    return status


if __name__ == "__main__":
    sys.exit(main())
