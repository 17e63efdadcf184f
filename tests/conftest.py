"""Shared fixtures for histoscore tests."""

from __future__ import annotations

import pytest

from histoscore.ensemble.config import EnsembleConfig
from histoscore.image import Image
from histoscore.stain.config import StainConfig
from tests.helpers import make_tissue_image, make_uniform_image


@pytest.fixture
def uniform_image() -> Image:
    """4x4 image where every pixel is (128, 128, 128, 255)."""
    return make_uniform_image()


@pytest.fixture
def tissue_image() -> Image:
    """256x256 synthetic tile with nuclei, stroma and lumina."""
    return make_tissue_image()


@pytest.fixture
def stain_config() -> StainConfig:
    return StainConfig()


@pytest.fixture
def ensemble_config() -> EnsembleConfig:
    return EnsembleConfig()
