"""Stain separation and channel preprocessing."""

from histoscore.stain.config import StainConfig, load_stain_config
from histoscore.stain.deconvolution import CHANNEL_NAMES, StainChannels, StainDeconvolver
from histoscore.stain.preprocessing import (
    ChannelPreprocessor,
    equalize_histogram,
    mean_filter_3x3,
    scale_optical_density,
)

__all__ = [
    "CHANNEL_NAMES",
    "ChannelPreprocessor",
    "StainChannels",
    "StainConfig",
    "StainDeconvolver",
    "equalize_histogram",
    "load_stain_config",
    "mean_filter_3x3",
    "scale_optical_density",
]
