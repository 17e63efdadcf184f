"""Configuration models for stain separation and channel preprocessing."""

from __future__ import annotations

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

# Ruifrok-Johnston H&E approximations. Fixed, not calibrated per slide.
HEMATOXYLIN_VECTOR: tuple[float, float, float] = (0.65, 0.70, 0.29)
EOSIN_VECTOR: tuple[float, float, float] = (0.07, 0.99, 0.11)
RESIDUAL_VECTOR: tuple[float, float, float] = (0.27, 0.57, 0.78)


class StainConfig(BaseSettings):
    """Configuration for stain deconvolution and preprocessing.

    Attributes:
        hematoxylin_vector: RGB optical-density projection for hematoxylin.
        eosin_vector: RGB optical-density projection for eosin.
        residual_vector: RGB optical-density projection for the residual channel.
        epsilon: Offset added to transmittance before the logarithm.
        od_max: Optical density mapped to intensity 255 before equalization.
        min_image_size: Minimum accepted width and height in pixels.
    """

    model_config = SettingsConfigDict(
        env_prefix="HISTOSCORE_STAIN_",
        env_nested_delimiter="__",
        frozen=True,
    )

    hematoxylin_vector: tuple[float, float, float] = Field(default=HEMATOXYLIN_VECTOR)
    eosin_vector: tuple[float, float, float] = Field(default=EOSIN_VECTOR)
    residual_vector: tuple[float, float, float] = Field(default=RESIDUAL_VECTOR)
    epsilon: float = Field(default=1e-6, gt=0.0)
    od_max: float = Field(default=3.0, gt=0.0)
    min_image_size: int = Field(default=1, ge=1)

    @field_validator("hematoxylin_vector", "eosin_vector", "residual_vector", mode="before")
    @classmethod
    def _coerce_vector(cls, value: object) -> tuple[float, ...]:
        """Accept lists (e.g. from JSON env values) for stain vectors.

        Args:
            value: Raw vector input.

        Returns:
            Tuple of floats.
        """

        if isinstance(value, list):
            return tuple(float(v) for v in value)
        return value  # type: ignore[return-value]


def load_stain_config() -> StainConfig:
    """Load stain configuration from defaults and environment variables.

    Returns:
        StainConfig instance.
    """

    return StainConfig()
