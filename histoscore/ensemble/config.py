"""Configuration models for ensemble aggregation and integration."""

from __future__ import annotations

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from histoscore.ensemble.aggregator import ConfidencePolicy


class EnsembleConfig(BaseSettings):
    """Configuration for ensemble execution.

    Attributes:
        confidence_ceiling: Global cap on the integrated confidence. Domains
            may override it.
        confidence_policy: Default confidence policy (``mean`` or ``conservative``).
        max_workers: Threads used to run extractors; 1 runs them sequentially.
    """

    model_config = SettingsConfigDict(
        env_prefix="HISTOSCORE_ENSEMBLE_",
        env_nested_delimiter="__",
        frozen=True,
    )

    confidence_ceiling: float = Field(default=0.97, gt=0.0, le=1.0)
    confidence_policy: str = Field(default="mean")
    max_workers: int = Field(default=1, ge=1)

    @field_validator("confidence_policy")
    @classmethod
    def _known_policy(cls, value: str) -> str:
        """Reject unknown policy names at load time and normalize the case."""

        return ConfidencePolicy.parse(value).value


def load_ensemble_config() -> EnsembleConfig:
    """Load ensemble configuration.

    Returns:
        EnsembleConfig instance.
    """

    return EnsembleConfig()
