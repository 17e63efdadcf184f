"""Global configuration for the histoscore package."""

from __future__ import annotations

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Config(BaseSettings):
    """Global configuration settings.

    Attributes:
        debug: Enable debug mode. Forces DEBUG logging regardless of ``log_level``.
        log_level: Logging level name for the package logger.
    """

    model_config = SettingsConfigDict(env_prefix="HISTOSCORE_", extra="ignore")

    debug: bool = Field(default=False)
    log_level: str = Field(default="INFO")
