"""Logging configuration for the project."""
import logging
import sys

from histoscore.config import Config

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

# Pipeline stages log under their class names rather than the package name.
STAGE_LOGGERS = (
    "DiagnosticPipeline",
    "AlgorithmRegistry",
    "StainDeconvolver",
    "ChannelPreprocessor",
    "WeightedEnsembleAggregator",
    "TwoStageIntegrator",
)


def resolve_level(level: str | None = None) -> int:
    """Turn a level name (or the configured default) into a logging level.

    Raises:
        ValueError: If the name is not a standard logging level.
    """
    if level is None:
        settings = Config()
        level = "DEBUG" if settings.debug else settings.log_level
    value = logging.getLevelName(level.upper())
    if not isinstance(value, int):
        raise ValueError(f"Unknown log level: {level}")
    return value


def setup_logger(name: str = "histoscore", level: str | None = None) -> logging.Logger:
    """Configure and return the package logger with a stdout handler.

    Stage loggers are routed to the same handler so a single call covers the
    whole pipeline.
    """
    numeric_level = resolve_level(level)
    logger = logging.getLogger(name)
    logger.setLevel(numeric_level)

    # Avoid adding handlers multiple times
    if not logger.handlers:
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))
        logger.addHandler(handler)
    for handler in logger.handlers:
        handler.setLevel(numeric_level)

    for stage in STAGE_LOGGERS:
        stage_logger = logging.getLogger(stage)
        stage_logger.setLevel(numeric_level)
        if not stage_logger.handlers:
            stage_logger.handlers = list(logger.handlers)
            stage_logger.propagate = False

    return logger


def get_logger(name: str) -> logging.Logger:
    """Get a child of the package logger."""
    return logging.getLogger(f"histoscore.{name}")
