"""Tests for logger configuration."""

from __future__ import annotations

import logging

import pytest

from histoscore.logging import STAGE_LOGGERS, get_logger, resolve_level, setup_logger


@pytest.fixture
def restore_loggers():
    names = ("histoscore-test", *STAGE_LOGGERS)
    saved = {name: (logging.getLogger(name).handlers[:], logging.getLogger(name).propagate) for name in names}
    yield
    for name, (handlers, propagate) in saved.items():
        logger = logging.getLogger(name)
        logger.handlers = handlers
        logger.propagate = propagate
        logger.setLevel(logging.NOTSET)


class TestLogging:
    """setup_logger / get_logger."""

    def test_resolve_level_from_environment(self, monkeypatch):
        monkeypatch.setenv("HISTOSCORE_LOG_LEVEL", "warning")

        assert resolve_level() == logging.WARNING

    def test_debug_flag_forces_debug(self, monkeypatch):
        monkeypatch.setenv("HISTOSCORE_DEBUG", "true")
        monkeypatch.setenv("HISTOSCORE_LOG_LEVEL", "ERROR")

        assert resolve_level() == logging.DEBUG

    def test_unknown_level_is_rejected(self):
        with pytest.raises(ValueError, match="Unknown log level"):
            resolve_level("chatty")

    def test_setup_is_idempotent_and_routes_stage_loggers(self, restore_loggers):
        first = setup_logger("histoscore-test", level="INFO")
        second = setup_logger("histoscore-test", level="DEBUG")

        assert first is second
        assert len(second.handlers) == 1
        assert second.level == logging.DEBUG
        stage = logging.getLogger("DiagnosticPipeline")
        assert stage.handlers == second.handlers
        assert stage.propagate is False
        assert stage.level == logging.DEBUG

    def test_get_logger_is_a_package_child(self):
        assert get_logger("io").name == "histoscore.io"
