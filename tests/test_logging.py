"""
Tests for logging helpers.
"""

import logging

import pytest
from rich.logging import RichHandler

from statewalk.utils.logging import PACKAGE_LOGGER, configure_logging, log_calls


class TestConfigureLogging:
    def test_idempotent(self):
        logger = configure_logging()
        configure_logging(verbose=True)

        assert sum(isinstance(h, RichHandler) for h in logger.handlers) == 1
        assert logger.level == logging.DEBUG

    def test_quiet_wins(self):
        assert configure_logging(verbose=True, quiet=True).level == logging.WARNING


class TestLogCalls:
    def test_returns_result(self, caplog):
        @log_calls("statewalk.tests")
        def add(a, b):
            return a + b

        with caplog.at_level(logging.DEBUG, logger=PACKAGE_LOGGER):
            assert add(1, 2) == 3

        assert "Calling" in caplog.text

    def test_reraises(self, caplog):
        @log_calls("statewalk.tests")
        def fail():
            raise RuntimeError("boom")

        with pytest.raises(RuntimeError, match="boom"):
            fail()

        assert "Error in" in caplog.text
