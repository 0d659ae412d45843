"""
Tests for logging configuration.

Checks that the package logger level can be set apart from the root level.
"""

import logging

import pytest

from easyresults_web.shared.logging import PACKAGE_LOGGER, configure_logging


@pytest.fixture(autouse=True)
def restore_logging():
    yield
    configure_logging("INFO")


class TestConfigureLogging:
    """Tests for configure_logging."""

    def test_root_level_applied(self) -> None:
        configure_logging("WARNING")
        assert logging.getLogger().level == logging.WARNING
        assert logging.getLogger(PACKAGE_LOGGER).level == logging.NOTSET

    def test_package_level_independent_of_root(self) -> None:
        """Dispatch decisions can be traced while the root stays quiet."""
        configure_logging("WARNING", package_level="DEBUG")
        dispatcher_logger = logging.getLogger("easyresults_web.domain.results.dispatcher")
        assert dispatcher_logger.isEnabledFor(logging.DEBUG)
        assert not logging.getLogger("fastapi").isEnabledFor(logging.INFO)

    def test_package_level_reset_when_omitted(self) -> None:
        configure_logging("INFO", package_level="ERROR")
        configure_logging("INFO")
        assert logging.getLogger(PACKAGE_LOGGER).level == logging.NOTSET

    def test_unknown_level_falls_back_to_info(self) -> None:
        configure_logging("chatty")
        assert logging.getLogger().level == logging.INFO
