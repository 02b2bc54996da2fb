"""Unit tests for logger setup."""

import logging

import pytest

from maybe_monad.utils.logging_utils import (
    PACKAGE_LOGGER_NAME,
    RotatingFileHandlerWithHeader,
    get_logger,
    reset_logger,
)


@pytest.fixture
def logger_name(request):
    """A fresh logger name per test, cleaned up afterwards."""
    name = f"{PACKAGE_LOGGER_NAME}.tests.{request.node.name}"
    yield name
    reset_logger(name)


class TestGetLogger:
    """Tests for configuration-driven handlers."""

    def test_package_logger_has_null_handler(self):
        handlers = logging.getLogger(PACKAGE_LOGGER_NAME).handlers
        assert any(isinstance(h, logging.NullHandler) for h in handlers)

    def test_quiet_by_default(self, logging_config, logger_name):
        logging_config.console_logging = False
        logging_config.enable_file_logging = False
        logging_config.log_level = "WARNING"

        logger = get_logger(logger_name)

        assert logger.handlers == []
        assert logger.level == logging.WARNING
        assert logger.propagate

    def test_console_handler(self, logging_config, logger_name):
        logging_config.console_logging = True

        logger = get_logger(logger_name)

        assert any(type(h) is logging.StreamHandler for h in logger.handlers)
        assert not logger.propagate

    def test_handlers_attached_once(self, logging_config, logger_name):
        logging_config.console_logging = True

        first = get_logger(logger_name)
        second = get_logger(logger_name)

        assert first is second
        assert len(second.handlers) == 1

    def test_file_handler_writes_header(self, logging_config, logger_name, tmp_path):
        logging_config.enable_file_logging = True

        logger = get_logger(logger_name, log_file_name="maybe.log")
        logger.warning("something happened")
        for handler in logger.handlers:
            handler.flush()

        assert any(isinstance(h, RotatingFileHandlerWithHeader) for h in logger.handlers)
        content = (tmp_path / "maybe.log").read_text()
        assert content.startswith("--- Log started at")
        assert "something happened" in content

    def test_reset_allows_reconfiguration(self, logging_config, logger_name):
        logging_config.console_logging = True
        get_logger(logger_name)

        reset_logger(logger_name)
        logging_config.console_logging = False
        logger = get_logger(logger_name)

        assert logger.handlers == []
        assert logger.propagate

    def test_debug_mode_lowers_level(self, logging_config, logger_name, monkeypatch):
        short_name = logger_name.rsplit(".", 1)[-1]
        monkeypatch.setenv(f"MAYBE_DEBUG_{short_name.upper()}", "true")

        logger = get_logger(logger_name)

        assert logger.level == logging.DEBUG
