"""
Tests for Structured Logging.

This module tests the logging infrastructure: LogConfig, StructuredLogger,
the get_logger factory and configure_logging.

Organization
------------
- TestLogConfig: LogConfig dataclass
- TestStructuredLogger: StructuredLogger class
- TestGetLogger: get_logger factory function
- TestConfigureLogging: configure_logging function
"""

import logging
from pathlib import Path

from rich.logging import RichHandler

from hourglass.core.logging import (
    LogConfig,
    StructuredLogger,
    configure_logging,
    get_logger,
)


class TestLogConfig:
    """Tests for LogConfig dataclass."""

    def test_default_values(self):
        config = LogConfig()

        assert config.level == "INFO"
        assert config.console is True
        assert config.file_path is None

    def test_custom_values(self):
        log_file = Path("/tmp/test.log")
        config = LogConfig(level="DEBUG", file_path=log_file, console=False)

        assert config.level == "DEBUG"
        assert config.file_path == log_file
        assert config.console is False


class TestStructuredLogger:
    """Tests for StructuredLogger class."""

    def test_create_logger(self):
        logger = StructuredLogger("test_logger")

        assert logger.logger.name == "test_logger"
        assert logger._context == {}

    def test_console_handler_writes_to_stderr(self):
        logger = StructuredLogger("test.console")

        handlers = [h for h in logger.logger.handlers if isinstance(h, RichHandler)]

        assert len(handlers) == 1
        assert handlers[0].console.stderr is True

    def test_info_method(self, caplog):
        logger = StructuredLogger("test")

        with caplog.at_level(logging.INFO):
            logger.info("Test message")

        assert "Test message" in caplog.text

    def test_error_with_fields(self, caplog):
        logger = StructuredLogger("test")

        with caplog.at_level(logging.ERROR):
            logger.error("Command failed", identifier="time.day_speed")

        assert "Command failed | identifier=time.day_speed" in caplog.text

    def test_debug_filtered_at_info(self, caplog):
        logger = StructuredLogger("test.quiet", LogConfig(level="INFO"))

        with caplog.at_level(logging.DEBUG):
            logger.debug("Hidden message")

        assert "Hidden message" not in caplog.text

    def test_bind_adds_context(self, caplog):
        logger = StructuredLogger("test.bound")
        logger.bind(command="config")

        with caplog.at_level(logging.INFO):
            logger.info("Started")

        assert "Started | command=config" in caplog.text

    def test_unbind_removes_context(self):
        logger = StructuredLogger("test.unbound").bind(command="config")

        logger.unbind("command")

        assert logger._context == {}

    def test_file_handler(self, tmp_path):
        log_file = tmp_path / "logs" / "hourglass.log"
        logger = StructuredLogger(
            "test.file", LogConfig(file_path=log_file, console=False)
        )

        logger.warning("Written to file")
        for handler in logger.logger.handlers:
            handler.flush()

        assert "Written to file" in log_file.read_text(encoding="utf-8")


class TestGetLogger:
    """Tests for get_logger factory function."""

    def test_returns_structured_logger(self):
        assert isinstance(get_logger("test.module"), StructuredLogger)

    def test_caches_loggers(self):
        assert get_logger("test.cached") is get_logger("test.cached")

    def test_different_names_different_loggers(self):
        logger1 = get_logger("test.one")
        logger2 = get_logger("test.two")

        assert logger1 is not logger2
        assert logger1.logger.name == "test.one"


class TestConfigureLogging:
    """Tests for configure_logging function."""

    def test_configure_with_defaults(self):
        configure_logging()

        assert logging.getLogger().level == logging.INFO

    def test_configure_with_custom_level(self):
        configure_logging(level="DEBUG")

        assert logging.getLogger().level == logging.DEBUG

    def test_existing_loggers_follow_new_level(self):
        logger = get_logger("test.existing")

        configure_logging(level="ERROR")

        assert logger.logger.level == logging.ERROR
        assert logger.config.level == "ERROR"
