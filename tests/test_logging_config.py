"""Tests for logging setup."""

import logging
import sys

import pytest

from sitescore.logging_config import QUIET_LOGGERS, setup_logging


@pytest.fixture
def restore_logging():
    """Put the root logger and quieted loggers back after each test."""
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    quiet = {name: logging.getLogger(name).level for name in QUIET_LOGGERS}
    yield root
    for handler in root.handlers:
        if handler not in handlers:
            handler.close()
    root.handlers[:] = handlers
    root.setLevel(level)
    for name, previous in quiet.items():
        logging.getLogger(name).setLevel(previous)


class TestSetupLogging:
    """Test cases for setup_logging."""

    def test_console_handler_on_stderr(self, restore_logging):
        """Only a stderr handler is installed by default."""
        setup_logging(level="debug")

        root = restore_logging
        assert root.level == logging.DEBUG
        assert len(root.handlers) == 1
        assert root.handlers[0].stream is sys.stderr

    def test_unknown_level_falls_back_to_info(self, restore_logging):
        """A mistyped level name does not break setup."""
        setup_logging(level="chatty")
        assert restore_logging.level == logging.INFO

    def test_log_file(self, restore_logging, tmp_path):
        """A log file gets timestamped records and its directory is created."""
        log_file = tmp_path / "logs" / "sitescore.log"
        setup_logging(log_file=str(log_file))

        logging.getLogger("sitescore.test").info("analysis started")
        for handler in restore_logging.handlers:
            handler.flush()

        line = log_file.read_text().strip()
        assert line.endswith("sitescore.test - INFO - analysis started")

    def test_third_party_loggers_quieted(self, restore_logging):
        """HTTP and WHOIS libraries only log warnings and errors."""
        setup_logging(level="DEBUG")

        assert logging.getLogger("httpx").level == logging.WARNING
        assert logging.getLogger("whois").level == logging.ERROR
