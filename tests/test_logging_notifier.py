"""Tests for the LoggingNotifier."""

import logging
import pytest
from asterisk_wrapper.interfaces import Notifier
from asterisk_wrapper.notifiers import LoggingNotifier


class TestLoggingNotifier:
    """Tests for LoggingNotifier."""

    @pytest.fixture
    def notifier(self):
        """Create a notifier with a dedicated logger."""
        return LoggingNotifier(logging.getLogger("test.notifier"))

    def test_is_notifier(self, notifier):
        """LoggingNotifier implements the Notifier interface."""
        assert isinstance(notifier, Notifier)

    def test_default_logger(self):
        """Without a logger, the module logger is used."""
        notifier = LoggingNotifier()
        assert notifier.logger.name == "asterisk_wrapper.notifiers.logging_notifier"

    def test_info_logs_at_info(self, notifier, caplog):
        """info() logs at INFO."""
        with caplog.at_level(logging.DEBUG, logger="test.notifier"):
            notifier.info("No changes needed")
        assert caplog.records[-1].levelno == logging.INFO
        assert caplog.records[-1].getMessage() == "No changes needed"

    def test_success_logs_at_info(self, notifier, caplog):
        """success() logs at INFO."""
        with caplog.at_level(logging.DEBUG, logger="test.notifier"):
            notifier.success("Asterisks added")
        assert caplog.records[-1].levelno == logging.INFO

    def test_warning_logs_at_warning(self, notifier, caplog):
        """warning() logs at WARNING."""
        with caplog.at_level(logging.DEBUG, logger="test.notifier"):
            notifier.warning("Message is empty")
        assert caplog.records[-1].levelno == logging.WARNING

    def test_error_logs_at_error(self, notifier, caplog):
        """error() logs at ERROR."""
        with caplog.at_level(logging.DEBUG, logger="test.notifier"):
            notifier.error("Invalid message index")
        assert caplog.records[-1].levelno == logging.ERROR
        assert "Invalid message index" in caplog.text
