"""Notifier that reports through the logging module."""

import logging

from ..interfaces import Notifier


class LoggingNotifier(Notifier):
    """Notifier that writes each status message to a logger.

    Info and success go out at INFO, warnings at WARNING and errors at ERROR.
    """

    def __init__(self, logger: logging.Logger | None = None):
        """
        Initialize the notifier.

        Args:
            logger: Logger to write to. Defaults to this module's logger.
        """
        self.logger = logger or logging.getLogger(__name__)

    def info(self, message: str) -> None:
        self.logger.info(message)

    def success(self, message: str) -> None:
        self.logger.info(message)

    def warning(self, message: str) -> None:
        self.logger.warning(message)

    def error(self, message: str) -> None:
        self.logger.error(message)
