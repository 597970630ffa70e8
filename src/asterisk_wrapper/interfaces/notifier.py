"""Abstract interface for user-facing notifications."""

from abc import ABC, abstractmethod


class Notifier(ABC):
    """Abstract interface for short status messages shown to the user."""

    @abstractmethod
    def info(self, message: str) -> None:
        """Report a neutral status message."""
        pass

    @abstractmethod
    def success(self, message: str) -> None:
        """Report that an action completed."""
        pass

    @abstractmethod
    def warning(self, message: str) -> None:
        """Report that an action was skipped."""
        pass

    @abstractmethod
    def error(self, message: str) -> None:
        """Report that an action could not be performed."""
        pass
