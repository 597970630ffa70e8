"""Abstract interface for host message storage."""

from abc import ABC, abstractmethod


class MessageStore(ABC):
    """Abstract interface for reading and updating chat messages by index."""

    @abstractmethod
    def __len__(self) -> int:
        """Number of messages in the chat."""
        pass

    @abstractmethod
    def get_text(self, index: int) -> str:
        """Get the text of the message at a 0-based index."""
        pass

    @abstractmethod
    def set_text(self, index: int, text: str) -> None:
        """Replace the text of the message at a 0-based index."""
        pass

    @abstractmethod
    def refresh(self) -> None:
        """Persist changes and redraw the chat.

        Only called after a message has actually changed.
        """
        pass
