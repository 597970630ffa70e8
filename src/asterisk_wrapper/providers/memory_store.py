"""In-memory message store."""

from typing import Callable, Iterable

from ..interfaces import MessageStore


class InMemoryMessageStore(MessageStore):
    """Message store backed by a plain list of strings.

    Stands in for the host chat when the rewriter is driven directly,
    e.g. from the command line or in tests.
    """

    def __init__(self, messages: Iterable[str] | None = None):
        """
        Initialize with an optional list of message texts.

        Args:
            messages: Initial message texts, in chat order.
        """
        self._messages: list[str] = list(messages) if messages else []
        self._listeners: list[Callable[[], None]] = []
        self.refresh_count = 0

    def _check_index(self, index: int) -> None:
        """
        Validate a message index.

        Raises:
            IndexError: If index is negative or past the last message.
        """
        if index < 0 or index >= len(self._messages):
            raise IndexError(f"Message index out of range: {index}")

    def __len__(self) -> int:
        return len(self._messages)

    def get_text(self, index: int) -> str:
        """
        Get the text of a message.

        Args:
            index: 0-based message index.

        Returns:
            The message text.

        Raises:
            IndexError: If index is out of range.
        """
        self._check_index(index)
        return self._messages[index]

    def set_text(self, index: int, text: str) -> None:
        """
        Replace the text of a message.

        Args:
            index: 0-based message index.
            text: The new message text.

        Raises:
            IndexError: If index is out of range.
        """
        self._check_index(index)
        self._messages[index] = text

    def on_refresh(self, callback: Callable[[], None]) -> None:
        """Register a callback run on every refresh."""
        self._listeners.append(callback)

    def refresh(self) -> None:
        """Count the refresh and notify listeners."""
        self.refresh_count += 1
        for callback in self._listeners:
            callback()

    def messages(self) -> list[str]:
        """Get a copy of all message texts."""
        return list(self._messages)
