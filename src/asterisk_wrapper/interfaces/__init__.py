"""Abstract interfaces for the Asterisk Wrapper."""

from .message_store import MessageStore
from .notifier import Notifier

__all__ = ["MessageStore", "Notifier"]
