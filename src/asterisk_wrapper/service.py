"""AsteriskWrapper - applies the emphasis rewriter to stored chat messages."""

import logging
from enum import Enum

from .interfaces import MessageStore, Notifier
from .core import EmphasisRewriter
from .config import Config

logger = logging.getLogger(__name__)


class WrapOutcome(Enum):
    """Result of wrapping a single message."""

    INVALID_INDEX = "invalid_index"
    EMPTY = "empty"
    UNCHANGED = "unchanged"
    UPDATED = "updated"


class AsteriskWrapper:
    """Rewrites chat messages in place through injected collaborators.

    The message store and notifier stand in for the host chat application,
    so nothing here reaches into global UI state.
    """

    INVALID_INDEX_TEXT = "Invalid message index"
    EMPTY_TEXT = "Message is empty"
    UNCHANGED_TEXT = "No changes needed - text already formatted"
    UPDATED_TEXT = "Asterisks added to message"

    def __init__(
        self,
        store: MessageStore,
        notifier: Notifier,
        config: Config | None = None,
    ):
        """
        Initialize the wrapper.

        Args:
            store: Access to the chat messages.
            notifier: Channel for user-facing status messages.
            config: Rewriter configuration (uses defaults if None).

        Raises:
            ValueError: If the configured delimiters are unusable.
        """
        self.store = store
        self.notifier = notifier
        self.config = config or Config()
        self.rewriter = EmphasisRewriter(
            emphasis=self.config.emphasis_delimiter,
            quote=self.config.quote_delimiter,
        )

    def wrap_message(self, index: int) -> WrapOutcome:
        """
        Wrap the plain text of one message in emphasis delimiters.

        The store is written and refreshed only when the text changes.

        Args:
            index: 0-based message index.

        Returns:
            What happened to the message.
        """
        if index < 0 or index >= len(self.store):
            logger.debug(f"Index {index} outside 0..{len(self.store) - 1}")
            self.notifier.error(self.INVALID_INDEX_TEXT)
            return WrapOutcome.INVALID_INDEX

        original = self.store.get_text(index)

        if not original or not original.strip():
            logger.debug(f"[{index}] Message is empty")
            self.notifier.warning(self.EMPTY_TEXT)
            return WrapOutcome.EMPTY

        modified = self.rewriter.rewrite(original)

        if modified == original:
            logger.debug(f"[{index}] Already formatted")
            self.notifier.info(self.UNCHANGED_TEXT)
            return WrapOutcome.UNCHANGED

        self.store.set_text(index, modified)
        self.store.refresh()
        logger.info(f"[{index}] Rewrote message ({len(original)} -> {len(modified)} chars)")
        self.notifier.success(self.UPDATED_TEXT)
        return WrapOutcome.UPDATED

    def wrap_all(self) -> dict[WrapOutcome, int]:
        """
        Wrap every message in the store.

        Returns:
            Count of messages per outcome.
        """
        counts = {outcome: 0 for outcome in WrapOutcome}
        for index in range(len(self.store)):
            counts[self.wrap_message(index)] += 1

        logger.info(
            f"Processed {len(self.store)} message(s): "
            f"{counts[WrapOutcome.UPDATED]} updated, "
            f"{counts[WrapOutcome.UNCHANGED]} unchanged, "
            f"{counts[WrapOutcome.EMPTY]} empty"
        )
        return counts
