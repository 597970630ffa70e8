"""Emphasis rewriter for wrapping plain message text in asterisks."""

import re
from dataclasses import dataclass, field

from .segmenter import Document, Segmenter, Span, SpanKind


@dataclass(frozen=True)
class EmphasisRewriter:
    """Wraps the plain runs of a message in single emphasis delimiters.

    Quoted and emphasized spans pass through verbatim. Running the rewriter
    on its own output changes nothing.
    """

    emphasis: str = "*"
    quote: str = '"'
    segmenter: Segmenter = field(init=False, repr=False, compare=False)
    _unpaired: re.Pattern = field(init=False, repr=False, compare=False)

    def __post_init__(self):
        # Segmenter validates the delimiter pair
        object.__setattr__(self, "segmenter", Segmenter(self.emphasis, self.quote))
        e = re.escape(self.emphasis)
        # An odd-length run: pairs are strong emphasis, the leftover is unpaired
        object.__setattr__(self, "_unpaired", re.compile(rf"(?<!{e})(?:{e}{e})*{e}(?!{e})"))

    def rewrite(self, text: str) -> str:
        """
        Wrap every plain run of text in emphasis delimiters.

        Non-string and empty input is returned as-is.

        Args:
            text: The message text.

        Returns:
            The rewritten text, or text itself if nothing applies.
        """
        if not isinstance(text, str) or not text:
            return text
        return self.rewrite_document(self.segmenter.segment(text))

    def rewrite_document(self, document: Document) -> str:
        """Render a segmented document, wrapping its plain spans."""
        spans = document.spans
        parts = []
        for index, span in enumerate(spans):
            if span.kind is not SpanKind.PLAIN:
                parts.append(span.text)
                continue
            before = spans[index - 1] if index > 0 else None
            after = spans[index + 1] if index + 1 < len(spans) else None
            parts.append(self._wrap_plain(span.text, before, after))
        return "".join(parts)

    def _wrap_plain(self, text: str, before: Span | None, after: Span | None) -> str:
        """
        Wrap a single plain span, or return it unchanged.

        Left alone when its core is blank, when an emphasized neighbor's
        delimiter touches it (a one-sided wrap would leave an unpaired
        delimiter), or when it already carries an unpaired delimiter or
        is made of delimiters alone.
        """
        core = text.strip()
        if not core:
            return text

        if self._touches_emphasis(before, text[0]) or self._touches_emphasis(after, text[-1]):
            return text

        if self._unpaired.search(core):
            return text

        # Nothing but delimiters: new ones would merge into the same run
        if not core.strip(self.emphasis):
            return text

        leading = text[: len(text) - len(text.lstrip())]
        trailing = text[len(text.rstrip()):]
        return f"{leading}{self.emphasis}{core}{self.emphasis}{trailing}"

    @staticmethod
    def _touches_emphasis(neighbor: Span | None, edge: str) -> bool:
        """Check whether an emphasized neighbor abuts text with no whitespace."""
        return (
            neighbor is not None
            and neighbor.kind is SpanKind.EMPHASIZED
            and not edge.isspace()
        )


_default = EmphasisRewriter()


def rewrite(text: str) -> str:
    """Wrap plain text in asterisks using the default delimiters."""
    return _default.rewrite(text)
