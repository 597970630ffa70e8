"""Segmenter for partitioning message text into tagged spans."""

import re
from dataclasses import dataclass
from enum import Enum
from typing import Iterator


class SpanKind(Enum):
    """Kinds of span produced by the segmenter."""

    PLAIN = "plain"
    QUOTED = "quoted"
    EMPHASIZED = "emphasized"
    WHITESPACE = "whitespace"


@dataclass(frozen=True)
class Span:
    """A contiguous piece of the input, delimiters included."""

    text: str
    kind: SpanKind


@dataclass(frozen=True)
class Document:
    """Ordered spans whose concatenation is the original input."""

    spans: tuple[Span, ...] = ()

    def text(self) -> str:
        """Reassemble the original input."""
        return "".join(span.text for span in self.spans)

    def __iter__(self) -> Iterator[Span]:
        return iter(self.spans)

    def __len__(self) -> int:
        return len(self.spans)


# Newline runs are paragraph breaks; the capture group keeps them in split()
PARAGRAPH_BREAK = re.compile(r"(\n+)")


def validate_delimiters(emphasis: str, quote: str) -> None:
    """
    Check that a delimiter pair is usable.

    Raises:
        ValueError: If either delimiter is not a single non-whitespace
            character, or both are the same.
    """
    for name, value in (("emphasis", emphasis), ("quote", quote)):
        if not isinstance(value, str) or len(value) != 1:
            raise ValueError(f"{name} delimiter must be a single character: {value!r}")
        if value.isspace():
            raise ValueError(f"{name} delimiter must not be whitespace: {value!r}")
    if emphasis == quote:
        raise ValueError(f"emphasis and quote delimiters must differ: {emphasis!r}")


@dataclass(frozen=True)
class Segmenter:
    """Splits text into plain, quoted, emphasized and whitespace spans.

    Paragraphs (text between newline runs) are scanned independently, so
    no span ever crosses a paragraph break.
    """

    emphasis: str = "*"
    quote: str = '"'

    def __post_init__(self):
        validate_delimiters(self.emphasis, self.quote)

    def segment(self, text: str) -> Document:
        """
        Partition text into a Document.

        Args:
            text: The raw message text.

        Returns:
            Document whose spans concatenate back to text exactly.
        """
        spans: list[Span] = []
        for part in PARAGRAPH_BREAK.split(text):
            if not part:
                continue
            if part.startswith("\n"):
                spans.append(Span(part, SpanKind.WHITESPACE))
            else:
                spans.extend(self._segment_paragraph(part))
        return Document(tuple(spans))

    def _segment_paragraph(self, paragraph: str) -> list[Span]:
        """
        Scan a single paragraph left to right.

        Runs of the emphasis character are taken whole: every doubled pair
        is strong emphasis and stays literal, and an odd run carries one
        toggling delimiter. An opening delimiter is the first character of
        its run and a closing one the last, so emphasized spans absorb the
        whole run on both ends.

        An open quote or emphasis that is never closed leaves everything
        from the last flushed boundary to the end as one plain span.
        """
        spans: list[Span] = []
        state: SpanKind | None = None
        plain_start = 0
        open_at = 0
        length = len(paragraph)
        i = 0

        while i < length:
            char = paragraph[i]

            if char == self.quote and state is not SpanKind.EMPHASIZED:
                if state is None:
                    state, open_at = SpanKind.QUOTED, i
                else:
                    self._flush(spans, paragraph[plain_start:open_at])
                    spans.append(Span(paragraph[open_at:i + 1], SpanKind.QUOTED))
                    state, plain_start = None, i + 1
                i += 1

            elif char == self.emphasis and state is not SpanKind.QUOTED:
                run_end = i
                while run_end < length and paragraph[run_end] == self.emphasis:
                    run_end += 1

                if (run_end - i) % 2:
                    if state is None:
                        state, open_at = SpanKind.EMPHASIZED, i
                    else:
                        self._flush(spans, paragraph[plain_start:open_at])
                        spans.append(Span(paragraph[open_at:run_end], SpanKind.EMPHASIZED))
                        state, plain_start = None, run_end
                i = run_end

            else:
                i += 1

        # Unterminated region (if any) is still unflushed and lands here
        self._flush(spans, paragraph[plain_start:])
        return spans

    @staticmethod
    def _flush(spans: list[Span], text: str) -> None:
        """Append pending text as a plain or whitespace span."""
        if not text:
            return
        kind = SpanKind.PLAIN if text.strip() else SpanKind.WHITESPACE
        spans.append(Span(text, kind))
