"""Core components for the Asterisk Wrapper."""

from .segmenter import Segmenter, Span, SpanKind, Document
from .rewriter import EmphasisRewriter, rewrite

__all__ = [
    "Segmenter",
    "Span",
    "SpanKind",
    "Document",
    "EmphasisRewriter",
    "rewrite",
]
