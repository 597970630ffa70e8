"""Asterisk Wrapper - wrap plain chat text in emphasis markers."""

from .core import rewrite

__version__ = "0.1.0"

__all__ = ["rewrite", "__version__"]
