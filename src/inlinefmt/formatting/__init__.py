"""Delimiter matching and span rewriting."""

from .core import Formatter
from .registry import ConfigurationError, TransformerRegistry

__all__ = [
    "ConfigurationError",
    "Formatter",
    "TransformerRegistry",
]
