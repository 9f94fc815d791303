"""Delimiter-driven inline text formatting."""

from .formatting import ConfigurationError, Formatter, TransformerRegistry
from .models import FormatterConfig, Transformer

__version__ = "0.1.0"

__all__ = [
    "ConfigurationError",
    "Formatter",
    "FormatterConfig",
    "Transformer",
    "TransformerRegistry",
    "__version__",
]
