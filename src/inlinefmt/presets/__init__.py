"""Bundled transformer sets."""
from __future__ import annotations

from typing import Optional

from ..formatting import Formatter
from ..models import FormatterConfig
from ..plugins import available_presets, get_preset, register_preset
from .html import install_html
from .text import install_text


def build_formatter(name: str, config: Optional[FormatterConfig] = None) -> Formatter:
    installer = get_preset(name)
    formatter = Formatter(config)
    installer(formatter)
    return formatter


__all__ = [
    "available_presets",
    "build_formatter",
    "get_preset",
    "install_html",
    "install_text",
    "register_preset",
]
