from __future__ import annotations

from typing import Callable, List

from ..formatting import Formatter
from .registry import PluginRegistry


PresetInstaller = Callable[[Formatter], None]

preset_plugins = PluginRegistry[PresetInstaller]("preset")


def register_preset(name: str, installer: PresetInstaller) -> None:
    preset_plugins.register(name, installer)


def get_preset(name: str) -> PresetInstaller:
    return preset_plugins.get(name)


def available_presets() -> List[str]:
    return preset_plugins.names()


__all__ = [
    "PluginRegistry",
    "PresetInstaller",
    "available_presets",
    "get_preset",
    "preset_plugins",
    "register_preset",
]
