from __future__ import annotations

from typing import Dict, Generic, List, TypeVar


T = TypeVar("T")


class PluginRegistry(Generic[T]):
    """Unique, case-sensitive name to plugin mapping."""

    def __init__(self, kind: str = "plugin") -> None:
        self._kind = kind
        self._plugins: Dict[str, T] = {}

    def register(self, name: str, plugin: T) -> None:
        if not name:
            raise ValueError(f"A {self._kind} name cannot be empty.")
        if name in self._plugins:
            raise ValueError(f"{self._kind.capitalize()} '{name}' is already registered.")
        self._plugins[name] = plugin

    def get(self, name: str) -> T:
        try:
            return self._plugins[name]
        except KeyError as exc:
            known = ", ".join(self.names()) or "none"
            raise KeyError(f"{self._kind.capitalize()} '{name}' is not registered (available: {known}).") from exc

    def names(self) -> List[str]:
        return sorted(self._plugins)

    def __contains__(self, name: object) -> bool:
        return name in self._plugins
