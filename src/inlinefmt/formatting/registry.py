from __future__ import annotations

from typing import Iterator, List, Tuple

from ..models import Transformer, is_pattern


class ConfigurationError(ValueError):
    """Raised when a transformer cannot be registered as given."""


def check_delimiter(role: str, delimiter: object) -> None:
    if is_pattern(delimiter):
        return
    if not isinstance(delimiter, str):
        raise ConfigurationError(
            f"'{role}' must be a string or a compiled pattern, got {type(delimiter).__name__}."
        )
    if not delimiter:
        raise ConfigurationError(f"'{role}' cannot be an empty string.")


class TransformerRegistry:
    """Ordered, append-only collection of transformers.

    Registration order is the only priority signal: earlier entries are
    tried first at every cursor position.
    """

    def __init__(self) -> None:
        self._transformers: List[Transformer] = []

    def register(self, transformer: Transformer) -> Transformer:
        if not isinstance(transformer, Transformer):
            raise ConfigurationError(f"Expected a Transformer, got {type(transformer).__name__}.")
        check_delimiter("open", transformer.open)
        check_delimiter("close", transformer.close)
        self._transformers.append(transformer)
        return transformer

    def transformers(self) -> Tuple[Transformer, ...]:
        return tuple(self._transformers)

    def __iter__(self) -> Iterator[Transformer]:
        return iter(self.transformers())

    def __len__(self) -> int:
        return len(self._transformers)
