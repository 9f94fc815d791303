from __future__ import annotations

import re
from typing import List, Optional, Tuple

from ..logging_helpers import get_logger
from ..models import (
    SPAN_GROUP,
    Delimiter,
    FormatterConfig,
    Rewrite,
    Transformer,
    Validator,
    accept_all,
)
from .registry import ConfigurationError, TransformerRegistry, check_delimiter


logger = get_logger("formatting")

# (transformer, span, index just past the closing delimiter)
Attempt = Tuple[Transformer, str, int]


class Formatter:
    """Rewrites delimited spans of text using registered transformers.

    Transformers are tried in registration order at every position, so
    register longer delimiters that share characters with shorter ones first
    (``**`` before ``*``).
    """

    def __init__(self, config: Optional[FormatterConfig] = None) -> None:
        self.config = config or FormatterConfig()
        self._registry = TransformerRegistry()

    @property
    def transformers(self) -> Tuple[Transformer, ...]:
        return self._registry.transformers()

    def register(
        self,
        *,
        transformer: Optional[Rewrite] = None,
        symbol: Optional[Delimiter] = None,
        open: Optional[Delimiter] = None,
        close: Optional[Delimiter] = None,
        name: str = "",
        recursive: bool = True,
        padding: bool = True,
        validate: Optional[Validator] = None,
    ) -> Transformer:
        """Build a transformer from keyword options and append it.

        ``symbol`` sets both delimiters; an explicit ``open`` or ``close``
        takes precedence over it. A missing ``close`` falls back to
        ``symbol`` and then to ``open``.
        """
        if transformer is None or not callable(transformer):
            raise ConfigurationError("A callable 'transformer' is required.")
        if symbol is None and open is None:
            raise ConfigurationError("Either 'symbol' or 'open' must be given.")
        if validate is None:
            validate = accept_all
        elif not callable(validate):
            raise ConfigurationError("'validate' must be callable.")

        opening = open if open is not None else symbol
        if close is not None:
            closing = close
        elif symbol is not None:
            closing = symbol
        else:
            closing = opening
        check_delimiter("open", opening)
        check_delimiter("close", closing)

        try:
            spec = Transformer(
                open=opening,
                close=closing,
                transformer=transformer,
                name=name,
                recursive=bool(recursive),
                padding=bool(padding),
                validate=validate,
            )
        except re.error as exc:
            raise ConfigurationError(f"Invalid delimiter pattern for '{name or opening}': {exc}") from exc
        return self.add_transformer(spec)

    def add_transformer(self, transformer: Transformer) -> Transformer:
        registered = self._registry.register(transformer)
        logger.debug(
            "Registered transformer %r (%s) at priority %d",
            registered.name,
            "literal" if registered.is_literal else "pattern",
            len(self._registry) - 1,
        )
        return registered

    def __call__(self, text: str) -> str:
        if self.config.use_regex:
            return self.format_regex(text)
        return self.format(text)

    def format(self, text: str) -> str:
        """Transform ``text`` using plain string matching where possible.

        Transformers with a pattern delimiter are still honoured; they are
        matched through their compiled expression at each position.
        """
        return self._scan(text, depth=0, regex_only=False)

    def format_regex(self, text: str) -> str:
        """Transform ``text`` matching every transformer as a regular expression."""
        return self._scan(text, depth=0, regex_only=True)

    def _scan(self, text: str, *, depth: int, regex_only: bool) -> str:
        if depth > self.config.max_depth:
            logger.warning(
                "Recursion limit of %d reached; leaving %d characters unformatted.",
                self.config.max_depth,
                len(text),
            )
            return text
        transformers = self._registry.transformers()
        if not transformers:
            return text

        output: List[str] = []
        cursor = 0
        emit_boundary = 0
        length = len(text)
        while cursor < length:
            attempt = self._match_at(transformers, text, cursor, regex_only)
            if attempt is None:
                cursor += 1
                continue
            spec, span, end = attempt
            replacement = spec.transformer(span)
            if spec.recursive:
                replacement = self._scan(replacement, depth=depth + 1, regex_only=regex_only)
            output.append(text[emit_boundary:cursor])
            output.append(replacement)
            cursor = end
            emit_boundary = cursor
        output.append(text[emit_boundary:])
        return "".join(output)

    def _match_at(
        self,
        transformers: Tuple[Transformer, ...],
        text: str,
        cursor: int,
        regex_only: bool,
    ) -> Optional[Attempt]:
        for spec in transformers:
            if regex_only or not spec.is_literal:
                attempt = self._try_pattern(spec, text, cursor)
            elif text.startswith(spec.open, cursor):
                attempt = self._try_literal(spec, text, cursor)
            else:
                continue
            if attempt is not None:
                return attempt
        return None

    def _try_literal(self, spec: Transformer, text: str, cursor: int) -> Optional[Attempt]:
        start = cursor + len(spec.open)
        # spans are never empty, so the closer cannot start before start + 1
        to = text.find(spec.close, start + 1)
        if to < 0:
            return None
        end = to + len(spec.close)
        # a doubled closer (``**`` while matching ``*``) neither closes nor joins the span
        if spec.padding and text.startswith(spec.close, end):
            return None
        span = text[start:to]
        if not spec.validate(span):
            return None
        return spec, span, end

    def _try_pattern(self, spec: Transformer, text: str, cursor: int) -> Optional[Attempt]:
        match = spec.matcher.match(text, cursor)
        if match is None:
            return None
        end = match.end()
        if spec.padding and spec.closes_at(text, end):
            return None
        span = match.group(SPAN_GROUP)
        if not spec.validate(span):
            return None
        return spec, span, end
