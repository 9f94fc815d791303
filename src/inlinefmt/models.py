from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import Callable, Optional, Union


Delimiter = Union[str, re.Pattern[str]]
Validator = Callable[[str], bool]
Rewrite = Callable[[str], str]

SPAN_GROUP = "__span"

_SCOPED_FLAGS = (
    (re.ASCII, "a"),
    (re.IGNORECASE, "i"),
    (re.MULTILINE, "m"),
    (re.DOTALL, "s"),
    (re.VERBOSE, "x"),
)

# inline global flags are already reflected in Pattern.flags
_GLOBAL_FLAGS_RE = re.compile(r"^(?:\(\?[aiLmsux]+\))+")


def accept_all(_span: str) -> bool:
    return True


def is_pattern(delimiter: object) -> bool:
    return isinstance(delimiter, re.Pattern)


def normalize_pattern(delimiter: Delimiter) -> str:
    """Return a regular expression source matching ``delimiter``.

    Literal strings are escaped so they match themselves. Compiled patterns
    keep their own scoped flags so they survive being embedded in a larger
    expression.
    """
    if not is_pattern(delimiter):
        return re.escape(delimiter)
    source = _GLOBAL_FLAGS_RE.sub("", delimiter.pattern)
    letters = "".join(letter for flag, letter in _SCOPED_FLAGS if delimiter.flags & flag)
    if delimiter.flags & re.VERBOSE:
        # a trailing comment would otherwise swallow the closing parenthesis
        return f"(?{letters}:{source}\n)"
    if letters:
        return f"(?{letters}:{source})"
    return f"(?:{source})"


@dataclass(frozen=True)
class Transformer:
    open: Delimiter
    close: Delimiter
    transformer: Rewrite
    name: str = ""
    recursive: bool = True
    padding: bool = True
    validate: Validator = accept_all
    matcher: re.Pattern[str] = field(init=False, repr=False, compare=False)
    close_matcher: Optional[re.Pattern[str]] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        source = f"{normalize_pattern(self.open)}(?P<{SPAN_GROUP}>(?s:.+?)){normalize_pattern(self.close)}"
        object.__setattr__(self, "matcher", re.compile(source))
        close_matcher = re.compile(normalize_pattern(self.close)) if is_pattern(self.close) else None
        object.__setattr__(self, "close_matcher", close_matcher)

    @property
    def is_literal(self) -> bool:
        return isinstance(self.open, str) and isinstance(self.close, str)

    def closes_at(self, text: str, index: int) -> bool:
        """Whether a non-empty closing delimiter starts at ``index``."""
        if self.close_matcher is None:
            return text.startswith(self.close, index)
        match = self.close_matcher.match(text, index)
        return match is not None and match.end() > index


@dataclass
class FormatterConfig:
    max_depth: int = 32
    use_regex: bool = False


@dataclass
class FrontMatter:
    preset: str = "html"
    max_depth: int = 32
    regex: bool = False
