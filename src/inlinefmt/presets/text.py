"""Inline Markdown emphasis rendered for fixed-width plain text.

Terminals and DOS-era viewers have no bold or italic, so emphasis is drawn
with letter spacing and delimiter characters instead.
"""
from __future__ import annotations

from functools import partial
from typing import List

from ..formatting import Formatter
from ..plugins import register_preset
from .delimiters import UNDERSCORE_CLOSE_RE, UNDERSCORE_OPEN_RE


def _apply_case(char: str, transform: str) -> str:
    if transform == "upper":
        return char.upper()
    if transform == "lower":
        return char.lower()
    return char


def stylize_letters(content: str, transform: str = "preserve") -> str:
    """Space out letters: ``bold text`` becomes ``b o l d   t e x t``."""
    if not content:
        return ""
    result: List[str] = []
    previous_alnum = False
    pending_gap = ""

    for char in content:
        processed = _apply_case(char, transform)
        if processed.isspace():
            if result and result[-1].isalnum():
                pending_gap = "   "
            previous_alnum = False
            continue
        if processed.isalnum():
            if previous_alnum:
                result.append(" ")
            elif pending_gap:
                result.append(pending_gap)
                pending_gap = ""
            elif result:
                result.append("   ")
            result.append(processed)
            previous_alnum = True
        else:
            if result and result[-1] == " ":
                result.pop()
            if pending_gap:
                result.append(pending_gap.strip())
                pending_gap = ""
            result.append(processed)
            previous_alnum = False
    return "".join(result).strip()


def stylize_delimited(
    content: str,
    delimiter: str,
    transform: str = "preserve",
    word_repeat: int = 2,
) -> str:
    """Thread ``delimiter`` between characters: ``a b`` becomes ``-a--b-``.

    Whitespace collapses into ``word_repeat`` delimiters. A span with no
    visible characters renders as a doubled delimiter.
    """
    output: List[str] = []
    opened = False
    pending_gap = False

    for char in content:
        if char.isspace():
            if opened:
                pending_gap = True
            continue
        if not opened:
            output.append(delimiter)
            opened = True
        else:
            output.append(delimiter * (word_repeat if pending_gap else 1))
        output.append(_apply_case(char, transform))
        pending_gap = False

    if not opened:
        return delimiter * 2
    output.append(delimiter)
    return "".join(output)


def _keep_code(span: str) -> str:
    return f"`{span}`"


def install_text(formatter: Formatter) -> None:
    formatter.register(name="code", symbol="`", recursive=False, transformer=_keep_code)
    formatter.register(
        name="strikethrough",
        symbol="~~",
        transformer=partial(stylize_delimited, delimiter="-"),
    )
    formatter.register(name="strong", symbol="**", transformer=partial(stylize_letters, transform="upper"))
    formatter.register(
        name="strong_underscore",
        symbol="__",
        recursive=False,
        transformer=partial(stylize_delimited, delimiter="_", transform="upper", word_repeat=3),
    )
    formatter.register(name="emphasis", symbol="*", transformer=stylize_letters)
    formatter.register(
        name="emphasis_underscore",
        open=UNDERSCORE_OPEN_RE,
        close=UNDERSCORE_CLOSE_RE,
        recursive=False,
        transformer=partial(stylize_delimited, delimiter="_", word_repeat=3),
    )


try:
    register_preset("text", install_text)
except ValueError:
    pass
