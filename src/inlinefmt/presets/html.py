"""Inline Markdown emphasis to HTML tags."""
from __future__ import annotations

import html

from ..formatting import Formatter
from ..plugins import register_preset
from .delimiters import UNDERSCORE_CLOSE_RE, UNDERSCORE_OPEN_RE


def _wrap(tag: str):
    def transform(span: str) -> str:
        return f"<{tag}>{span}</{tag}>"

    return transform


def _code(span: str) -> str:
    return f"<code>{html.escape(span)}</code>"


def install_html(formatter: Formatter) -> None:
    formatter.register(name="code", symbol="`", recursive=False, transformer=_code)
    formatter.register(name="strong", symbol="**", transformer=_wrap("strong"))
    formatter.register(name="strong_underscore", symbol="__", transformer=_wrap("strong"))
    formatter.register(name="strikethrough", symbol="~~", transformer=_wrap("del"))
    formatter.register(name="highlight", symbol="==", transformer=_wrap("mark"))
    formatter.register(name="emphasis", symbol="*", transformer=_wrap("em"))
    formatter.register(
        name="emphasis_underscore",
        open=UNDERSCORE_OPEN_RE,
        close=UNDERSCORE_CLOSE_RE,
        transformer=_wrap("em"),
    )


try:
    register_preset("html", install_html)
except ValueError:
    pass
