from __future__ import annotations

import re
from pathlib import Path
from typing import Dict, Iterable, List, Optional, Tuple

from ..formatting import Formatter
from ..logging_helpers import get_logger
from ..models import FrontMatter


FRONTMATTER_PATTERN = re.compile(r"^---\s*$")

logger = get_logger("conversion")


def _parse_int(value: Optional[str], default: int = 0) -> int:
    if value is None:
        return default
    match = re.search(r"-?\d+", value)
    if not match:
        return default
    return int(match.group())


def _parse_bool(value: Optional[str], default: bool = False) -> bool:
    if value is None:
        return default
    lowered = value.strip().lower()
    if lowered in {"true", "yes", "1", "on"}:
        return True
    if lowered in {"false", "no", "0", "off"}:
        return False
    return default


def parse_frontmatter(lines: List[str]) -> Tuple[FrontMatter, List[str]]:
    """Split an optional leading ``---`` block off ``lines``.

    Recognised keys are ``preset``, ``max_depth`` and ``regex``; unknown keys
    are ignored. An unclosed block is treated as ordinary text.
    """
    if not lines or not FRONTMATTER_PATTERN.match(lines[0]):
        return FrontMatter(), lines
    values: Dict[str, str] = {}
    idx = 1
    while idx < len(lines):
        if FRONTMATTER_PATTERN.match(lines[idx]):
            break
        if ":" in lines[idx]:
            key, value = lines[idx].split(":", 1)
            values[key.strip().lower()] = value.strip()
        idx += 1
    if idx >= len(lines):
        return FrontMatter(), lines
    defaults = FrontMatter()
    fm = FrontMatter(
        preset=(values.get("preset") or defaults.preset).strip() or defaults.preset,
        max_depth=max(0, _parse_int(values.get("max_depth"), defaults.max_depth)),
        regex=_parse_bool(values.get("regex"), defaults.regex),
    )
    logger.debug("Front matter: %s", fm)
    return fm, lines[idx + 1 :]


def read_lines(path: Path) -> List[str]:
    with path.open("r", encoding="utf-8") as handle:
        return handle.readlines()


def run_conversion(lines: Iterable[str], *, formatter: Formatter, use_regex: Optional[bool] = None) -> str:
    """Format the document as one string; spans may cross line breaks."""
    text = "".join(lines)
    if use_regex is None:
        return formatter(text)
    if use_regex:
        return formatter.format_regex(text)
    return formatter.format(text)
