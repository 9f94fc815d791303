"""Document-level helpers around the formatter."""

from .core import parse_frontmatter, read_lines, run_conversion

__all__ = [
    "parse_frontmatter",
    "read_lines",
    "run_conversion",
]
