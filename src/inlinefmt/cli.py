"""
Apply inline markup transformers to a text file or stdin.
"""
from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

from .conversion import parse_frontmatter, read_lines, run_conversion
from .logging_helpers import get_logger, setup_base_logger
from .models import FormatterConfig
from .presets import available_presets, build_formatter


LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")

logger = get_logger("cli")


def _non_negative_int(value: str) -> int:
    try:
        parsed = int(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"Expected an integer, got '{value}'.") from exc
    if parsed < 0:
        raise argparse.ArgumentTypeError("Value cannot be negative.")
    return parsed


def read_input(path: Path) -> List[str]:
    if str(path) == "-":
        return sys.stdin.read().splitlines(keepends=True)
    return read_lines(path)


def write_output(path: Optional[Path], content: str) -> None:
    if path is None:
        sys.stdout.write(content)
        return
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content, encoding="utf-8")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Rewrite delimited inline markup such as *italic* or **bold**.")
    parser.add_argument(
        "input_path",
        nargs="?",
        type=Path,
        default=Path("-"),
        help="Path to the input file, or '-' for stdin (default).",
    )
    parser.add_argument("-o", "--output", type=Path, help="Optional path to write the result to.")
    parser.add_argument(
        "--preset",
        choices=available_presets(),
        help="Transformer set to apply (default: front matter 'preset', else html).",
    )
    parser.add_argument(
        "--regex",
        action="store_true",
        default=None,
        help="Match every delimiter as a regular expression.",
    )
    parser.add_argument(
        "--max-depth",
        type=_non_negative_int,
        metavar="N",
        help="Maximum nesting depth for recursive transformers (default: 32).",
    )
    parser.add_argument("--log-level", default="WARNING", choices=LOG_LEVELS, help="Diagnostic verbosity.")
    parser.add_argument("--json-logs", action="store_true", help="Emit diagnostics as JSON lines.")
    parser.add_argument("--list-presets", action="store_true", help="Print the available presets and exit.")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    setup_base_logger(json_logs=args.json_logs, level=getattr(logging, args.log_level))

    if args.list_presets:
        sys.stdout.write("\n".join(available_presets()) + "\n")
        return 0

    try:
        lines = read_input(args.input_path)
    except OSError as exc:
        sys.stderr.write(f"Cannot read '{args.input_path}': {exc.strerror or exc}\n")
        return 2
    frontmatter, content = parse_frontmatter(lines)

    preset = args.preset or frontmatter.preset
    config = FormatterConfig(
        max_depth=args.max_depth if args.max_depth is not None else frontmatter.max_depth,
        use_regex=args.regex if args.regex is not None else frontmatter.regex,
    )
    try:
        formatter = build_formatter(preset, config)
    except KeyError as exc:
        sys.stderr.write(f"{exc.args[0]}\n")
        return 2
    logger.info("Formatting %s with preset '%s'", args.input_path, preset)
    write_output(args.output, run_conversion(content, formatter=formatter))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
