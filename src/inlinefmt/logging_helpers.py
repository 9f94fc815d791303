"""Logger setup for inlinefmt.

The library only ever asks for namespaced loggers; handlers are attached by
``setup_base_logger``, which the command line entry point calls once.
"""
from __future__ import annotations

import json
import logging
import sys
from datetime import datetime, timezone
from typing import Optional, TextIO


BASE_LOGGER = "inlinefmt"


class JsonLogFormatter(logging.Formatter):
    """One compact JSON object per record: ts, level, module, msg and optional ctx."""

    def format(self, record: logging.LogRecord) -> str:
        ts = datetime.fromtimestamp(record.created, tz=timezone.utc)
        payload = {
            "ts": ts.isoformat(timespec="milliseconds").replace("+00:00", "Z"),
            "level": record.levelname,
            "module": record.name,
            "msg": record.getMessage(),
        }
        ctx = getattr(record, "context", None)
        if isinstance(ctx, dict) and ctx:
            payload["ctx"] = ctx
        return json.dumps(payload, ensure_ascii=False)


def setup_base_logger(
    *, json_logs: bool = False, level: int = logging.WARNING, stream: Optional[TextIO] = None
) -> logging.Logger:
    base = logging.getLogger(BASE_LOGGER)
    base.setLevel(level)
    if base.handlers:
        return base
    base.propagate = False
    handler = logging.StreamHandler(stream or sys.stderr)
    if json_logs:
        handler.setFormatter(JsonLogFormatter())
    else:
        handler.setFormatter(logging.Formatter("%(levelname)s: %(message)s"))
    base.addHandler(handler)
    return base


def get_logger(name: Optional[str] = None) -> logging.Logger:
    if not name or name == BASE_LOGGER:
        return logging.getLogger(BASE_LOGGER)
    if name.startswith(f"{BASE_LOGGER}."):
        return logging.getLogger(name)
    return logging.getLogger(f"{BASE_LOGGER}.{name}")
