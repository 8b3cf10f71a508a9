"""Logging setup for the rfd_processor logger tree.

Two output modes, selected by ``log_format`` in config:

- text: rich console output on stderr
- json: one JSON object per line, {"level": ..., "ts": ..., "logger": ..., "msg": ...}
"""

from __future__ import annotations

import json
import logging
import sys
from datetime import datetime, timezone
from typing import Any, TextIO

from rich.console import Console
from rich.logging import RichHandler

_LEVELS = {
    "debug": logging.DEBUG,
    "info": logging.INFO,
    "warn": logging.WARNING,
    "error": logging.ERROR,
}


class JSONFormatter(logging.Formatter):
    """Formatter for JSON lines output (machine-readable)."""

    def format(self, record: logging.LogRecord) -> str:
        entry: dict[str, Any] = {
            "level": record.levelname,
            "ts": datetime.now(timezone.utc).isoformat(),
            "logger": record.name,
            "msg": record.getMessage(),
        }
        if record.exc_info:
            entry["exc"] = self.formatException(record.exc_info)
        return json.dumps(entry)


def setup_logging(level: str = "info", fmt: str = "text", stream: TextIO | None = None) -> None:
    """Configure the ``rfd_processor`` logger.

    Args:
        level: One of debug, info, warn, error.
        fmt: "text" for rich console output, "json" for JSON lines.
        stream: Output stream (default: stderr).
    """
    logger = logging.getLogger("rfd_processor")
    logger.setLevel(_LEVELS.get(level, logging.INFO))
    logger.handlers.clear()

    handler: logging.Handler
    if fmt == "json":
        handler = logging.StreamHandler(stream or sys.stderr)
        handler.setFormatter(JSONFormatter())
    else:
        handler = RichHandler(
            console=Console(file=stream or sys.stderr),
            show_path=False,
            rich_tracebacks=False,
        )
    logger.addHandler(handler)
