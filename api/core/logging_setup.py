"""
Process-wide logging configuration.

Modules only call `logging.getLogger(__name__)`; the handler is attached once
here, at startup (see `api/main.py`).
"""

from __future__ import annotations

import logging
import sys

from . import config

_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"
_CONFIGURED = False


def _parse_level(level: str) -> int:
    if level.isdigit():
        return int(level)
    numeric = getattr(logging, level, None)
    if isinstance(numeric, int):
        return numeric
    return logging.INFO


def configure_logging(level: str | None = None) -> None:
    """
    Attach one stream handler to the root logger. Safe to call repeatedly.
    """
    global _CONFIGURED
    root = logging.getLogger()
    root.setLevel(_parse_level((level or config.log_level()).strip().upper()))
    if _CONFIGURED:
        return None

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(_FORMAT))
    root.addHandler(handler)
    _CONFIGURED = True
