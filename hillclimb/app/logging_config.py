# hillclimb/app/logging_config.py
#!/usr/bin/env python3
"""
Logging setup for the hillclimb entry points.

Call configure_logging() once from main(); library modules only create
their own `logging.getLogger(__name__)` loggers.
"""

from __future__ import annotations

import logging
import sys


def resolve_level(name: str) -> int:
    """Map a level name such as "debug" to its logging constant (INFO if unknown)."""
    level = logging.getLevelName(name.upper())
    return level if isinstance(level, int) else logging.INFO


def configure_logging(level: int = logging.INFO) -> None:
    """Attach a stdout handler to the root logger unless one is already there."""
    root = logging.getLogger()

    # Don't duplicate handlers if someone already configured logging.
    if root.handlers:
        return

    handler = logging.StreamHandler(stream=sys.stdout)
    formatter = logging.Formatter(
        fmt="%(asctime)s [%(levelname)s] %(name)s: %(message)s"
    )
    handler.setFormatter(formatter)
    root.addHandler(handler)
    root.setLevel(level)
