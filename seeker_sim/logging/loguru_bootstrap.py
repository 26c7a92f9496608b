"""
loguru sinks for simulation runs.

Package modules never talk to loguru directly. They log through stdlib
loggers, and :func:`setup_logging` installs an :class:`InterceptHandler` on
the root logger so lifecycle records (env init, resets, terminations) and
recovered errors (invalid actions, missing target, spawn fallback) reach the
configured console and file sinks.
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import Any, Dict, Optional

from loguru import logger as _logger

DEFAULT_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss.SSS}</green> | <level>{level: <8}</level> | "
    "<cyan>{name}</cyan>:<cyan>{line}</cyan> - <level>{message}</level>"
)


class InterceptHandler(logging.Handler):
    """Forward a stdlib record to loguru, keeping the caller's location."""

    def emit(self, record: logging.LogRecord) -> None:
        try:
            level = _logger.level(record.levelname).name
        except ValueError:
            level = record.levelno
        # Skip logging's own frames so {name}:{line} points at the caller
        frame, depth = logging.currentframe(), 2
        while frame and frame.f_code.co_filename == logging.__file__:
            frame = frame.f_back
            depth += 1
        _logger.opt(depth=depth, exception=record.exc_info).log(
            level, record.getMessage()
        )


def _resolve_level(level: str) -> tuple[str, int]:
    name = level.upper()
    number = logging.getLevelName(name)
    if not isinstance(number, int):
        raise ValueError(f"Unknown log level: {level}")
    return name, number


def setup_logging(
    *,
    level: str = "INFO",
    console: bool = True,
    file_path: Optional[str | Path] = None,
    rotation: Optional[str | int] = None,
    retention: Optional[str | int] = None,
    serialize: bool = False,
) -> None:
    """Replace all loguru sinks and route stdlib logging into them.

    Args:
        level: Minimum level name, case-insensitive
        console: Add a colored stderr sink
        file_path: Optional log file; ``rotation``/``retention`` follow
            loguru's file sink options
        serialize: Emit JSON records instead of formatted lines

    Raises:
        ValueError: If ``level`` is not a known logging level
    """
    name, number = _resolve_level(level)
    common: Dict[str, Any] = {
        "level": name,
        "backtrace": False,
        "diagnose": False,
        "serialize": serialize,
    }

    _logger.remove()
    if console:
        _logger.add(sys.stderr, format=DEFAULT_FORMAT, **common)
    if file_path:
        _logger.add(str(file_path), rotation=rotation, retention=retention, **common)
    _bridge_stdlib(number)


def _bridge_stdlib(level: int) -> None:
    logging.root.handlers = [InterceptHandler()]
    logging.root.setLevel(level)
    # Records from named loggers must reach the root handler exactly once
    for name in list(logging.Logger.manager.loggerDict):
        named = logging.getLogger(name)
        named.handlers = []
        named.propagate = True


def get_logger():
    """Return the loguru logger that owns the sinks."""
    return _logger
