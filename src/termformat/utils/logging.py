"""Logging setup for termformat.

Everything the package logs goes through the ``termformat`` logger.
Formatted output itself goes to stdout, so log records are kept on stderr
(and optionally a file) where they cannot interleave with escape
sequences.
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path

from termformat.config.settings import LoggingConfig

PACKAGE_LOGGER = "termformat"


def _resolve_level(name: str) -> int:
    level = logging.getLevelName(name.upper())
    # getLevelName returns "Level X" for names it does not know
    return level if isinstance(level, int) else logging.INFO


def _build_handlers(config: LoggingConfig) -> list[logging.Handler]:
    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stderr)]
    if config.file:
        path = Path(config.file)
        path.parent.mkdir(parents=True, exist_ok=True)
        handlers.append(logging.FileHandler(path, encoding="utf-8"))
    return handlers


def setup_logging(config: LoggingConfig | None = None) -> None:
    """Configure the ``termformat`` logger.

    Calling it again replaces the handlers installed by the previous call.

    Args:
        config: Logging configuration. If None, uses defaults
                (WARNING level, stderr output).
    """
    if config is None:
        config = LoggingConfig()

    package_logger = logging.getLogger(PACKAGE_LOGGER)
    package_logger.setLevel(_resolve_level(config.level))

    for handler in list(package_logger.handlers):
        package_logger.removeHandler(handler)
        handler.close()

    formatter = logging.Formatter(config.format)
    for handler in _build_handlers(config):
        handler.setFormatter(formatter)
        package_logger.addHandler(handler)

    package_logger.debug("Logging initialized at %s level", config.level)
