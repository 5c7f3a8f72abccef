"""Terminal capability queries.

Thin, stateless wrappers around the environment and the output stream.
None of the encoders call these; callers use them to decide what to emit.
"""

from __future__ import annotations

import logging
import os
import sys
from collections.abc import Mapping
from typing import TextIO

from termformat.control import window_title

logger = logging.getLogger(__name__)

TRUE_COLOR_VALUES: frozenset[str] = frozenset({"truecolor", "24bit"})


def supports_true_color(environ: Mapping[str, str] | None = None) -> bool:
    """Whether ``COLORTERM`` advertises 24-bit color support.

    This is advisory only: colors are never converted between tiers.
    """
    if environ is None:
        environ = os.environ
    return environ.get("COLORTERM", "") in TRUE_COLOR_VALUES


def is_tty(stream: TextIO | None = None) -> bool:
    """Whether ``stream`` (stdout by default) is connected to a terminal."""
    if stream is None:
        stream = sys.stdout
    try:
        return stream.isatty()
    except (AttributeError, ValueError):
        # Detached or closed streams
        return False


def set_window_title(title: str, stream: TextIO | None = None) -> None:
    """Write the window-title sequence to ``stream`` (stdout by default)."""
    if stream is None:
        stream = sys.stdout
    logger.debug("Setting window title to %r", title)
    stream.write(window_title(title))
    stream.flush()
