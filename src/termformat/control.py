"""Terminal control primitives.

The handful of control characters and introducers every other encoder in
the package is assembled from.
"""

from __future__ import annotations

ESC: str = "\x1b"
"""The escape character (``ESC``, 0x1B)."""

BEL: str = "\x07"
"""The bell character (``BEL``, 0x07). Terminates OSC sequences."""

CSI: str = ESC + "["
"""Control Sequence Introducer."""

OSC: str = ESC + "]"
"""Operating System Command introducer."""


def window_title(title: str) -> str:
    """Return the OSC sequence that sets the terminal window title."""
    return f"{OSC}0;{title}{BEL}"
