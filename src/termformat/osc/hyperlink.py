"""OSC 8 hyperlink encoding.

Format::

    OSC 8 ; [id=<id>] ; <target> BEL <label> OSC 8 ; ; BEL

See https://gist.github.com/egmontkob/eb114294efbcd5adb1944c9f3cb5feda
for the protocol description.
"""

from __future__ import annotations

from termformat.control import BEL, OSC
from termformat.domain.models import Hyperlink

HYPERLINK_END: str = f"{OSC}8;;{BEL}"


def hyperlink_start(target: str, id: str | None = None) -> str:
    """Return the sequence that opens a hyperlink to ``target``."""
    params = f"id={id}" if id is not None else ""
    return f"{OSC}8;{params};{target}{BEL}"


def encode_hyperlink(link: Hyperlink) -> str:
    """Wrap the link's label in a hyperlink envelope.

    The target is emitted as given; it is neither validated nor
    percent-encoded.
    """
    return f"{hyperlink_start(link.target, link.id)}{link.label}{HYPERLINK_END}"
