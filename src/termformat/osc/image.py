"""iTerm2 inline image protocol encoding.

Format::

    OSC 1337 ; File = [arguments] : <base64 data> BEL

Where arguments are ``;``-separated ``key=value`` pairs:
    inline=1               - display inline (always set)
    name=<name>            - file name
    width=<dimension>      - N (cells), Npx (pixels) or N% (of the window)
    height=<dimension>     - as width
    preserveAspectRatio=0  - stretch to fill; the terminal default is 1

Protocol: https://iterm2.com/documentation-images.html
Supported by iTerm2, WezTerm and mintty.
"""

from __future__ import annotations

from termformat.control import BEL, OSC
from termformat.domain.models import ImageOptions, TerminalImage


def image_arguments(options: ImageOptions | None = None) -> list[tuple[str, str]]:
    """Return the protocol arguments for ``options`` in emission order."""
    arguments = [("inline", "1")]
    if options is None:
        return arguments
    if options.name is not None:
        arguments.append(("name", options.name))
    if options.width is not None:
        arguments.append(("width", str(options.width)))
    if options.height is not None:
        arguments.append(("height", str(options.height)))
    if not options.preserve_aspect_ratio:
        arguments.append(("preserveAspectRatio", "0"))
    return arguments


def encode_image(image: TerminalImage, options: ImageOptions | None = None) -> str:
    """Return the escaped inline-image sequence, ready to be printed.

    The payload is inserted as-is; it is never decoded.
    """
    joined = ";".join(f"{key}={value}" for key, value in image_arguments(options))
    return f"{OSC}1337;File={joined}:{image.payload}{BEL}"
