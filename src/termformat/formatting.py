"""Formatting facade: splice styles, hyperlinks and images into text.

These functions are the explicit replacement for string-interpolation
hooks. Every printable value exposes an ``escape_sequence``; the helpers
here place those sequences around or between literal text.

Example usage::

    print(format_text("done", Style.of(Bold(), ForegroundColor(color=GREEN))))
    docs = Hyperlink(target="https://example.com/docs", label="docs")
    print(splice("see ", docs.relabel("the docs"), " for details"))
    print(splice("status: ", ("failed", BOLD + foreground(RED)), " (retrying)"))
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from typing import Protocol, Union, runtime_checkable

from termformat.domain.models import (
    ATTRIBUTE_TYPES,
    Attribute,
    Dimension,
    Hyperlink,
    ImageOptions,
    TerminalImage,
)
from termformat.sgr.style import RESET, Style

logger = logging.getLogger(__name__)


@runtime_checkable
class TerminalPrintable(Protocol):
    """Anything that can be written to a terminal as an escape sequence."""

    @property
    def escape_sequence(self) -> str:
        ...


StyleLike = Union[Style, Attribute, Iterable[Attribute], None]


def as_style(style: StyleLike) -> Style | None:
    """Coerce an attribute, a list of attributes or None into a Style."""
    if style is None or isinstance(style, Style):
        return style
    if isinstance(style, ATTRIBUTE_TYPES):
        return Style.of(style)
    return Style(attributes=tuple(style))


def escape(printable: TerminalPrintable | None) -> str:
    """Return the escape form of ``printable``, or ``""`` for None."""
    if printable is None:
        return ""
    return printable.escape_sequence


def format_text(value: object, style: StyleLike) -> str:
    """Render ``value`` in ``style`` and reset formatting afterwards.

    The trailing reset keeps the span from bleeding into whatever text
    follows. With no style (None or empty) the value is returned
    unchanged and no escapes are emitted.
    """
    style = as_style(style)
    text = str(value)
    if not style:
        return text
    return f"{style.escape_sequence}{text}{RESET.escape_sequence}"


def splice(*parts: object) -> str:
    """Concatenate literal text and printable values in order.

    Each part may be:
        - a ``str``, emitted literally
        - a printable value (Style, Hyperlink, TerminalImage), emitted as
          its escape sequence
        - a ``(value, style)`` pair, emitted through :func:`format_text`
        - ``None``, which emits nothing

    Raises:
        TypeError: For any other kind of part.
    """
    pieces: list[str] = []
    for part in parts:
        if part is None:
            continue
        if isinstance(part, str):
            pieces.append(part)
        elif isinstance(part, tuple) and len(part) == 2:
            value, style = part
            pieces.append(format_text(value, style))
        elif isinstance(part, TerminalPrintable):
            pieces.append(part.escape_sequence)
        else:
            raise TypeError(f"Cannot splice {type(part).__name__!r} into terminal text")
    return "".join(pieces)


def link(label: str, target: str | Hyperlink, id: str | None = None) -> str:
    """Return ``label`` as a hyperlink.

    ``target`` is either a URI or an existing Hyperlink whose target and
    id are reused with the new label. ``id`` only applies to a URI target.
    """
    if isinstance(target, Hyperlink):
        if id is not None:
            logger.debug("Ignoring id=%r for an existing hyperlink", id)
        return target.relabel(label).escape_sequence
    return Hyperlink(target=target, label=label, id=id).escape_sequence


def inline_image(
    image: TerminalImage,
    options: ImageOptions | None = None,
    *,
    name: str | None = None,
    width: Dimension | int | str | None = None,
    height: Dimension | int | str | None = None,
    preserve_aspect_ratio: bool = True,
) -> str:
    """Return the inline-image sequence for ``image``.

    Options come either as an ImageOptions record or as keywords; an
    explicit record wins.
    """
    if options is None:
        options = ImageOptions(
            name=name,
            width=width,
            height=height,
            preserve_aspect_ratio=preserve_aspect_ratio,
        )
    return image.encode(options)
