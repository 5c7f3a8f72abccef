"""Textual attribute specs.

Configuration files and the command line describe styles as short text
specs rather than model constructors::

    bold                  fg:red          bg:#ff8800
    underline:curly       fg:196          ul:12,200,40
    no-italic             blink:rapid     custom:38;5;214

Specs are case-insensitive; ``_`` and ``-`` are interchangeable in names.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Iterable

from pydantic import ValidationError

from termformat.domain.models import (
    DEFAULT,
    NAMED_COLORS,
    Attribute,
    BackgroundColor,
    Blink,
    BlinkStyle,
    Bold,
    Color,
    Conceal,
    CrossOut,
    Custom,
    Faint,
    ForegroundColor,
    Indexed8Color,
    Italic,
    NormalIntensity,
    Overline,
    Reset,
    ReverseVideo,
    RGBColor,
    Subscript,
    Superscript,
    Underline,
    UnderlineColor,
    UnderlineStyle,
)
from termformat.sgr.style import Style

logger = logging.getLogger(__name__)

_HEX_COLOR = re.compile(r"^#([0-9a-f]{2})([0-9a-f]{2})([0-9a-f]{2})$")
_DECIMAL = re.compile(r"[0-9]+")

_FLAGS: dict[str, Attribute] = {
    "reset": Reset(),
    "bold": Bold(),
    "faint": Faint(),
    "dim": Faint(),
    "normal": NormalIntensity(),
    "normal-intensity": NormalIntensity(),
    "superscript": Superscript(),
    "subscript": Subscript(),
    "italic": Italic(),
    "no-italic": Italic(on=False),
    "reverse": ReverseVideo(),
    "reverse-video": ReverseVideo(),
    "no-reverse": ReverseVideo(on=False),
    "no-reverse-video": ReverseVideo(on=False),
    "conceal": Conceal(),
    "no-conceal": Conceal(on=False),
    "cross-out": CrossOut(),
    "strike": CrossOut(),
    "no-cross-out": CrossOut(on=False),
    "no-strike": CrossOut(on=False),
    "overline": Overline(),
    "no-overline": Overline(on=False),
    "underline": Underline(),
    "no-underline": Underline(style=UnderlineStyle.OFF),
    "blink": Blink(),
    "no-blink": Blink(style=BlinkStyle.OFF),
}

_COLOR_KEYS: dict[str, type] = {
    "fg": ForegroundColor,
    "foreground": ForegroundColor,
    "bg": BackgroundColor,
    "background": BackgroundColor,
    "ul": UnderlineColor,
    "underline-color": UnderlineColor,
}


class StyleParseError(ValueError):
    """Raised when a textual attribute spec cannot be understood."""

    def __init__(self, message: str, spec: str = "") -> None:
        super().__init__(message)
        self.spec = spec


def _normalize(name: str) -> str:
    return name.strip().lower().replace("_", "-")


def parse_color(text: str) -> Color:
    """Parse a color name, ``default``, ``#rrggbb``, ``r,g,b`` or a 0-255 index.

    Raises:
        StyleParseError: If the text is not a color.
    """
    name = _normalize(text)
    try:
        if name == "default":
            return DEFAULT
        named = NAMED_COLORS.get(name.replace("-", "_"))
        if named is not None:
            return named
        hex_match = _HEX_COLOR.match(name)
        if hex_match:
            red, green, blue = (int(part, 16) for part in hex_match.groups())
            return RGBColor(red=red, green=green, blue=blue)
        if "," in name:
            parts = [part.strip() for part in name.split(",")]
            if len(parts) != 3 or not all(_DECIMAL.fullmatch(part) for part in parts):
                raise StyleParseError(f"Expected three components in {text!r}", spec=text)
            red, green, blue = (int(part) for part in parts)
            return RGBColor(red=red, green=green, blue=blue)
        if _DECIMAL.fullmatch(name):
            return Indexed8Color(index=int(name))
    except ValidationError as exc:
        raise StyleParseError(f"Color out of range: {text!r}", spec=text) from exc
    raise StyleParseError(f"Unknown color: {text!r}", spec=text)


def parse_attribute(spec: str) -> Attribute:
    """Parse a single textual spec into an attribute.

    Raises:
        StyleParseError: If the spec is not recognized.
    """
    key, sep, value = spec.strip().partition(":")
    key = _normalize(key)

    if not sep:
        if key in _FLAGS:
            return _FLAGS[key]
        raise StyleParseError(f"Unknown attribute: {spec!r}", spec=spec)

    if key == "custom":
        # Raw parameters are passed through exactly as written.
        return Custom(parameters=value)
    if key in _COLOR_KEYS:
        return _COLOR_KEYS[key](color=parse_color(value))
    if key == "underline":
        try:
            return Underline(style=UnderlineStyle(_normalize(value)))
        except ValueError as exc:
            raise StyleParseError(f"Unknown underline style: {value!r}", spec=spec) from exc
    if key == "blink":
        try:
            return Blink(style=BlinkStyle(_normalize(value)))
        except ValueError as exc:
            raise StyleParseError(f"Unknown blink style: {value!r}", spec=spec) from exc
    raise StyleParseError(f"Unknown attribute: {spec!r}", spec=spec)


def parse_style(specs: Iterable[str] | str) -> Style:
    """Parse specs into a Style, in order.

    A single string is split on whitespace, so ``"bold fg:red"`` and
    ``["bold", "fg:red"]`` are equivalent.
    """
    if isinstance(specs, str):
        specs = specs.split()
    return Style(attributes=[parse_attribute(spec) for spec in specs])


def parse_named_styles(table: dict[str, list[str] | str]) -> dict[str, Style]:
    """Parse a ``name -> specs`` table, as found in the configuration file."""
    styles: dict[str, Style] = {}
    for name, specs in table.items():
        try:
            styles[name] = parse_style(specs)
        except StyleParseError:
            logger.error("Invalid style %r in configuration", name)
            raise
    return styles
