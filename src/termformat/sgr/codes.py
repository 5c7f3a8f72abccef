"""SGR (Select Graphic Rendition) parameter codes.

Reference: ECMA-48 section 8.3.117, plus the colon sub-parameter underline
styles introduced by kitty and adopted by iTerm, VTE and others.

Every attribute maps to exactly one parameter string, independent of the
other attributes around it. Colors map to a different fragment depending
on the slot (foreground, background, underline) they are applied to.
"""

from __future__ import annotations

from termformat.domain.models import (
    Attribute,
    BackgroundColor,
    Blink,
    BlinkStyle,
    Bold,
    Color,
    ColorSlot,
    Conceal,
    CrossOut,
    Custom,
    DefaultColor,
    Faint,
    ForegroundColor,
    Indexed4Color,
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

# ---------------------------------------------------------------------------
# Fixed parameter codes
# ---------------------------------------------------------------------------

RESET: str = "0"
BOLD: str = "1"
FAINT: str = "2"
NORMAL_INTENSITY: str = "22"
SUPERSCRIPT: str = "73"
SUBSCRIPT: str = "74"

# (on, off) pairs for the toggle attributes
ITALIC: tuple[str, str] = ("3", "23")
REVERSE_VIDEO: tuple[str, str] = ("7", "27")
CONCEAL: tuple[str, str] = ("8", "28")
CROSS_OUT: tuple[str, str] = ("9", "29")
OVERLINE: tuple[str, str] = ("53", "55")

UNDERLINE_CODES: dict[UnderlineStyle, str] = {
    UnderlineStyle.SINGLE: "4",
    UnderlineStyle.DOUBLE: "4:2",
    UnderlineStyle.CURLY: "4:3",
    UnderlineStyle.DOTTED: "4:4",
    UnderlineStyle.DASHED: "4:5",
    UnderlineStyle.OFF: "24",
}

BLINK_CODES: dict[BlinkStyle, str] = {
    BlinkStyle.REGULAR: "5",
    BlinkStyle.RAPID: "6",
    BlinkStyle.OFF: "25",
}

# Extended color introducers and default-color codes per slot
_EXTENDED_PREFIX: dict[ColorSlot, str] = {
    ColorSlot.FOREGROUND: "38",
    ColorSlot.BACKGROUND: "48",
    ColorSlot.UNDERLINE: "58",
}

_DEFAULT_CODES: dict[ColorSlot, str] = {
    ColorSlot.FOREGROUND: "39",
    ColorSlot.BACKGROUND: "49",
    ColorSlot.UNDERLINE: "59",
}

_TOGGLES: dict[type, tuple[str, str]] = {
    Italic: ITALIC,
    ReverseVideo: REVERSE_VIDEO,
    Conceal: CONCEAL,
    CrossOut: CROSS_OUT,
    Overline: OVERLINE,
}

_FIXED: dict[type, str] = {
    Reset: RESET,
    Bold: BOLD,
    Faint: FAINT,
    NormalIntensity: NORMAL_INTENSITY,
    Superscript: SUPERSCRIPT,
    Subscript: SUBSCRIPT,
}

_COLOR_SLOTS: dict[type, ColorSlot] = {
    ForegroundColor: ColorSlot.FOREGROUND,
    BackgroundColor: ColorSlot.BACKGROUND,
    UnderlineColor: ColorSlot.UNDERLINE,
}


def color_parameter(color: Color, slot: ColorSlot) -> str:
    """Return the SGR parameter fragment for ``color`` in ``slot``.

    16-color codes cannot be used for the underline slot, so they are
    converted to the equivalent 256-color table entry there. No other
    conversion between tiers happens.

    Raises:
        TypeError: If ``color`` is not one of the color models.
    """
    if isinstance(color, Indexed4Color):
        if slot is ColorSlot.FOREGROUND:
            return str(color.code)
        if slot is ColorSlot.BACKGROUND:
            return str(color.code + 10)
        return f"{_EXTENDED_PREFIX[slot]};5;{color.palette_index}"
    if isinstance(color, Indexed8Color):
        return f"{_EXTENDED_PREFIX[slot]};5;{color.index}"
    if isinstance(color, RGBColor):
        return f"{_EXTENDED_PREFIX[slot]};2;{color.red};{color.green};{color.blue}"
    if isinstance(color, DefaultColor):
        return _DEFAULT_CODES[slot]
    raise TypeError(f"Not a color: {color!r}")


def attribute_parameter(attribute: Attribute) -> str:
    """Return the SGR parameter string for a single attribute.

    Raises:
        TypeError: If ``attribute`` is not one of the attribute models.
    """
    kind = type(attribute)
    if kind in _FIXED:
        return _FIXED[kind]
    if kind in _TOGGLES:
        on, off = _TOGGLES[kind]
        return on if attribute.on else off
    if kind in _COLOR_SLOTS:
        return color_parameter(attribute.color, _COLOR_SLOTS[kind])
    if kind is Underline:
        return UNDERLINE_CODES[attribute.style]
    if kind is Blink:
        return BLINK_CODES[attribute.style]
    if kind is Custom:
        return attribute.parameters
    raise TypeError(f"Not a text attribute: {attribute!r}")
