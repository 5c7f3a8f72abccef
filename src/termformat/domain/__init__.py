"""Domain models for termformat.

This package contains the value objects every encoder works on: the
three-tier color model, the closed set of text attributes, and the
hyperlink and inline-image payloads. All models use Pydantic v2 and are
frozen.
"""

from termformat.domain.models import (
    ATTRIBUTE_TYPES,
    DEFAULT,
    NAMED_COLORS,
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
    Dimension,
    DimensionUnit,
    Faint,
    ForegroundColor,
    Hyperlink,
    ImageOptions,
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
    TerminalImage,
    Underline,
    UnderlineColor,
    UnderlineStyle,
    indexed4,
    indexed8,
    rgb,
)

__all__ = [
    "ATTRIBUTE_TYPES",
    "DEFAULT",
    "NAMED_COLORS",
    "Attribute",
    "BackgroundColor",
    "Blink",
    "BlinkStyle",
    "Bold",
    "Color",
    "ColorSlot",
    "Conceal",
    "CrossOut",
    "Custom",
    "DefaultColor",
    "Dimension",
    "DimensionUnit",
    "Faint",
    "ForegroundColor",
    "Hyperlink",
    "ImageOptions",
    "Indexed4Color",
    "Indexed8Color",
    "Italic",
    "NormalIntensity",
    "Overline",
    "Reset",
    "ReverseVideo",
    "RGBColor",
    "Subscript",
    "Superscript",
    "TerminalImage",
    "Underline",
    "UnderlineColor",
    "UnderlineStyle",
    "indexed4",
    "indexed8",
    "rgb",
]
