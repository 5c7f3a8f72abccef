"""SGR (Select Graphic Rendition) encoding for termformat.

Maps colors and text attributes to SGR parameters and assembles them into
control sequences through the Style aggregate.

Public API:
    Style -- Ordered, deduplicated attribute aggregate
    render_style -- Serialize a Style to its escape sequence
    color_parameter / attribute_parameter -- Per-value parameter encoding
    parse_attribute / parse_style -- Textual attribute specs
"""

from termformat.sgr.codes import attribute_parameter, color_parameter
from termformat.sgr.parsing import (
    StyleParseError,
    parse_attribute,
    parse_color,
    parse_style,
)
from termformat.sgr.style import RESET, Style, render_style

__all__ = [
    "RESET",
    "Style",
    "StyleParseError",
    "attribute_parameter",
    "color_parameter",
    "parse_attribute",
    "parse_color",
    "parse_style",
    "render_style",
]
