"""The attribute aggregate: one composed text style.

A Style is an ordered, duplicate-free sequence of attributes. Order is
kept exactly as the caller built it because SGR is order-sensitive for
some combinations (a later normal-intensity cancels an earlier bold, a
reset clears everything before it). Rendering performs no reordering.

Example usage::

    warning = Style.of(Bold(), ForegroundColor(color=YELLOW))
    print(f"{warning}careful{RESET}")
    print(format_text("careful", warning))
"""

from __future__ import annotations

import logging
from collections.abc import Iterable

from pydantic import BaseModel, ConfigDict, Field, field_validator

from termformat.control import CSI
from termformat.domain.models import (
    ATTRIBUTE_TYPES,
    Attribute,
    BackgroundColor,
    Blink,
    BlinkStyle,
    Bold,
    Color,
    Faint,
    ForegroundColor,
    Italic,
    Reset,
    Underline,
    UnderlineColor,
    UnderlineStyle,
)
from termformat.sgr.codes import attribute_parameter

logger = logging.getLogger(__name__)


class Style(BaseModel):
    """An ordered, deduplicated collection of text attributes.

    Duplicates are removed on construction, keeping the first occurrence,
    so ``Style.of(Bold(), red, Bold())`` equals ``Style.of(Bold(), red)``.
    Concatenation with ``+`` produces a new Style under the same rule.
    """

    model_config = ConfigDict(frozen=True)

    attributes: tuple[Attribute, ...] = Field(
        default=(), description="Attributes in application order"
    )

    @field_validator("attributes", mode="after")
    @classmethod
    def _deduplicate(cls, value: tuple) -> tuple:
        unique = tuple(dict.fromkeys(value))
        if len(unique) != len(value):
            logger.debug("Dropped %d duplicate attribute(s)", len(value) - len(unique))
        return unique

    @classmethod
    def of(cls, *attributes: Attribute) -> Style:
        """Build a Style from attributes given positionally."""
        return cls(attributes=attributes)

    def __add__(self, other: object) -> Style:
        if isinstance(other, Style):
            return Style(attributes=self.attributes + other.attributes)
        if isinstance(other, ATTRIBUTE_TYPES):
            return Style(attributes=self.attributes + (other,))
        return NotImplemented

    def __radd__(self, other: object) -> Style:
        if isinstance(other, ATTRIBUTE_TYPES):
            return Style(attributes=(other,) + self.attributes)
        return NotImplemented

    def __len__(self) -> int:
        return len(self.attributes)

    def __contains__(self, attribute: object) -> bool:
        return attribute in self.attributes

    def extend(self, attributes: Iterable[Attribute]) -> Style:
        """Return a new Style with ``attributes`` appended."""
        return Style(attributes=self.attributes + tuple(attributes))

    @property
    def is_empty(self) -> bool:
        return not self.attributes

    @property
    def parameters(self) -> list[str]:
        """The SGR parameter for each attribute, in order."""
        return [attribute_parameter(attribute) for attribute in self.attributes]

    @property
    def escape_sequence(self) -> str:
        return render_style(self)

    def describe(self) -> str:
        """Human-readable summary, for debugging output."""
        inner = ", ".join(attribute.describe() for attribute in self.attributes)
        return f"Style: [{inner}]"

    def __str__(self) -> str:
        return self.escape_sequence


def render_style(style: Style) -> str:
    """Serialize a Style into one SGR control sequence.

    An empty style renders to the empty string, so "no formatting" can be
    spliced into text without emitting anything.
    """
    if style.is_empty:
        return ""
    return f"{CSI}{';'.join(style.parameters)}m"


# ---------------------------------------------------------------------------
# Convenience styles
# ---------------------------------------------------------------------------

EMPTY = Style()
RESET = Style.of(Reset())

BOLD = Style.of(Bold())
FAINT = Style.of(Faint())
ITALIC = Style.of(Italic())
UNDERLINE = Style.of(Underline())
DOUBLE_UNDERLINE = Style.of(Underline(style=UnderlineStyle.DOUBLE))
CURLY_UNDERLINE = Style.of(Underline(style=UnderlineStyle.CURLY))
BLINK = Style.of(Blink())
RAPID_BLINK = Style.of(Blink(style=BlinkStyle.RAPID))


def foreground(color: Color) -> Style:
    return Style.of(ForegroundColor(color=color))


def background(color: Color) -> Style:
    return Style.of(BackgroundColor(color=color))


def underline_color(color: Color) -> Style:
    return Style.of(UnderlineColor(color=color))
