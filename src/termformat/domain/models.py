"""Core domain models for the termformat system.

These models are the values flowing through the encoders: colors in one of
three tiers, the closed set of text attributes, and the hyperlink and
inline-image payloads. Every model is frozen, so values can be hashed,
deduplicated and shared between callers without copying.
"""

from __future__ import annotations

import base64
import enum
import re
from typing import Annotated, Literal, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator


# ---------------------------------------------------------------------------
# Enumerations
# ---------------------------------------------------------------------------


class ColorSlot(str, enum.Enum):
    """Which part of a character cell a color is applied to."""

    FOREGROUND = "foreground"
    BACKGROUND = "background"
    UNDERLINE = "underline"


class UnderlineStyle(str, enum.Enum):
    """Underline variants. Everything beyond SINGLE is not widely supported."""

    SINGLE = "single"
    DOUBLE = "double"
    CURLY = "curly"  # iTerm 3.4+, kitty
    DOTTED = "dotted"
    DASHED = "dashed"
    OFF = "off"


class BlinkStyle(str, enum.Enum):
    """Blink frequencies."""

    REGULAR = "regular"
    RAPID = "rapid"  # rarely honoured
    OFF = "off"


class DimensionUnit(str, enum.Enum):
    """Units accepted by the inline image protocol for width/height."""

    CELLS = "cells"
    PIXELS = "pixels"
    PERCENT = "percent"


# ---------------------------------------------------------------------------
# Color Models (discriminated union)
# ---------------------------------------------------------------------------

_INDEXED4_NAMES: dict[int, str] = {
    30: "black", 31: "red", 32: "green", 33: "yellow",
    34: "blue", 35: "magenta", 36: "cyan", 37: "white",
    90: "gray", 91: "bright red", 92: "bright green", 93: "bright yellow",
    94: "bright blue", 95: "bright magenta", 96: "bright cyan", 97: "bright white",
}


class Indexed4Color(BaseModel):
    """One of the standard 16 colors, stored as its SGR foreground code.

    The colors actually displayed are implementation-defined and usually
    customizable in the user's terminal application.
    """

    model_config = ConfigDict(frozen=True)

    tier: Literal["indexed4"] = "indexed4"
    code: int = Field(description="SGR foreground code, 30-37 or 90-97")

    @field_validator("code")
    @classmethod
    def _check_code(cls, value: int) -> int:
        if not (30 <= value <= 37 or 90 <= value <= 97):
            raise ValueError(f"16-color code must be in 30-37 or 90-97, got {value}")
        return value

    @property
    def palette_index(self) -> int:
        """The equivalent entry in the 256-color table."""
        return self.code - 30 if self.code < 40 else self.code - 82

    def describe(self) -> str:
        return _INDEXED4_NAMES[self.code]


class Indexed8Color(BaseModel):
    """An entry in the 256-color table; the first 16 alias the 16 colors."""

    model_config = ConfigDict(frozen=True)

    tier: Literal["indexed8"] = "indexed8"
    index: int = Field(ge=0, le=255, description="Index into the 256-color table")

    def describe(self) -> str:
        return f"8-bit color (index {self.index})"


class RGBColor(BaseModel):
    """A 24-bit color. Not supported by Terminal.app, supported by iTerm."""

    model_config = ConfigDict(frozen=True)

    tier: Literal["rgb24"] = "rgb24"
    red: int = Field(ge=0, le=255)
    green: int = Field(ge=0, le=255)
    blue: int = Field(ge=0, le=255)

    def describe(self) -> str:
        return f"24-bit color (red: {self.red}, green: {self.green}, blue: {self.blue})"


class DefaultColor(BaseModel):
    """The terminal's own default color for the slot."""

    model_config = ConfigDict(frozen=True)

    tier: Literal["default"] = "default"

    def describe(self) -> str:
        return "default"


Color = Annotated[
    Union[Indexed4Color, Indexed8Color, RGBColor, DefaultColor],
    Field(discriminator="tier"),
]


def indexed4(code: int) -> Indexed4Color:
    return Indexed4Color(code=code)


def indexed8(index: int) -> Indexed8Color:
    return Indexed8Color(index=index)


def rgb(red: int, green: int, blue: int) -> RGBColor:
    return RGBColor(red=red, green=green, blue=blue)


BLACK = Indexed4Color(code=30)
RED = Indexed4Color(code=31)
GREEN = Indexed4Color(code=32)
YELLOW = Indexed4Color(code=33)
BLUE = Indexed4Color(code=34)
MAGENTA = Indexed4Color(code=35)
CYAN = Indexed4Color(code=36)
WHITE = Indexed4Color(code=37)

GRAY = Indexed4Color(code=90)  # "bright black"
BRIGHT_RED = Indexed4Color(code=91)
BRIGHT_GREEN = Indexed4Color(code=92)
BRIGHT_YELLOW = Indexed4Color(code=93)
BRIGHT_BLUE = Indexed4Color(code=94)
BRIGHT_MAGENTA = Indexed4Color(code=95)
BRIGHT_CYAN = Indexed4Color(code=96)
BRIGHT_WHITE = Indexed4Color(code=97)

DEFAULT = DefaultColor()

NAMED_COLORS: dict[str, Indexed4Color] = {
    name.replace(" ", "_"): Indexed4Color(code=code)
    for code, name in _INDEXED4_NAMES.items()
}


# ---------------------------------------------------------------------------
# Attribute Models (discriminated union)
# ---------------------------------------------------------------------------


class ForegroundColor(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind: Literal["foreground"] = "foreground"
    color: Color

    def describe(self) -> str:
        return f"foreground: {self.color.describe()}"


class BackgroundColor(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind: Literal["background"] = "background"
    color: Color

    def describe(self) -> str:
        return f"background: {self.color.describe()}"


class UnderlineColor(BaseModel):
    """Underline color. Not widely supported."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["underline_color"] = "underline_color"
    color: Color

    def describe(self) -> str:
        return f"underline color: {self.color.describe()}"


class Bold(BaseModel):
    """Bold text. Turned off by NormalIntensity."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["bold"] = "bold"

    def describe(self) -> str:
        return "bold"


class Faint(BaseModel):
    """Faint text. Turned off by NormalIntensity."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["faint"] = "faint"

    def describe(self) -> str:
        return "faint"


class NormalIntensity(BaseModel):
    """Neither bold nor faint."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["normal_intensity"] = "normal_intensity"

    def describe(self) -> str:
        return "normal intensity"


class Italic(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind: Literal["italic"] = "italic"
    on: bool = True

    def describe(self) -> str:
        return "italic" if self.on else "no italic"


class Underline(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind: Literal["underline"] = "underline"
    style: UnderlineStyle = UnderlineStyle.SINGLE

    def describe(self) -> str:
        return f"underline: {self.style.value}"


class Blink(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind: Literal["blink"] = "blink"
    style: BlinkStyle = BlinkStyle.REGULAR

    def describe(self) -> str:
        return {
            BlinkStyle.REGULAR: "blink",
            BlinkStyle.RAPID: "rapid blink",
            BlinkStyle.OFF: "no blink",
        }[self.style]


class ReverseVideo(BaseModel):
    """Swap foreground and background colors."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["reverse_video"] = "reverse_video"
    on: bool = True

    def describe(self) -> str:
        return "reverse video" if self.on else "no reverse video"


class Conceal(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind: Literal["conceal"] = "conceal"
    on: bool = True

    def describe(self) -> str:
        return "conceal" if self.on else "no conceal"


class CrossOut(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind: Literal["cross_out"] = "cross_out"
    on: bool = True

    def describe(self) -> str:
        return "cross out" if self.on else "no cross out"


class Overline(BaseModel):
    """Overline. Not widely supported."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["overline"] = "overline"
    on: bool = True

    def describe(self) -> str:
        return "overline" if self.on else "no overline"


class Superscript(BaseModel):
    """Superscript (mintty extension)."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["superscript"] = "superscript"

    def describe(self) -> str:
        return "superscript"


class Subscript(BaseModel):
    """Subscript (mintty extension)."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["subscript"] = "subscript"

    def describe(self) -> str:
        return "subscript"


class Reset(BaseModel):
    """Reset all formatting."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["reset"] = "reset"

    def describe(self) -> str:
        return "reset all"


class Custom(BaseModel):
    """A raw SGR parameter string, emitted verbatim.

    For escapes your terminal supports but this package does not model.
    The text is not validated; escaping it correctly is up to the caller.
    """

    model_config = ConfigDict(frozen=True)

    kind: Literal["custom"] = "custom"
    parameters: str

    def describe(self) -> str:
        return f"custom: {self.parameters!r}"


# Discriminated union for text attributes
Attribute = Annotated[
    Union[
        ForegroundColor,
        BackgroundColor,
        UnderlineColor,
        Bold,
        Faint,
        NormalIntensity,
        Italic,
        Underline,
        Blink,
        ReverseVideo,
        Conceal,
        CrossOut,
        Overline,
        Superscript,
        Subscript,
        Reset,
        Custom,
    ],
    Field(discriminator="kind"),
]

ATTRIBUTE_TYPES: tuple[type[BaseModel], ...] = (
    ForegroundColor,
    BackgroundColor,
    UnderlineColor,
    Bold,
    Faint,
    NormalIntensity,
    Italic,
    Underline,
    Blink,
    ReverseVideo,
    Conceal,
    CrossOut,
    Overline,
    Superscript,
    Subscript,
    Reset,
    Custom,
)


# ---------------------------------------------------------------------------
# Hyperlink Model
# ---------------------------------------------------------------------------


class Hyperlink(BaseModel):
    """A terminal hyperlink (OSC 8). Supported by iTerm, kitty and others.

    Links sharing an ``id`` are treated as the same link for hover effects,
    so a target/id pair is usually kept around and relabeled per use.
    """

    model_config = ConfigDict(frozen=True)

    target: str = Field(description="Already-valid URI; not validated or percent-encoded")
    label: str = Field(default="", description="Text displayed for the link")
    id: str | None = Field(default=None, description="Optional hover-grouping identifier")

    def relabel(self, label: str) -> Hyperlink:
        """Return a copy of this link with a different label."""
        return self.model_copy(update={"label": label})

    @property
    def escape_sequence(self) -> str:
        from termformat.osc.hyperlink import encode_hyperlink

        return encode_hyperlink(self)

    def __str__(self) -> str:
        return self.escape_sequence


# ---------------------------------------------------------------------------
# Inline Image Models
# ---------------------------------------------------------------------------

_DIMENSION_PATTERN = re.compile(r"^\s*(\d+)\s*(px|%)?\s*$")


class Dimension(BaseModel):
    """A width or height for an inline image."""

    model_config = ConfigDict(frozen=True)

    value: int = Field(ge=0)
    unit: DimensionUnit = Field(default=DimensionUnit.CELLS)

    @classmethod
    def cells(cls, value: int) -> Dimension:
        return cls(value=value, unit=DimensionUnit.CELLS)

    @classmethod
    def pixels(cls, value: int) -> Dimension:
        return cls(value=value, unit=DimensionUnit.PIXELS)

    @classmethod
    def percent(cls, value: int) -> Dimension:
        return cls(value=value, unit=DimensionUnit.PERCENT)

    @classmethod
    def parse(cls, text: str) -> Dimension:
        """Parse the protocol text form: ``"3"``, ``"100px"`` or ``"50%"``."""
        match = _DIMENSION_PATTERN.match(text)
        if match is None:
            raise ValueError(f"Invalid image dimension: {text!r}")
        number, suffix = match.groups()
        if suffix == "px":
            return cls.pixels(int(number))
        if suffix == "%":
            return cls.percent(int(number))
        return cls.cells(int(number))

    def __str__(self) -> str:
        if self.unit is DimensionUnit.PIXELS:
            return f"{self.value}px"
        if self.unit is DimensionUnit.PERCENT:
            return f"{self.value}%"
        return str(self.value)


class ImageOptions(BaseModel):
    """Rendering options for an inline image, supplied at encode time.

    Width and height accept a Dimension, a bare integer (cells) or the
    protocol text form (``"100px"``, ``"50%"``).
    """

    model_config = ConfigDict(frozen=True)

    name: str | None = Field(default=None, description="Optional image file name")
    width: Dimension | None = Field(default=None)
    height: Dimension | None = Field(default=None)
    preserve_aspect_ratio: bool = Field(
        default=True, description="Terminal default; only a disabled value is emitted"
    )

    @field_validator("width", "height", mode="before")
    @classmethod
    def _coerce_dimension(cls, value: object) -> object:
        if isinstance(value, bool):
            return value
        if isinstance(value, int):
            return Dimension.cells(value)
        if isinstance(value, str):
            return Dimension.parse(value)
        return value


class TerminalImage(BaseModel):
    """An inline image holding pre-encoded base64 text.

    For protocol details see the Inline Images Protocol documentation at
    https://iterm2.com/documentation-images.html. The payload is opaque:
    it is never decoded or inspected.
    """

    model_config = ConfigDict(frozen=True)

    payload: str = Field(description="Base64-encoded image file contents")

    @classmethod
    def from_bytes(cls, data: bytes) -> TerminalImage:
        """Build an image from raw (already encoded, e.g. PNG) file bytes."""
        return cls(payload=base64.b64encode(data).decode("ascii"))

    def encode(self, options: ImageOptions | None = None) -> str:
        from termformat.osc.image import encode_image

        return encode_image(self, options)

    @property
    def escape_sequence(self) -> str:
        return self.encode()

    def __str__(self) -> str:
        return self.escape_sequence
