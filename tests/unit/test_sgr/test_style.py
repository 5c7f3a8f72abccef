"""Tests for the Style aggregate and its serialization."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from termformat.domain.models import (
    GREEN,
    RED,
    BackgroundColor,
    Bold,
    Custom,
    Faint,
    ForegroundColor,
    Italic,
    NormalIntensity,
    Reset,
    UnderlineStyle,
    Underline,
)
from termformat.sgr.style import (
    BLINK,
    BOLD,
    CURLY_UNDERLINE,
    DOUBLE_UNDERLINE,
    EMPTY,
    FAINT,
    ITALIC,
    RAPID_BLINK,
    RESET,
    UNDERLINE,
    Style,
    background,
    foreground,
    render_style,
    underline_color,
)


class TestDeduplication:
    def test_duplicates_keep_first_occurrence(self) -> None:
        red = ForegroundColor(color=RED)
        assert Style.of(Bold(), red, Bold()) == Style.of(Bold(), red)
        assert Style.of(Bold(), red, Bold()).escape_sequence == "\x1b[1;31m"

    def test_order_of_first_occurrence(self) -> None:
        style = Style.of(Italic(), Bold(), Italic(), Faint(), Bold())
        assert style.attributes == (Italic(), Bold(), Faint())

    def test_distinct_values_of_same_kind_are_kept(self) -> None:
        style = Style.of(Italic(), Italic(on=False))
        assert len(style) == 2

    def test_concatenation_deduplicates(self, bold_red: Style) -> None:
        combined = bold_red + Style.of(Bold(), Italic())
        assert combined.attributes == (Bold(), ForegroundColor(color=RED), Italic())

    def test_add_attribute(self) -> None:
        assert (Style.of(Bold()) + Italic()).attributes == (Bold(), Italic())
        assert (Italic() + Style.of(Bold())).attributes == (Italic(), Bold())

    def test_add_rejects_other_types(self) -> None:
        with pytest.raises(TypeError):
            Style.of(Bold()) + "x"  # type: ignore[operator]

    def test_extend(self) -> None:
        style = EMPTY.extend([Bold(), Bold(), Faint()])
        assert style.attributes == (Bold(), Faint())

    def test_built_from_list(self) -> None:
        assert Style(attributes=[Bold(), Bold()]) == Style.of(Bold())

    def test_built_from_dicts(self) -> None:
        style = Style.model_validate({"attributes": [{"kind": "bold"}, {"kind": "italic", "on": False}]})
        assert style.attributes == (Bold(), Italic(on=False))


class TestValueSemantics:
    def test_frozen(self, bold_red: Style) -> None:
        with pytest.raises(ValidationError):
            bold_red.attributes = ()  # type: ignore[misc]

    def test_hashable(self, bold_red: Style) -> None:
        assert hash(bold_red) == hash(Style.of(Bold(), ForegroundColor(color=RED)))

    def test_contains(self, bold_red: Style) -> None:
        assert Bold() in bold_red
        assert Italic() not in bold_red

    def test_empty_is_falsy(self) -> None:
        assert not EMPTY
        assert EMPTY.is_empty
        assert Style.of(Bold())


class TestRendering:
    def test_empty_renders_nothing(self) -> None:
        assert render_style(Style()) == ""
        assert str(EMPTY) == ""

    def test_envelope(self, bold_red: Style) -> None:
        rendered = bold_red.escape_sequence
        assert rendered.startswith("\x1b[")
        assert rendered.endswith("m")
        assert rendered == "\x1b[1;31m"

    def test_no_reordering(self) -> None:
        style = Style.of(BackgroundColor(color=GREEN), Reset(), Bold(), NormalIntensity())
        assert style.escape_sequence == "\x1b[42;0;1;22m"

    def test_reset_style(self) -> None:
        assert RESET.escape_sequence == "\x1b[0m"

    def test_custom_passes_through(self) -> None:
        assert Style.of(Custom(parameters="38;5;214"), Bold()).escape_sequence == "\x1b[38;5;214;1m"

    def test_str_matches_escape_sequence(self, bold_red: Style) -> None:
        assert f"{bold_red}" == bold_red.escape_sequence

    def test_rendering_is_idempotent(self, bold_red: Style) -> None:
        assert render_style(bold_red) == render_style(bold_red)

    @pytest.mark.parametrize(
        "style, expected",
        [
            (BOLD, "\x1b[1m"),
            (FAINT, "\x1b[2m"),
            (ITALIC, "\x1b[3m"),
            (UNDERLINE, "\x1b[4m"),
            (DOUBLE_UNDERLINE, "\x1b[4:2m"),
            (CURLY_UNDERLINE, "\x1b[4:3m"),
            (BLINK, "\x1b[5m"),
            (RAPID_BLINK, "\x1b[6m"),
        ],
    )
    def test_convenience_styles(self, style: Style, expected: str) -> None:
        assert style.escape_sequence == expected

    def test_convenience_colors(self) -> None:
        assert CURLY_UNDERLINE.attributes == (Underline(style=UnderlineStyle.CURLY),)
        assert foreground(RED).escape_sequence == "\x1b[31m"
        assert background(RED).escape_sequence == "\x1b[41m"
        assert underline_color(RED).escape_sequence == "\x1b[58;5;1m"

    def test_convenience_styles_combine(self) -> None:
        assert (BOLD + ITALIC + foreground(GREEN)).escape_sequence == "\x1b[1;3;32m"

    def test_describe(self, bold_red: Style) -> None:
        assert bold_red.describe() == "Style: [bold, foreground: red]"
