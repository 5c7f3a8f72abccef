"""Tests for iTerm2 inline image encoding."""

from __future__ import annotations

from termformat.domain.models import Dimension, ImageOptions, TerminalImage
from termformat.osc.image import encode_image, image_arguments


class TestImageArguments:
    def test_inline_is_always_first(self) -> None:
        assert image_arguments() == [("inline", "1")]
        assert image_arguments(ImageOptions(name="a.png"))[0] == ("inline", "1")

    def test_fixed_key_order(self) -> None:
        options = ImageOptions(
            preserve_aspect_ratio=False,
            height=Dimension.percent(50),
            width=2,
            name="cat.png",
        )
        assert [key for key, _ in image_arguments(options)] == [
            "inline", "name", "width", "height", "preserveAspectRatio",
        ]

    def test_preserve_aspect_ratio_only_when_disabled(self) -> None:
        assert ("preserveAspectRatio", "0") in image_arguments(ImageOptions(preserve_aspect_ratio=False))
        keys = [key for key, _ in image_arguments(ImageOptions(preserve_aspect_ratio=True))]
        assert "preserveAspectRatio" not in keys


class TestEncodeImage:
    def test_minimal(self, sample_image: TerminalImage) -> None:
        assert encode_image(sample_image) == "\x1b]1337;File=inline=1:iVBORw0KGgo=\x07"

    def test_width_in_pixels(self, sample_image: TerminalImage) -> None:
        encoded = encode_image(sample_image, ImageOptions(width=Dimension.pixels(100)))
        assert encoded == "\x1b]1337;File=inline=1;width=100px:iVBORw0KGgo=\x07"
        assert "preserveAspectRatio" not in encoded

    def test_all_options(self, sample_image: TerminalImage) -> None:
        options = ImageOptions(
            name="logo.png",
            width=Dimension.cells(10),
            height=Dimension.percent(20),
            preserve_aspect_ratio=False,
        )
        assert encode_image(sample_image, options) == (
            "\x1b]1337;File=inline=1;name=logo.png;width=10;height=20%;"
            "preserveAspectRatio=0:iVBORw0KGgo=\x07"
        )

    def test_payload_is_opaque(self) -> None:
        image = TerminalImage(payload="%%% not base64 %%%")
        assert encode_image(image).endswith(":%%% not base64 %%%\x07")

    def test_method_and_str(self, sample_image: TerminalImage) -> None:
        assert sample_image.encode() == encode_image(sample_image)
        assert str(sample_image) == encode_image(sample_image)
        options = ImageOptions(height=1)
        assert sample_image.encode(options) == encode_image(sample_image, options)
