"""Command-line interface for termformat.

Example programs that exercise the formatting engine: styled text,
hyperlinks, inline images and the named styles from the configuration
file.
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

logger = logging.getLogger(__name__)

UNDERLINE_CHOICES = ["single", "double", "curly", "dotted", "dashed"]


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command-line arguments."""
    parser = argparse.ArgumentParser(
        prog="termformat",
        description="Typed terminal output formatting examples",
    )
    parser.add_argument(
        "-c", "--config",
        type=Path,
        default=None,
        help="Path to YAML configuration file (default: config/termformat.yaml)",
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Enable debug logging",
    )
    parser.add_argument(
        "--color",
        choices=["auto", "always", "never"],
        default="auto",
        help="Emit escape sequences: auto (only to a terminal), always or never",
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    subparsers.add_parser("complex", help="Display a complex example")

    hyperlink_parser = subparsers.add_parser("hyperlink", help="Display hyperlink examples")
    hyperlink_parser.add_argument(
        "--url", type=str, default="https://example.com/",
        help="Link target",
    )
    hyperlink_parser.add_argument(
        "--id", type=str, default=None,
        help="Optional link id for hover grouping",
    )

    image_parser = subparsers.add_parser("image", help="Display an inline image (iTerm2 protocol)")
    image_parser.add_argument(
        "path", type=Path, nargs="?", default=None,
        help="Image file to show (default: a generated sample)",
    )
    image_parser.add_argument("--name", type=str, default=None, help="Image name")
    image_parser.add_argument("--width", type=str, default=None, help="N, Npx or N%%")
    image_parser.add_argument("--height", type=str, default=None, help="N, Npx or N%%")
    image_parser.add_argument(
        "--stretch", action="store_true",
        help="Do not preserve the aspect ratio",
    )

    custom_parser = subparsers.add_parser("custom", help="Print text with the given formatting")
    custom_parser.add_argument("--bold", action="store_true")
    custom_parser.add_argument("--faint", action="store_true")
    custom_parser.add_argument("--italic", action="store_true")
    custom_parser.add_argument("--underline", choices=UNDERLINE_CHOICES, default=None)
    custom_parser.add_argument(
        "-s", "--style", action="append", default=[],
        help="Attribute spec such as fg:red or underline:curly (repeatable)",
    )
    custom_parser.add_argument(
        "-n", "--named", type=str, default=None,
        help="Named style from the configuration file, applied first",
    )
    custom_parser.add_argument("text", nargs="*", help="Text to print")

    subparsers.add_parser("styles", help="List the named styles from the configuration file")

    title_parser = subparsers.add_parser("title", help="Set the terminal window title")
    title_parser.add_argument("title", type=str)

    return parser.parse_args(argv)


def _color_enabled(mode: str) -> bool:
    from termformat.utils.terminal import is_tty

    if mode == "always":
        return True
    if mode == "never":
        return False
    return is_tty(sys.stdout)


def _complex(enabled: bool) -> None:
    """Print spans that set, layer and reset formatting in one line."""
    from termformat.domain.models import (
        BLUE,
        GREEN,
        RED,
        BackgroundColor,
        Bold,
        Faint,
        ForegroundColor,
        Italic,
        Reset,
    )
    from termformat.formatting import format_text, splice
    from termformat.sgr.style import RESET, Style

    comment = Style.of(Faint(), Italic())
    print(format_text(
        "// Should print \"one\" in the default colors, \"two\" in green,\n"
        "// \"three\" in bold green with a red background,\n"
        "// \"four\" in italics with the default foreground color and a blue background,\n"
        "// and finally \"five\" in the default colors.",
        comment if enabled else None,
    ))

    green = Style.of(ForegroundColor(color=GREEN))
    red_background = Style.of(BackgroundColor(color=RED), Bold())
    blue_background_only = Style.of(Reset(), BackgroundColor(color=BLUE), Italic())

    if not enabled:
        print("one two three four five")
        return
    print(splice(
        "one ", green, "two ", red_background, "three ",
        blue_background_only, "four", RESET, " five",
    ))


def _hyperlink(args: argparse.Namespace, enabled: bool) -> None:
    from termformat.domain.models import Faint, Hyperlink, Italic
    from termformat.formatting import format_text, link, splice

    print(format_text(f"All links should point to {args.url}", [Faint(), Italic()] if enabled else None))

    if not enabled:
        print(f"all-in-one: {args.url}")
        return

    site = Hyperlink(target=args.url, label="Example", id=args.id)
    print(splice("all-in-one: ", site))
    print(splice("wrapping: ", link("hello", site), " after"))
    print(splice("raw url: ", link("hello", args.url, id=args.id), " after"))


def _image(settings, args: argparse.Namespace) -> None:
    from pydantic import ValidationError

    from termformat.formatting import inline_image
    from termformat.utils.imaging import ImageSourceError, load_image_file, pil_to_terminal_image

    if args.path is not None:
        try:
            image = load_image_file(args.path, verify=True)
        except ImageSourceError as exc:
            logger.error("%s", exc)
            print(f"error: {exc}", file=sys.stderr)
            raise SystemExit(1) from exc
    else:
        from PIL import Image

        image = pil_to_terminal_image(Image.new("RGB", (64, 48), (21, 95, 218)))

    try:
        options = settings.image.to_options(
            name=args.name,
            width=args.width,
            height=args.height,
            preserve_aspect_ratio=False if args.stretch else None,
        )
    except ValidationError as exc:
        print(f"error: invalid image options: {exc}", file=sys.stderr)
        raise SystemExit(2) from exc
    print("Image example:")
    print(inline_image(image, options))
    print("")
    print(f"inline: {inline_image(image, height=1)}")


def _custom(settings, args: argparse.Namespace, enabled: bool) -> None:
    from termformat.domain.models import Bold, Faint, Italic, Underline, UnderlineStyle
    from termformat.formatting import format_text
    from termformat.sgr.parsing import StyleParseError, parse_named_styles, parse_style
    from termformat.sgr.style import Style

    style = Style()
    try:
        if args.named:
            named = parse_named_styles(settings.styles)
            if args.named not in named:
                raise StyleParseError(f"No style named {args.named!r} in configuration", spec=args.named)
            style = named[args.named]
        flags = []
        if args.bold:
            flags.append(Bold())
        if args.faint:
            flags.append(Faint())
        if args.italic:
            flags.append(Italic())
        if args.underline:
            flags.append(Underline(style=UnderlineStyle(args.underline)))
        style = style.extend(flags) + parse_style(args.style)
    except StyleParseError as exc:
        print(f"error: {exc}", file=sys.stderr)
        raise SystemExit(2) from exc

    logger.debug("Using %s", style.describe())
    print(format_text(" ".join(args.text), style if enabled else None))


def _styles(settings, enabled: bool) -> None:
    from termformat.formatting import format_text
    from termformat.sgr.parsing import StyleParseError, parse_named_styles

    try:
        named = parse_named_styles(settings.styles)
    except StyleParseError as exc:
        print(f"error: {exc}", file=sys.stderr)
        raise SystemExit(2) from exc
    if not named:
        print("No named styles configured.")
        return
    width = max(len(name) for name in named)
    for name, style in named.items():
        sample = format_text(name.ljust(width), style if enabled else None)
        print(f"{sample}  {style.describe()}")


def main(argv: list[str] | None = None) -> None:
    """Main entry point for the termformat CLI."""
    args = parse_args(argv)

    if args.command is None:
        parse_args(["--help"])
        return

    from termformat.config.settings import load_settings
    from termformat.utils.logging import setup_logging

    settings = load_settings(args.config)

    if args.verbose:
        settings.logging.level = "DEBUG"

    setup_logging(settings.logging)

    enabled = _color_enabled(args.color)
    logger.debug("Escape sequences %s (true color: %s)", "on" if enabled else "off", settings.true_color)

    if args.command == "complex":
        _complex(enabled)

    elif args.command == "hyperlink":
        _hyperlink(args, enabled)

    elif args.command == "image":
        _image(settings, args)

    elif args.command == "custom":
        _custom(settings, args, enabled)

    elif args.command == "styles":
        _styles(settings, enabled)

    elif args.command == "title":
        from termformat.utils.terminal import set_window_title

        set_window_title(args.title)


if __name__ == "__main__":
    main()
