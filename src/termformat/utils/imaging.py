"""Image loading utilities for termformat.

Turns image files and PIL images into TerminalImage values. This is the
only place image data is read or decoded; the inline-image encoder only
ever sees the resulting base64 text.
"""

from __future__ import annotations

import io
import logging
from pathlib import Path

from PIL import Image, UnidentifiedImageError

from termformat.domain.models import TerminalImage

logger = logging.getLogger(__name__)


class ImageSourceError(Exception):
    """Raised when an image source cannot be read."""

    def __init__(self, message: str, path: str = "") -> None:
        super().__init__(message)
        self.path = path


def load_image_file(path: Path | str, verify: bool = False) -> TerminalImage:
    """Read an image file into a TerminalImage.

    The file bytes are used as-is, so any format the terminal understands
    (PNG, JPEG, GIF, PDF...) can be shown.

    Args:
        path: The image file to read.
        verify: Check with Pillow that the file is a readable image before
                accepting it.

    Raises:
        ImageSourceError: If the file cannot be read or fails verification.
    """
    path = Path(path)
    try:
        data = path.read_bytes()
    except OSError as exc:
        raise ImageSourceError(f"Cannot read image {path}: {exc}", path=str(path)) from exc

    if verify:
        try:
            with Image.open(io.BytesIO(data)) as image:
                image.verify()
        except (UnidentifiedImageError, OSError, SyntaxError) as exc:
            raise ImageSourceError(f"Not a valid image: {path}", path=str(path)) from exc

    logger.debug("Loaded %d bytes of image data from %s", len(data), path)
    return TerminalImage.from_bytes(data)


def pil_to_terminal_image(image: Image.Image, format: str = "PNG") -> TerminalImage:
    """Encode a PIL Image (PNG by default) into a TerminalImage."""
    buffer = io.BytesIO()
    try:
        image.save(buffer, format=format)
    except (OSError, ValueError, KeyError) as exc:
        raise ImageSourceError(f"Failed to encode image as {format}: {exc}") from exc
    return TerminalImage.from_bytes(buffer.getvalue())
