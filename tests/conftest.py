"""Shared test fixtures for the termformat test suite.

Provides common fixtures used across unit tests: real PNG bytes produced
with Pillow, image files on disk, and sample styles and hyperlinks.
"""

from __future__ import annotations

import io
from pathlib import Path

import pytest
from PIL import Image

from termformat.domain.models import (
    RED,
    Bold,
    ForegroundColor,
    Hyperlink,
    TerminalImage,
)
from termformat.sgr.style import Style


# ---------------------------------------------------------------------------
# Image Fixtures
# ---------------------------------------------------------------------------


@pytest.fixture
def pil_image() -> Image.Image:
    """A small solid-color RGB image."""
    return Image.new("RGB", (8, 6), (21, 95, 218))


@pytest.fixture
def png_bytes(pil_image: Image.Image) -> bytes:
    """PNG file contents for the sample image."""
    buffer = io.BytesIO()
    pil_image.save(buffer, format="PNG")
    return buffer.getvalue()


@pytest.fixture
def png_file(tmp_path: Path, png_bytes: bytes) -> Path:
    """The sample PNG written to disk."""
    path = tmp_path / "sample.png"
    path.write_bytes(png_bytes)
    return path


@pytest.fixture
def sample_image() -> TerminalImage:
    """A TerminalImage with an arbitrary (never decoded) payload."""
    return TerminalImage(payload="iVBORw0KGgo=")


# ---------------------------------------------------------------------------
# Formatting Fixtures
# ---------------------------------------------------------------------------


@pytest.fixture
def bold_red() -> Style:
    """Bold text in the standard red."""
    return Style.of(Bold(), ForegroundColor(color=RED))


@pytest.fixture
def sample_link() -> Hyperlink:
    """A hyperlink without an id."""
    return Hyperlink(target="https://example.com/", label="x")


@pytest.fixture(autouse=True)
def _clean_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep the caller's terminal settings out of the tests."""
    monkeypatch.delenv("COLORTERM", raising=False)
    for name in ("TERMFORMAT_COLORTERM", "TERMFORMAT_LOGGING__LEVEL"):
        monkeypatch.delenv(name, raising=False)
