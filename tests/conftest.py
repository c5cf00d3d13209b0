"""Test configuration and fixtures for imgconv.

This module provides:
- Function-scoped fixtures that generate sample images with Pillow
- A simulated clipboard (monkeypatched PIL.ImageGrab.grabclipboard)
- Capture of loguru output
"""

from collections.abc import Callable, Iterator
from pathlib import Path

import pytest
from loguru import logger
from PIL import Image, ImageGrab

# ============================================================================
# Sample images
# ============================================================================


@pytest.fixture
def sample_png(tmp_path: Path) -> Path:
    """64x48 RGB PNG with a gradient, so encoders have real content to work on."""
    path = tmp_path / "sample.png"
    img = Image.new("RGB", (64, 48))
    img.putdata([(x * 4, y * 5, (x + y) % 256) for y in range(48) for x in range(64)])
    img.save(path, "PNG")
    return path


@pytest.fixture
def sample_rgba_png(tmp_path: Path) -> Path:
    path = tmp_path / "sample_rgba.png"
    Image.new("RGBA", (32, 32), color=(255, 0, 0, 128)).save(path, "PNG")
    return path


@pytest.fixture
def sample_jpeg(tmp_path: Path) -> Path:
    path = tmp_path / "sample.jpg"
    Image.new("RGB", (40, 30), color=(10, 120, 200)).save(path, "JPEG", quality=90)
    return path


@pytest.fixture
def not_an_image(tmp_path: Path) -> Path:
    path = tmp_path / "notes.png"
    _ = path.write_text("this is not an image")
    return path


# ============================================================================
# Clipboard
# ============================================================================


@pytest.fixture
def clipboard(monkeypatch: pytest.MonkeyPatch) -> Callable[[object], list[int]]:
    """Install a fake clipboard.

    Returns a setter: call it with the object grabclipboard() should return
    (an Image, a list of file names, None, or an exception instance to raise).
    The returned list counts how often the clipboard was read.
    """
    calls: list[int] = []

    def set_content(content: object) -> list[int]:
        def fake_grabclipboard() -> object:
            calls.append(1)
            if isinstance(content, BaseException):
                raise content
            return content

        monkeypatch.setattr(ImageGrab, "grabclipboard", fake_grabclipboard)
        return calls

    return set_content


@pytest.fixture
def clipboard_image() -> Image.Image:
    return Image.new("RGBA", (20, 10), color=(0, 255, 0, 255))


# ============================================================================
# Logging
# ============================================================================


@pytest.fixture
def log_messages() -> Iterator[list[str]]:
    """Collect loguru messages as "LEVEL: message" strings."""
    messages: list[str] = []

    def sink(message) -> None:  # pyright: ignore[reportMissingParameterType]
        record = message.record
        messages.append(f"{record['level'].name}: {record['message']}")

    handler_id = logger.add(sink, level="DEBUG", format="{message}")
    yield messages
    logger.remove(handler_id)
