"""Obtain the source bitmap from a file or from the clipboard."""

from dataclasses import dataclass
from pathlib import Path

from loguru import logger
from PIL import Image, ImageGrab, UnidentifiedImageError

from ...common.errors import ClipboardError, CodecError, InputNotFoundError
from ...utils.image_formats import ImageFormat
from ...utils.profiling import timed

# Clipboard bitmaps carry no container format; treat them as PNG
CLIPBOARD_FORMAT = ImageFormat.PNG


@dataclass
class SourceImage:
    image: Image.Image
    format: ImageFormat | None
    description: str

    @property
    def size(self) -> tuple[int, int]:
        return self.image.size


@timed
def load_image_file(input_path: str | Path) -> SourceImage:
    """
    Decode an image file, sniffing its format from content.

    Args:
        input_path: Path to input image

    Returns:
        SourceImage holding a fully loaded copy of the pixels

    Raises:
        InputNotFoundError: If the input file does not exist
        CodecError: If the format cannot be detected or decoding fails
    """
    input_path = Path(input_path)

    if not input_path.is_file():
        raise InputNotFoundError(input_path)

    try:
        with Image.open(input_path) as img:
            pil_format = img.format
            image = img.copy()
    except UnidentifiedImageError as exc:
        raise CodecError(f"Failed to detect image format from: {input_path}") from exc
    except Image.DecompressionBombError as exc:
        raise CodecError(f"Image too large to decode safely: {input_path}: {exc}") from exc
    except OSError as exc:
        raise CodecError(f"Failed to decode image: {input_path}: {exc}") from exc

    detected = ImageFormat.from_pil(pil_format)
    if detected is None:
        logger.debug(f"Pillow format {pil_format} has no output counterpart")

    return SourceImage(image=image, format=detected, description=str(input_path))


def load_clipboard_image() -> SourceImage:
    """
    Grab a bitmap from the system clipboard.

    Returns:
        SourceImage with the clipboard format (PNG)

    Raises:
        ClipboardError: If the clipboard is unreachable or holds no image
    """
    try:
        grabbed = ImageGrab.grabclipboard()
    except (NotImplementedError, OSError) as exc:
        raise ClipboardError(f"Failed to access clipboard: {exc}") from exc

    if not isinstance(grabbed, Image.Image):
        raise ClipboardError("No image found in clipboard. Please copy an image first.")

    grabbed.load()
    return SourceImage(image=grabbed, format=CLIPBOARD_FORMAT, description="clipboard")
