"""Pure image encoding logic (single file)."""

from pathlib import Path

from loguru import logger
from PIL import Image

from ...common.errors import CodecError, OutputWriteError
from ...utils.image_formats import ImageFormat
from ...utils.profiling import timed

# Modes each encoder writes directly; anything else is converted first
WRITABLE_MODES: dict[ImageFormat, frozenset[str]] = {
    ImageFormat.PNG: frozenset({"1", "L", "LA", "I", "I;16", "P", "RGB", "RGBA"}),
    ImageFormat.JPEG: frozenset({"L", "RGB", "CMYK"}),
    ImageFormat.GIF: frozenset({"1", "L", "P", "RGB", "RGBA"}),
    ImageFormat.BMP: frozenset({"1", "L", "P", "RGB", "RGBA"}),
    ImageFormat.ICO: frozenset({"L", "LA", "P", "RGB", "RGBA"}),
    ImageFormat.TIFF: frozenset(
        {"1", "L", "LA", "I", "I;16", "F", "P", "RGB", "RGBA", "CMYK", "YCbCr", "LAB"}
    ),
    ImageFormat.WEBP: frozenset({"RGB", "RGBA"}),
    ImageFormat.AVIF: frozenset({"RGB", "RGBA"}),
    ImageFormat.PNM: frozenset({"1", "L", "RGB"}),
    ImageFormat.TGA: frozenset({"L", "LA", "P", "RGB", "RGBA"}),
    ImageFormat.DDS: frozenset({"RGB", "RGBA"}),
}

# Targets without an alpha channel; converted images go to RGB
OPAQUE_FORMATS = frozenset({ImageFormat.JPEG, ImageFormat.PNM})


def writable_image(image: Image.Image, fmt: ImageFormat) -> Image.Image:
    """Return image in a mode the fmt encoder accepts.

    Images already in a writable mode are returned unchanged. Others become
    RGBA when both the source and the target carry alpha, RGB otherwise.

    Raises:
        CodecError: If Pillow cannot convert the mode
    """
    if image.mode in WRITABLE_MODES.get(fmt, frozenset()):
        return image

    has_alpha = "A" in image.getbands() or "transparency" in image.info
    target_mode = "RGBA" if has_alpha and fmt not in OPAQUE_FORMATS else "RGB"

    logger.debug(f"Converting {image.mode} to {target_mode} for {fmt} output")
    try:
        return image.convert(target_mode)
    except ValueError as exc:
        raise CodecError(f"Cannot convert {image.mode} image for {fmt} output: {exc}") from exc


def encoder_available(fmt: ImageFormat) -> bool:
    """True if the installed Pillow can write fmt."""
    pil_format = fmt.pil_format
    if pil_format is None:
        return False
    Image.init()
    return pil_format in Image.SAVE


def get_pil_format(fmt: ImageFormat) -> str:
    """Convert an ImageFormat to the Pillow format name used for saving.

    Raises:
        CodecError: If Pillow has no encoder for the format
    """
    if not encoder_available(fmt):
        raise CodecError(f"No encoder available for {fmt} output in this Pillow build")
    return fmt.pil_format  # type: ignore[return-value]


@timed
def image_save(
    *,
    image: Image.Image,
    output_path: str | Path,
    format: ImageFormat,
    quality: int,
) -> str:
    """
    Encode an image and write it to disk.

    JPEG is written with the given quality. Every other format uses the
    encoder's default settings and ignores quality. Pixel modes the target
    cannot store are converted first (see writable_image).

    Args:
        image: Decoded source image
        output_path: Path to output image (parent directory must exist)
        format: Target image format
        quality: JPEG quality (1-100)

    Returns:
        Output file path as string

    Raises:
        CodecError: If no encoder exists or Pillow fails to encode
        OutputWriteError: If the output file cannot be created
    """
    output_path = Path(output_path)
    pil_format = get_pil_format(format)
    image = writable_image(image, format)

    save_kwargs: dict[str, object] = {}

    if format is ImageFormat.JPEG:
        save_kwargs["quality"] = quality
    else:
        logger.debug(f"Quality {quality} ignored for {format} output")

    try:
        fp = open(output_path, "wb")
    except OSError as exc:
        raise OutputWriteError(output_path, exc) from exc

    try:
        with fp:
            image.save(fp, format=pil_format, **save_kwargs)
    except (OSError, ValueError, TypeError, KeyError) as exc:
        output_path.unlink(missing_ok=True)
        raise CodecError(f"Failed to encode {format} image: {exc}") from exc

    return str(output_path)
