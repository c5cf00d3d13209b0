"""Image conversion driver: source -> resolve -> encode -> report."""

from pathlib import Path

from loguru import logger

from ..common.errors import OutputDirectoryError
from ..common.schemas import ConversionOutput, ConversionParams, ResolvedOutput
from ..utils.image_formats import ImageFormat
from .algo.image_convert import image_save
from .algo.image_source import SourceImage, load_clipboard_image, load_image_file
from .resolver import resolve_clipboard_output, resolve_output

CLIPBOARD_STEM = "clipboard"


def load_source(params: ConversionParams) -> SourceImage:
    if params.clipboard:
        logger.info("Reading image from clipboard...")
        return load_clipboard_image()

    assert params.input_path is not None
    logger.info(f"Reading image from: {params.input_path}")
    return load_image_file(params.input_path)


def output_target(params: ConversionParams) -> Path:
    """Output path as requested; an existing directory gets a file named after the source."""
    output_path = params.output_path
    if not output_path.is_dir():
        return output_path

    name = params.input_path.name if params.input_path is not None else CLIPBOARD_STEM
    return output_path / name


def resolve(params: ConversionParams, source: SourceImage) -> ResolvedOutput:
    target = output_target(params)

    if params.clipboard:
        return resolve_clipboard_output(
            target,
            explicit_format=params.format,
            explicit_extension=params.extension,
            detected_format=source.format,
        )
    return resolve_output(target, explicit_format=params.format)


def ensure_parent_dir(path: Path) -> None:
    parent = path.parent
    if parent.exists():
        return
    try:
        parent.mkdir(parents=True, exist_ok=True)
    except OSError as exc:
        raise OutputDirectoryError(parent) from exc
    logger.debug(f"Created directory: {parent}")


def convert_image(params: ConversionParams) -> ConversionOutput:
    """
    Run one conversion.

    Params are already validated (quality range, source selection), so no
    I/O happens before they are known to be usable.

    Returns:
        ConversionOutput describing the written file

    Raises:
        ImageConversionError: On any usage, I/O, codec or resolution failure
    """
    source = load_source(params)

    width, height = source.size
    if source.format is not None:
        logger.success(f"Image loaded: {width}x{height} pixels, format: {source.format.name}")
    else:
        logger.success(f"Image loaded: {width}x{height} pixels")

    resolved = resolve(params, source)
    for notice in resolved.notices:
        logger.info(notice)

    logger.info(f"Converting to format: {resolved.format.name}")
    ensure_parent_dir(resolved.path)

    _ = image_save(
        image=source.image,
        output_path=resolved.path,
        format=resolved.format,
        quality=params.quality,
    )

    if resolved.format is ImageFormat.JPEG:
        logger.success(f"JPEG quality: {params.quality}")

    size_bytes = resolved.path.stat().st_size
    logger.success(f"Output size: {size_bytes // 1024} KB")
    logger.success(f"Successfully converted to: {resolved.path}")

    return ConversionOutput(
        output_path=resolved.path,
        format=resolved.format,
        width=width,
        height=height,
        size_bytes=size_bytes,
        source_format=source.format,
    )
