"""imgconv - Convert images between raster formats, from files or the clipboard."""

__version__ = "0.1.0"

from .common.errors import (
    ClipboardError,
    CodecError,
    FormatUndeterminableError,
    ImageConversionError,
    InputNotFoundError,
    OutputDirectoryError,
    OutputWriteError,
    UnknownExtensionError,
    UsageError,
)
from .common.schemas import ConversionOutput, ConversionParams, ResolvedOutput
from .conversion.resolver import resolve_clipboard_output, resolve_output
from .conversion.task import convert_image
from .utils.image_formats import (
    ImageFormat,
    canonical_extension,
    extension_to_format,
    format_to_extension,
)

__all__ = [
    "ImageFormat",
    "ConversionParams",
    "ConversionOutput",
    "ResolvedOutput",
    "ImageConversionError",
    "UsageError",
    "UnknownExtensionError",
    "InputNotFoundError",
    "OutputDirectoryError",
    "OutputWriteError",
    "ClipboardError",
    "CodecError",
    "FormatUndeterminableError",
    "__version__",
    "canonical_extension",
    "convert_image",
    "extension_to_format",
    "format_to_extension",
    "resolve_clipboard_output",
    "resolve_output",
]
