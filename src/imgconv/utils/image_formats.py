"""Supported image formats and the extension table behind every lookup."""

from enum import StrEnum
from pathlib import Path
from typing import NamedTuple


class ImageFormat(StrEnum):
    PNG = "png"
    JPEG = "jpeg"
    GIF = "gif"
    BMP = "bmp"
    ICO = "ico"
    TIFF = "tiff"
    WEBP = "webp"
    AVIF = "avif"
    PNM = "pnm"
    TGA = "tga"
    DDS = "dds"
    HDR = "hdr"
    FARBFELD = "farbfeld"

    @classmethod
    def parse(cls, text: str) -> "ImageFormat":
        """Parse a format name or any of its extension aliases.

        Raises:
            ValueError: If the text names no supported format
        """
        value = text.strip().lower()
        try:
            return cls(value)
        except ValueError:
            pass

        fmt = extension_to_format(value)
        if fmt is None:
            raise ValueError(f"Unsupported image format: {text!r}")
        return fmt

    @classmethod
    def from_pil(cls, pil_format: str | None) -> "ImageFormat | None":
        """Map a format name reported by Pillow to an ImageFormat."""
        if not pil_format:
            return None
        return _PIL_TO_FORMAT.get(pil_format.upper())

    @property
    def extension(self) -> str:
        return FORMAT_TABLE[self].extension

    @property
    def pil_format(self) -> str | None:
        return FORMAT_TABLE[self].pil_format


class FormatSpec(NamedTuple):
    extension: str
    aliases: tuple[str, ...]
    pil_format: str | None


# Single source of truth: extension -> format and format -> extension
# are both derived from this table.
FORMAT_TABLE: dict[ImageFormat, FormatSpec] = {
    ImageFormat.PNG: FormatSpec("png", ("png",), "PNG"),
    ImageFormat.JPEG: FormatSpec("jpg", ("jpg", "jpeg", "jpe", "jfif"), "JPEG"),
    ImageFormat.GIF: FormatSpec("gif", ("gif",), "GIF"),
    ImageFormat.BMP: FormatSpec("bmp", ("bmp", "dib"), "BMP"),
    ImageFormat.ICO: FormatSpec("ico", ("ico",), "ICO"),
    ImageFormat.TIFF: FormatSpec("tiff", ("tiff", "tif"), "TIFF"),
    ImageFormat.WEBP: FormatSpec("webp", ("webp",), "WEBP"),
    ImageFormat.AVIF: FormatSpec("avif", ("avif",), "AVIF"),
    ImageFormat.PNM: FormatSpec("pnm", ("pnm", "pbm", "pgm", "ppm"), "PPM"),
    ImageFormat.TGA: FormatSpec("tga", ("tga",), "TGA"),
    ImageFormat.DDS: FormatSpec("dds", ("dds",), "DDS"),
    ImageFormat.HDR: FormatSpec("hdr", ("hdr",), None),
    ImageFormat.FARBFELD: FormatSpec("ff", ("ff", "farbfeld"), None),
}

_EXTENSION_TO_FORMAT: dict[str, ImageFormat] = {
    alias: fmt for fmt, entry in FORMAT_TABLE.items() for alias in entry.aliases
}

_PIL_TO_FORMAT: dict[str, ImageFormat] = {
    entry.pil_format: fmt for fmt, entry in FORMAT_TABLE.items() if entry.pil_format
}
# Multi-picture JPEGs (most phone cameras) sniff as MPO
_PIL_TO_FORMAT["MPO"] = ImageFormat.JPEG


def _normalize(ext: str) -> str:
    return ext.strip().lstrip(".").lower()


def format_to_extension(fmt: ImageFormat) -> str:
    """Return the canonical file extension (without dot) for a format."""
    return FORMAT_TABLE[fmt].extension


def extension_to_format(ext: str) -> ImageFormat | None:
    """Look up a format by extension or alias. Case-insensitive, dot optional."""
    return _EXTENSION_TO_FORMAT.get(_normalize(ext))


def canonical_extension(ext: str) -> str:
    """Normalize an extension so aliases of one format compare equal.

    "JPEG", ".jpg" and "jpe" all become "jpg". Unknown extensions are
    only lower-cased and stripped of their leading dot.
    """
    normalized = _normalize(ext)
    fmt = _EXTENSION_TO_FORMAT.get(normalized)
    return FORMAT_TABLE[fmt].extension if fmt is not None else normalized


def path_extension(path: str | Path) -> str | None:
    """Return the path's extension without its dot, or None if it has none."""
    suffix = Path(path).suffix
    return suffix[1:] if len(suffix) > 1 else None


def detect_format_from_path(path: str | Path) -> ImageFormat | None:
    ext = path_extension(path)
    return extension_to_format(ext) if ext is not None else None


def extension_matches(ext: str | None, fmt: ImageFormat) -> bool:
    """True if ext is the canonical extension or an alias of fmt."""
    if ext is None:
        return False
    return canonical_extension(ext) == format_to_extension(fmt)


def supported_format_names() -> list[str]:
    """All names accepted by ImageFormat.parse, for CLI help."""
    names = {fmt.value for fmt in ImageFormat} | set(_EXTENSION_TO_FORMAT)
    return sorted(names)
