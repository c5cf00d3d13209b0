"""Output path and format resolution.

Maps the explicit format flag, the explicit extension flag, the output
path's extension and the detected source format onto exactly one output
path and output format. Pure: no filesystem access, no logging. Every path
correction is reported through ``ResolvedOutput.notices``.
"""

from pathlib import Path

from ..common.errors import FormatUndeterminableError, UnknownExtensionError
from ..common.schemas import ResolvedOutput
from ..utils.image_formats import (
    ImageFormat,
    canonical_extension,
    extension_matches,
    extension_to_format,
    format_to_extension,
    path_extension,
)


def _set_extension(path: Path, ext: str) -> Path:
    return path.with_suffix(f".{ext}")


def _correction_notice(current: str | None, new: str, reason: str) -> str:
    if current is None:
        return f"Auto-adding extension: .{new}"
    return f"Correcting extension from .{current} to .{new} ({reason})"


def _apply_format(output_path: Path, fmt: ImageFormat) -> ResolvedOutput:
    """Keep the path if its extension already names fmt, else set the canonical one."""
    current = path_extension(output_path)
    if extension_matches(current, fmt):
        return ResolvedOutput(path=output_path, format=fmt)

    ext = format_to_extension(fmt)
    return ResolvedOutput(
        path=_set_extension(output_path, ext),
        format=fmt,
        notices=[_correction_notice(current, ext, f"--format {fmt}")],
    )


def resolve_output(
    output_path: str | Path,
    *,
    explicit_format: ImageFormat | None = None,
) -> ResolvedOutput:
    """Resolve the output of a file-to-file conversion.

    Args:
        output_path: Requested output path, with or without extension
        explicit_format: Format given with --format, wins when present

    Returns:
        ResolvedOutput with the final path and format

    Raises:
        FormatUndeterminableError: No format flag and no recognized extension
    """
    output_path = Path(output_path)

    if explicit_format is not None:
        return _apply_format(output_path, explicit_format)

    ext = path_extension(output_path)
    fmt = extension_to_format(ext) if ext is not None else None
    if fmt is None:
        raise FormatUndeterminableError(output_path)

    return ResolvedOutput(path=output_path, format=fmt)


def resolve_clipboard_output(
    output_path: str | Path,
    *,
    explicit_format: ImageFormat | None = None,
    explicit_extension: str | None = None,
    detected_format: ImageFormat | None = None,
) -> ResolvedOutput:
    """Resolve the output of a clipboard paste.

    Priority, first match wins:

    1. ``explicit_extension`` (--extension): converts to that format and
       rewrites the path extension if it differs.
    2. ``explicit_format`` (--format): same rule as file mode.
    3. The output path's own extension, unless it disagrees with the
       captured format, in which case the captured format wins.
    4. The captured format (PNG if unknown), appended as extension.

    Raises:
        UnknownExtensionError: explicit_extension maps to no format
    """
    output_path = Path(output_path)
    current = path_extension(output_path)

    if explicit_extension is not None:
        requested = explicit_extension.strip().lstrip(".")
        target = extension_to_format(requested)
        if target is None:
            raise UnknownExtensionError(explicit_extension)

        if current is not None and canonical_extension(current) == canonical_extension(
            requested
        ):
            return ResolvedOutput(path=output_path, format=target)

        return ResolvedOutput(
            path=_set_extension(output_path, requested),
            format=target,
            notices=[_correction_notice(current, requested, "conversion mode")],
        )

    if explicit_format is not None:
        return _apply_format(output_path, explicit_format)

    if current is not None:
        if detected_format is not None and not extension_matches(current, detected_format):
            detected_ext = format_to_extension(detected_format)
            return ResolvedOutput(
                path=_set_extension(output_path, detected_ext),
                format=detected_format,
                notices=[
                    f"Output extension .{current} doesn't match clipboard format "
                    + f".{detected_ext}, correcting..."
                ],
            )

        fmt = extension_to_format(current)
        if fmt is not None:
            return ResolvedOutput(path=output_path, format=fmt)

    fallback = detected_format or ImageFormat.PNG
    ext = format_to_extension(fallback)
    return ResolvedOutput(
        path=_set_extension(output_path, ext),
        format=fallback,
        notices=[_correction_notice(current, ext, "unrecognized extension")],
    )
