"""Command line entry point for imgconv."""

import argparse
import sys
from collections.abc import Sequence

from loguru import logger
from pydantic import ValidationError

from . import __version__
from .common.errors import ImageConversionError, UsageError
from .common.schemas import DEFAULT_QUALITY, ConversionParams
from .conversion.task import convert_image
from .utils.image_formats import ImageFormat, supported_format_names
from .utils.logging_setup import setup_logging

DESCRIPTION = """\
imgconv - Image Format Converter

A command-line tool for converting images between different formats.
Supports PNG, JPEG, GIF, BMP, ICO, TIFF, WebP, AVIF, and more.
"""

EPILOG = """\
examples:
  # Simple conversion (format auto-detected from extension)
  imgconv input.webp output.png

  # With explicit input/output flags
  imgconv -i image.jpg -o image.webp

  # Specify quality for JPEG output
  imgconv input.png output.jpg -q 85

  # Force output format
  imgconv input.jpg output -f png

  # Paste from clipboard
  imgconv -c output_image

  # Paste and convert to specific format
  imgconv -c output_image -e jpg
  imgconv -c output_image.png -e jpg
"""


def _format_arg(value: str) -> ImageFormat:
    try:
        return ImageFormat.parse(value)
    except ValueError as exc:
        choices = ", ".join(supported_format_names())
        raise argparse.ArgumentTypeError(f"{exc}. Choose from: {choices}") from exc


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="imgconv",
        description=DESCRIPTION,
        epilog=EPILOG,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("pos_input", nargs="?", metavar="INPUT", help="Input image file")
    parser.add_argument(
        "pos_output", nargs="?", metavar="OUTPUT", help="Output image file or directory"
    )
    parser.add_argument("-i", "--input", metavar="FILE", help="Input image file")
    parser.add_argument("-o", "--output", metavar="FILE", help="Output image file or directory")
    parser.add_argument(
        "-c", "--clipboard", action="store_true", help="Paste image from clipboard"
    )
    parser.add_argument(
        "-f",
        "--format",
        type=_format_arg,
        metavar="FORMAT",
        help="Output format (auto-detected from extension if not specified)",
    )
    parser.add_argument(
        "-e",
        "--extension",
        metavar="EXT",
        help="Extension for output file (use with -c for conversion)",
    )
    parser.add_argument(
        "-q",
        "--quality",
        type=int,
        default=DEFAULT_QUALITY,
        metavar="NUM",
        help=f"Quality for JPEG output (1-100, default {DEFAULT_QUALITY})",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Show debug output")
    parser.add_argument(
        "--no-color", action="store_true", help="Disable coloured status messages"
    )
    parser.add_argument(
        "-V", "--version", action="version", version=f"%(prog)s {__version__}"
    )
    return parser


def params_from_args(args: argparse.Namespace) -> ConversionParams:
    """Assign positionals to input/output and validate the combined flags.

    In clipboard mode a single positional argument is the output path.

    Raises:
        UsageError: On missing, surplus or conflicting arguments
    """
    positionals: list[str] = [p for p in (args.pos_input, args.pos_output) if p is not None]

    input_path: str | None = args.input
    if not args.clipboard and input_path is None and positionals:
        input_path = positionals.pop(0)

    output_path: str | None = args.output
    if output_path is None and positionals:
        output_path = positionals.pop(0)

    if positionals:
        if args.clipboard:
            raise UsageError("An input file cannot be combined with --clipboard")
        raise UsageError(f"Unexpected extra argument: {positionals[0]}")

    if output_path is None:
        raise UsageError(
            "Output file is required. Usage: imgconv <input> <output> OR imgconv -c <output>"
        )

    try:
        return ConversionParams(
            input_path=input_path,
            output_path=output_path,
            clipboard=args.clipboard,
            format=args.format,
            extension=args.extension,
            quality=args.quality,
        )
    except ValidationError as exc:
        raise UsageError(describe_validation_error(exc)) from exc


def describe_validation_error(exc: ValidationError) -> str:
    messages: list[str] = []
    for error in exc.errors():
        msg = str(error["msg"]).removeprefix("Value error, ")
        loc = ".".join(str(part) for part in error["loc"])
        messages.append(f"{loc}: {msg}" if loc else msg)
    return "; ".join(messages)


def main(argv: Sequence[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    _ = setup_logging(verbose=args.verbose, color=False if args.no_color else None)

    try:
        params = params_from_args(args)
        _ = convert_image(params)
    except ImageConversionError as exc:
        logger.error(str(exc))
        if exc.__cause__ is not None:
            logger.debug(f"Caused by: {exc.__cause__!r}")
        return exc.exit_code

    return 0


if __name__ == "__main__":
    sys.exit(main())
