"""Exception hierarchy for image conversion."""

from pathlib import Path


class ImageConversionError(Exception):
    """Base class for all conversion errors."""

    exit_code: int = 1


class UsageError(ImageConversionError):
    """Missing or conflicting arguments, out-of-range values."""

    exit_code = 2


class UnknownExtensionError(UsageError):
    def __init__(self, extension: str):
        self.extension: str = extension
        super().__init__(f"Unknown extension: {extension}")


class InputNotFoundError(ImageConversionError, FileNotFoundError):
    def __init__(self, path: str | Path):
        self.path: Path = Path(path)
        super().__init__(f"Input file not found: {self.path}")

    def __str__(self) -> str:
        return self.args[0]


class OutputDirectoryError(ImageConversionError):
    def __init__(self, directory: str | Path):
        self.directory: Path = Path(directory)
        super().__init__(f"Failed to create directory: {self.directory}")


class OutputWriteError(ImageConversionError):
    def __init__(self, path: str | Path, reason: object):
        self.path: Path = Path(path)
        super().__init__(f"Failed to save image to: {self.path}: {reason}")


class ClipboardError(ImageConversionError):
    """Clipboard could not be read or holds no image."""


class CodecError(ImageConversionError):
    """Format sniffing, decoding or encoding failed."""


class FormatUndeterminableError(ImageConversionError):
    def __init__(self, output_path: str | Path):
        self.output_path: Path = Path(output_path)
        super().__init__(
            f"Could not determine output format from '{self.output_path}'. "
            + "Please specify --format or use a recognized extension"
        )
