"""Pydantic schemas for conversion parameters and results."""

from pathlib import Path
from typing import ClassVar

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from ..utils.image_formats import ImageFormat

DEFAULT_QUALITY = 90

# ─────────────────────────────────────────────────────────────
# Conversion params
# ─────────────────────────────────────────────────────────────


class ConversionParams(BaseModel):
    """Parameters for a single conversion run.

    Attributes:
        input_path: Path to the input image (None in clipboard mode)
        output_path: Output file, or an existing directory to write into
        clipboard: Read the source bitmap from the clipboard
        format: Explicit output format
        extension: Output extension override (clipboard mode only)
        quality: JPEG quality (1-100); ignored by other encoders
    """

    input_path: Path | None = Field(default=None, description="Input image file")
    output_path: Path = Field(description="Output image file or directory")
    clipboard: bool = Field(default=False, description="Paste image from clipboard")
    format: ImageFormat | None = Field(default=None, description="Output format")
    extension: str | None = Field(
        default=None, description="Extension for output file (clipboard mode)"
    )
    quality: int = Field(
        default=DEFAULT_QUALITY, ge=1, le=100, description="JPEG quality (1-100)"
    )

    model_config: ClassVar[ConfigDict] = ConfigDict(frozen=True)

    @field_validator("format", mode="before")
    @classmethod
    def parse_format_alias(cls, v: object) -> object:
        """Accept aliases such as "jpg" or "tif" for the format field."""
        if isinstance(v, str):
            return ImageFormat.parse(v)
        return v

    @field_validator("extension")
    @classmethod
    def strip_extension_dot(cls, v: str | None) -> str | None:
        if v is None:
            return None
        v = v.strip().lstrip(".")
        if not v:
            raise ValueError("Extension must not be empty")
        return v

    @model_validator(mode="after")
    def validate_source(self) -> "ConversionParams":
        """Ensure exactly one source and no clipboard-only flags in file mode."""
        if self.clipboard and self.input_path is not None:
            raise ValueError("An input file cannot be combined with --clipboard")
        if not self.clipboard and self.input_path is None:
            raise ValueError(
                "Input file is required. Usage: imgconv <input> <output> OR imgconv -c <output>"
            )
        if self.extension is not None and not self.clipboard:
            raise ValueError("--extension can only be used with --clipboard")
        return self


# ─────────────────────────────────────────────────────────────
# Resolved output
# ─────────────────────────────────────────────────────────────


class ResolvedOutput(BaseModel):
    """Final output path and format, with notices for every path correction."""

    path: Path
    format: ImageFormat
    notices: list[str] = Field(default_factory=list)

    model_config: ClassVar[ConfigDict] = ConfigDict(frozen=True)


# ─────────────────────────────────────────────────────────────
# Conversion result
# ─────────────────────────────────────────────────────────────


class ConversionOutput(BaseModel):
    """Metadata about a written output image."""

    output_path: Path
    format: ImageFormat
    width: int = Field(ge=0)
    height: int = Field(ge=0)
    size_bytes: int = Field(ge=0)
    source_format: ImageFormat | None = None
