"""Pydantic schemas for extracted image metadata and CLI parameters."""

from datetime import datetime
from enum import StrEnum
from pathlib import Path
from typing import ClassVar, Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator

# ─────────────────────────────────────────────────────────────
# Color type classification
# ─────────────────────────────────────────────────────────────


class ColorType(StrEnum):
    BILEVEL = "bilevel"
    GRAYSCALE = "grayscale"
    GRAYSCALE_ALPHA = "grayscale_alpha"
    RGB = "rgb"
    RGBA = "rgba"
    INDEXED = "indexed"
    INDEXED_ALPHA = "indexed_alpha"
    CMYK = "cmyk"
    YCBCR = "ycbcr"
    LAB = "lab"
    HSV = "hsv"
    UNKNOWN = "unknown"

    @classmethod
    def from_mode(cls, mode: str) -> "ColorType":
        """Classify a Pillow image mode (``"RGB"``, ``"P"``, ``"I;16"``...)."""
        if mode == "1":
            return ColorType.BILEVEL
        elif mode in ("L", "I", "F") or mode.startswith("I;"):
            return ColorType.GRAYSCALE
        elif mode in ("LA", "La"):
            return ColorType.GRAYSCALE_ALPHA
        elif mode in ("RGB", "RGBX", "BGR;15", "BGR;16", "BGR;24"):
            return ColorType.RGB
        elif mode in ("RGBA", "RGBa"):
            return ColorType.RGBA
        elif mode == "P":
            return ColorType.INDEXED
        elif mode == "PA":
            return ColorType.INDEXED_ALPHA
        elif mode == "CMYK":
            return ColorType.CMYK
        elif mode == "YCbCr":
            return ColorType.YCBCR
        elif mode == "LAB":
            return ColorType.LAB
        elif mode == "HSV":
            return ColorType.HSV
        else:
            return ColorType.UNKNOWN


# ─────────────────────────────────────────────────────────────
# Extracted metadata record
# ─────────────────────────────────────────────────────────────


class ImageMetadata(BaseModel):
    """Basic file and image metadata for a single file.

    Instances are immutable and only ever produced fully populated by
    :func:`image_meta.algo.metadata_extractor.extract_metadata`.
    """

    size_bytes: int = Field(..., ge=0, description="File size in bytes")
    created: datetime | None = Field(
        default=None, description="File creation time (UTC), if the filesystem reports it"
    )

    width: int = Field(..., ge=0, description="Image width in pixels")
    height: int = Field(..., ge=0, description="Image height in pixels")
    color_type: ColorType = Field(..., description="Color channel classification")
    mode: str = Field(..., description="Raw Pillow image mode (e.g. RGB, P, I;16)")
    image_format: str | None = Field(
        default=None, description="Decoder format name (e.g. JPEG, PNG)"
    )

    camera_model: str | None = Field(
        default=None, description="Camera model from the EXIF Model tag"
    )

    model_config: ClassVar[ConfigDict] = ConfigDict(frozen=True, extra="forbid")

    @classmethod
    def from_file(cls, path: str | Path, *, strict: bool = False) -> "ImageMetadata":
        """Extract metadata from the image at ``path``.

        Raises:
            ExtractionError: If the file cannot be read or decoded
        """
        from ..algo.metadata_extractor import extract_metadata

        return extract_metadata(path, strict=strict)


# ─────────────────────────────────────────────────────────────
# CLI parameters
# ─────────────────────────────────────────────────────────────

DEFAULT_IMAGE_PATH = "image.jpg"
LOG_LEVELS = ("TRACE", "DEBUG", "INFO", "SUCCESS", "WARNING", "ERROR", "CRITICAL")


class CliParams(BaseModel):
    """Validated command line parameters."""

    input_path: Path = Field(
        default=Path(DEFAULT_IMAGE_PATH), description="Path of the image to inspect"
    )
    output_format: Literal["text", "json"] = Field(
        default="text", description="Report format written to stdout"
    )
    strict: bool = Field(
        default=False, description="Only accept jpg/jpeg/png/gif/bmp extensions"
    )
    log_level: str = Field(default="WARNING", description="loguru level for stderr logging")

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        level = v.strip().upper()
        if level not in LOG_LEVELS:
            raise ValueError(f"Unknown log level: {v}")
        return level
