"""Common module - schemas and errors."""

from .errors import ExtractionError
from .schemas import CliParams, ColorType, ImageMetadata

__all__ = [
    "CliParams",
    "ColorType",
    "ExtractionError",
    "ImageMetadata",
]
