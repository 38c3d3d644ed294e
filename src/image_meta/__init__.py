"""image_meta - Basic file and image metadata for a single image."""

from .algo.metadata_extractor import extract_metadata
from .common.errors import ExtractionError
from .common.schemas import CliParams, ColorType, ImageMetadata
from .report import format_json, format_report

__version__ = "0.1.0"

__all__ = [
    "CliParams",
    "ColorType",
    "ExtractionError",
    "ImageMetadata",
    "__version__",
    "extract_metadata",
    "format_json",
    "format_report",
]
