"""Metadata extraction algorithms."""

from .metadata_extractor import (
    SUPPORTED_EXTENSIONS,
    check_extension,
    extract_metadata,
    read_camera_model,
)

__all__ = [
    "SUPPORTED_EXTENSIONS",
    "check_extension",
    "extract_metadata",
    "read_camera_model",
]
