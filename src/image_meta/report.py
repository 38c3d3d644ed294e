"""Rendering of ImageMetadata for standard output."""

from .common.schemas import ImageMetadata
from .utils.timestamp import format_timestamp

CAMERA_MODEL_NOT_AVAILABLE = "Camera model: not available"


def format_report(metadata: ImageMetadata) -> str:
    lines = [f"File size: {metadata.size_bytes} bytes"]

    if metadata.created is not None:
        lines.append(f"Created: {format_timestamp(metadata.created)}")

    lines.append(f"Dimensions: {metadata.width}x{metadata.height}")
    lines.append(f"Color type: {metadata.color_type} ({metadata.mode})")

    if metadata.camera_model is not None:
        lines.append(f"Camera model: {metadata.camera_model}")
    else:
        lines.append(CAMERA_MODEL_NOT_AVAILABLE)

    return "\n".join(lines)


def format_json(metadata: ImageMetadata) -> str:
    return metadata.model_dump_json(indent=2)
