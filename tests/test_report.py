"""Unit tests for text and JSON report rendering."""

import json
from datetime import datetime, timezone

from image_meta import ColorType, ImageMetadata, format_json, format_report


def test_report_order_with_all_fields():
    metadata = ImageMetadata(
        size_bytes=2048,
        created=datetime(2024, 1, 1, 0, 0, 0, tzinfo=timezone.utc),
        width=640,
        height=480,
        color_type=ColorType.RGB,
        mode="RGB",
        image_format="JPEG",
        camera_model="Canon EOS R5",
    )

    assert format_report(metadata).splitlines() == [
        "File size: 2048 bytes",
        "Created: 2024-01-01 00:00:00 UTC",
        "Dimensions: 640x480",
        "Color type: rgb (RGB)",
        "Camera model: Canon EOS R5",
    ]


def test_report_without_optional_fields():
    metadata = ImageMetadata(
        size_bytes=10,
        width=1,
        height=1,
        color_type=ColorType.INDEXED,
        mode="P",
    )

    assert format_report(metadata).splitlines() == [
        "File size: 10 bytes",
        "Dimensions: 1x1",
        "Color type: indexed (P)",
        "Camera model: not available",
    ]


def test_json_report():
    metadata = ImageMetadata(
        size_bytes=10,
        width=3,
        height=2,
        color_type=ColorType.GRAYSCALE,
        mode="L",
        image_format="PNG",
    )

    data = json.loads(format_json(metadata))

    assert data == {
        "size_bytes": 10,
        "created": None,
        "width": 3,
        "height": 2,
        "color_type": "grayscale",
        "mode": "L",
        "image_format": "PNG",
        "camera_model": None,
    }
