"""Test configuration and fixtures for image_meta.

All test media is generated with Pillow into the per-test ``tmp_path``.
"""

from pathlib import Path

import pytest
from loguru import logger
from PIL import Image, ImageDraw

CAMERA_MODEL = "Canon EOS R5"


# ============================================================================
# Logging
# ============================================================================


@pytest.fixture(autouse=True)
def reset_loguru():
    """Drop loguru sinks added during a test (they may point at captured streams)."""
    yield
    logger.remove()


# ============================================================================
# Image fixtures
# ============================================================================


@pytest.fixture
def synthetic_image(tmp_path: Path) -> Path:
    """Generate an 800x600 RGB JPEG without EXIF data."""
    output_path = tmp_path / "synthetic.jpg"

    img = Image.new("RGB", (800, 600), color=(73, 109, 137))
    draw = ImageDraw.Draw(img)

    for i in range(0, 800, 50):
        draw.line([(i, 0), (i, 600)], fill=(255, 255, 255), width=2)
    for i in range(0, 600, 50):
        draw.line([(0, i), (800, i)], fill=(255, 255, 255), width=2)

    draw.ellipse([300, 200, 500, 400], fill=(200, 100, 100))

    img.save(output_path, "JPEG", quality=85)

    return output_path


@pytest.fixture
def camera_model() -> str:
    return CAMERA_MODEL


@pytest.fixture
def exif_image(tmp_path: Path) -> Path:
    """Generate a 640x480 JPEG whose EXIF Model tag is CAMERA_MODEL."""
    output_path = tmp_path / "with_exif.jpg"

    exif = Image.Exif()
    exif[0x010F] = "Canon"  # Make
    exif[0x0110] = CAMERA_MODEL  # Model

    img = Image.new("RGB", (640, 480), color=(100, 150, 200))
    img.save(output_path, "JPEG", quality=95, exif=exif)

    return output_path


@pytest.fixture
def rgba_png(tmp_path: Path) -> Path:
    output_path = tmp_path / "alpha.png"
    Image.new("RGBA", (123, 45), color=(10, 20, 30, 128)).save(output_path, "PNG")
    return output_path


@pytest.fixture
def grayscale_png(tmp_path: Path) -> Path:
    output_path = tmp_path / "gray.png"
    Image.new("L", (64, 32), color=128).save(output_path, "PNG")
    return output_path


@pytest.fixture
def palette_gif(tmp_path: Path) -> Path:
    output_path = tmp_path / "palette.gif"
    Image.new("P", (32, 16), color=3).save(output_path, "GIF")
    return output_path


@pytest.fixture
def text_file(tmp_path: Path) -> Path:
    """A plain-text file that is not an image."""
    output_path = tmp_path / "notes.txt"
    _ = output_path.write_text("not an image\n")
    return output_path
