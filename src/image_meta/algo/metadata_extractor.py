"""Pure metadata extraction logic (single file).

Filesystem attributes come from ``os.stat``; dimensions, color type and the
EXIF camera model come from Pillow. HEIF/HEIC support is provided by
pillow-heif.
"""

from pathlib import Path
from typing import Final

from loguru import logger
from PIL import ExifTags, Image
from pillow_heif import register_heif_opener

from ..common.errors import ExtractionError
from ..common.schemas import ColorType, ImageMetadata
from ..utils.profiling import timed
from ..utils.timestamp import birth_time

register_heif_opener()

SUPPORTED_EXTENSIONS: Final[tuple[str, ...]] = ("jpg", "jpeg", "png", "gif", "bmp")


def check_extension(path: str | Path) -> None:
    """Raise ExtractionError unless ``path`` has one of SUPPORTED_EXTENSIONS."""
    suffix = Path(path).name.rsplit(".", 1)[-1].lower()
    if suffix not in SUPPORTED_EXTENSIONS:
        raise ExtractionError(
            path,
            f"unsupported extension {suffix!r}, supported extensions are: "
            + " / ".join(SUPPORTED_EXTENSIONS),
        )


def _exif_text(value: object) -> str | None:
    if value is None:
        return None
    if isinstance(value, bytes):
        value = value.decode("utf-8", errors="replace")
    text = str(value).rstrip("\x00").strip()
    return text or None


def read_camera_model(img: Image.Image) -> str | None:
    """Return the EXIF Model tag of an opened image, or None.

    Unreadable EXIF blocks are treated as absent.
    """
    try:
        exif = img.getexif()
    except (OSError, SyntaxError, ValueError) as exc:
        logger.debug(f"Could not read EXIF data: {exc}")
        return None

    return _exif_text(exif.get(ExifTags.Base.Model))


@timed
def extract_metadata(path: str | Path, *, strict: bool = False) -> ImageMetadata:
    """
    Extract size, creation time, dimensions, color type and camera model.

    Args:
        path: Path to an image file
        strict: Reject files whose extension is not in SUPPORTED_EXTENSIONS

    Returns:
        Fully populated ImageMetadata

    Raises:
        ExtractionError: If the file cannot be statted, opened or decoded.
            The original exception is chained as ``__cause__``.
    """
    path = Path(path)
    logger.debug(f"Extracting metadata from {path}")

    if strict:
        check_extension(path)

    try:
        stat_result = path.stat()

        with Image.open(path) as img:
            img.load()
            width, height = img.size
            mode = img.mode
            image_format = img.format
            camera_model = read_camera_model(img)

    except FileNotFoundError as exc:
        logger.debug(f"File not found: {path}")
        raise ExtractionError(path, "file not found") from exc

    except (OSError, SyntaxError, ValueError, Image.DecompressionBombError) as exc:
        logger.debug(f"Failed to extract metadata from {path}: {exc}")
        raise ExtractionError(path, str(exc) or type(exc).__name__) from exc

    return ImageMetadata(
        size_bytes=stat_result.st_size,
        created=birth_time(stat_result),
        width=width,
        height=height,
        color_type=ColorType.from_mode(mode),
        mode=mode,
        image_format=image_format,
        camera_model=camera_model,
    )
