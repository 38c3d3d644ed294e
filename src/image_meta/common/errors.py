"""Error raised when metadata cannot be extracted from a file."""

from pathlib import Path
from typing_extensions import override


class ExtractionError(Exception):
    """
    Raised when a file cannot be statted, opened or decoded as an image.

    Missing files, permission problems and unsupported formats all end up
    here; the underlying exception is kept as ``__cause__``.
    """

    def __init__(self, path: str | Path, reason: str = "unknown error"):
        self.path: Path = Path(path)
        self.reason: str = reason
        super().__init__(self.reason)

    @override
    def __str__(self):
        return f"extraction failed: {self.path}: {self.reason}"
