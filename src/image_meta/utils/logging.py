"""loguru sink configuration for the command line tool."""

import sys

from loguru import logger

LOG_FORMAT = "<green>{time:HH:mm:ss}</green> | <level>{level: <8}</level> | {name}:{line} - {message}"


def configure_logging(level: str = "WARNING") -> None:
    """Send log records at ``level`` and above to stderr.

    stdout is reserved for the metadata report.
    """
    logger.remove()
    _ = logger.add(sys.stderr, level=level, format=LOG_FORMAT)
