from .logging import configure_logging
from .profiling import timed
from .timestamp import birth_time, format_timestamp

__all__ = [
    "birth_time",
    "configure_logging",
    "format_timestamp",
    "timed",
]
