import os
import sys
from datetime import datetime, timezone


def birth_time(stat_result: os.stat_result) -> datetime | None:
    """
    Returns the creation time recorded in a stat result as a UTC datetime.

    Not every platform/filesystem reports a creation time. On Linux the
    kernel can report it through statx, but os.stat does not expose it, so
    None is returned there.
    On Windows ``st_ctime`` is the creation time for interpreters that
    predate ``st_birthtime``.
    """

    seconds: float | None = getattr(stat_result, "st_birthtime", None)
    if seconds is None and sys.platform == "win32":
        seconds = stat_result.st_ctime

    if seconds is None:
        return None

    return datetime.fromtimestamp(seconds, tz=timezone.utc)


def format_timestamp(dt: datetime) -> str:
    """
    Formats a datetime as ``YYYY-MM-DD HH:MM:SS UTC``.
    Naive datetimes are assumed to be in the system's local timezone.
    """

    if dt.tzinfo is None or dt.tzinfo.utcoffset(dt) is None:
        dt = dt.astimezone()

    return dt.astimezone(timezone.utc).strftime("%Y-%m-%d %H:%M:%S UTC")
