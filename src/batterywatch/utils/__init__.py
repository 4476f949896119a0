"""Common utility functions and helpers for the batterywatch package."""

from batterywatch.utils.file import ensure_directory_exists, resolve_path
from batterywatch.utils.formatting import format_percentage, format_plural
from batterywatch.utils.time import TimeUtils

__all__ = [
    "TimeUtils",
    "ensure_directory_exists",
    "format_percentage",
    "format_plural",
    "resolve_path",
]
