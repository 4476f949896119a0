# src/batterywatch/utils/time.py
"""Time and date handling utilities."""

from __future__ import annotations

from datetime import UTC, datetime, time


class TimeUtils:
    """Time-related utility functions.

    Centralized utilities for working with dates and times:
    - Current time retrieval with proper timezone handling
    - Epoch conversions
    - Whole-day differences
    - "HH:MM" clock parsing and daily window checks
    """

    @staticmethod
    def now_localized() -> datetime:
        """Get current datetime with local timezone.

        Returns:
            Current datetime with local timezone
        """
        return datetime.now(UTC).astimezone()

    @staticmethod
    def format_datetime(dt: datetime, format_string: str) -> str:
        """Format datetime with specified format string.

        Args:
            dt: Datetime to format
            format_string: strftime format string

        Returns:
            Formatted datetime string
        """
        return dt.strftime(format_string)

    @staticmethod
    def datetime_to_epoch(dt: datetime) -> int:
        """Convert datetime to epoch seconds.

        Args:
            dt: Datetime object (assumes UTC timezone if not specified)

        Returns:
            Epoch seconds as integer
        """
        if dt.tzinfo is None:
            dt = dt.replace(tzinfo=UTC)
        return int(dt.timestamp())

    @staticmethod
    def epoch_to_datetime(timestamp: int) -> datetime:
        """Convert UNIX timestamp to UTC datetime with timezone information.

        Args:
            timestamp: UNIX timestamp (seconds since epoch)

        Returns:
            Timezone-aware datetime object in UTC
        """
        return datetime.fromtimestamp(timestamp, tz=UTC)

    @staticmethod
    def days_between(start: datetime, end: datetime) -> int:
        """Whole days elapsed from start to end, truncated, never negative.

        Naive datetimes are taken as UTC.
        """
        seconds = TimeUtils.datetime_to_epoch(end) - TimeUtils.datetime_to_epoch(start)
        return max(0, seconds // 86400)

    @staticmethod
    def parse_clock(value: str) -> time:
        """Parse an ``HH:MM`` string.

        Args:
            value: Clock time such as "08:00" or "23:30"

        Returns:
            Corresponding time of day

        Raises:
            ValueError: If the string is not a valid 24-hour clock time
        """
        hour_text, sep, minute_text = value.strip().partition(":")
        if not sep:
            raise ValueError(f"Expected HH:MM, got {value!r}")
        return time(int(hour_text), int(minute_text))

    @staticmethod
    def is_within_window(now: datetime, start: time, end: time) -> bool:
        """Check whether ``now`` falls inside a daily window.

        The window is exclusive at both ends. An end at or before the start
        means the window runs into the next day (08:00 → 00:00 covers the
        whole day after eight in the morning).
        """
        current = now.time().replace(tzinfo=None)
        if end <= start:
            return current > start or current < end
        return start < current < end
