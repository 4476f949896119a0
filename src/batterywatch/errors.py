"""Exception classes for battery watch.

The decision core never raises; these errors belong to the boundaries
where raw readings and persisted state enter the package.
"""

from __future__ import annotations

from typing import Any


class BatteryWatchError(Exception):
    """Base class for all battery watch errors."""


class SnapshotError(BatteryWatchError):
    """Raised when a raw battery reading cannot be turned into a snapshot."""

    def __init__(self, message: str, row: Any | None = None) -> None:
        """Initialize the exception.

        Args:
            message: Human-readable error message
            row: Optional offending raw record, for debugging
        """
        super().__init__(message)
        self.message: str = message
        self.row: Any | None = row


class StateFileError(BatteryWatchError):
    """Raised when the persisted health state cannot be read or written."""

    def __init__(self, message: str, original_error: Exception | None = None) -> None:
        """Initialize with state file error details.

        Args:
            message: Description of the failure
            original_error: The original exception that was caught
        """
        super().__init__(message)
        self.message: str = message
        self.original_error = original_error
