# src/batterywatch/notify/protocols.py
from __future__ import annotations

import logging
from typing import Final, Protocol, runtime_checkable

from batterywatch.notify.messages import Notification

logger: Final = logging.getLogger(__name__)


@runtime_checkable
class Notifier(Protocol):
    """Protocol defining the interface for notification sinks.

    This protocol abstracts the platform notification machinery (channels,
    sound, vibration) so the monitor can work with any compatible
    implementation.
    """

    def notify(self, notification: Notification) -> None:
        """Show a notification, replacing any battery notification already shown.

        Args:
            notification: Rendered notification
        """
        ...

    def clear(self) -> None:
        """Remove the battery notification, if any."""
        ...


class LogNotifier:
    """Notifier that writes notifications to the log."""

    def notify(self, notification: Notification) -> None:
        """Log the notification at WARNING for critical alerts, INFO otherwise."""
        kind = notification.kind.name if notification.kind else "CHARGE"
        level = logging.WARNING if kind == "CRITICAL" else logging.INFO
        logger.log(
            level,
            "[%s] %s - %s%s",
            kind,
            notification.title,
            notification.content,
            " (silent)" if notification.silent else "",
        )

    def clear(self) -> None:
        logger.debug("Battery notification cleared")


class MockNotifier:
    """Mock implementation of Notifier for testing."""

    def __init__(self):
        self.notify_calls: list[Notification] = []
        self.clear_calls: int = 0

    def notify(self, notification: Notification) -> None:
        """Record the notification without showing anything."""
        self.notify_calls.append(notification)

    def clear(self) -> None:
        """Record the clear call."""
        self.clear_calls += 1

    def reset_call_history(self) -> None:
        """Reset the call history for testing."""
        self.notify_calls = []
        self.clear_calls = 0
