"""Notification package - rendering and delivery of battery notifications."""

from batterywatch.notify.messages import (
    Notification,
    render_charge_notification,
    render_notification,
)
from batterywatch.notify.protocols import LogNotifier, MockNotifier, Notifier

__all__ = [
    "LogNotifier",
    "MockNotifier",
    "Notification",
    "Notifier",
    "render_charge_notification",
    "render_notification",
]
