"""Notification texts.

Rendering is kept apart from the decision core: intents and charge
signals carry only kinds and numbers, this module turns them into the
title/content pairs a notifier shows.
"""

from __future__ import annotations

from dataclasses import dataclass

from batterywatch.common.enums import NotificationKind
from batterywatch.models.battery import ChargeSessionSignal, NotificationIntent
from batterywatch.utils.formatting import format_percentage


@dataclass(frozen=True)
class Notification:
    """A rendered notification, ready for a notifier."""

    kind: NotificationKind | None  # None for charge session notifications
    title: str
    content: str
    silent: bool = False
    sticky: bool = False
    vibrate: bool = True


def render_notification(
    intent: NotificationIntent,
    healthy_charge: bool = False,
    silent: bool = False,
    sticky: bool = False,
    vibrate: bool = True,
) -> Notification:
    """Render a level notification.

    Args:
        intent: Classifier decision
        healthy_charge: Whether the current charge session began at a low level;
            only affects the FULL title
        silent: Deliver without sound (outside the alert window)
        sticky: Notification cannot be dismissed
        vibrate: Vibrate together with the notification

    Returns:
        Rendered notification
    """
    level = format_percentage(intent.threshold_value)
    if intent.kind is NotificationKind.CRITICAL:
        title = "Battery critically low"
        content = f"Battery is at or below {level}. Connect the charger now."
    elif intent.kind is NotificationKind.WARNING:
        title = "Battery low"
        content = f"Battery is at or below {level}. Consider charging soon."
    else:
        title = "Battery full - healthy charge" if healthy_charge else "Battery full"
        content = "Battery is fully charged. You can unplug the charger."

    return Notification(
        kind=intent.kind,
        title=title,
        content=content,
        silent=silent,
        sticky=sticky,
        vibrate=vibrate,
    )


def render_charge_notification(signal: ChargeSessionSignal) -> Notification:
    """Render the charge-started notification for a connect signal.

    Args:
        signal: Connect signal (``started`` must be True)

    Returns:
        Rendered notification
    """
    title = "Charging started - healthy charge" if signal.healthy else "Charging started"
    return Notification(
        kind=None,
        title=title,
        content=f"Charging via {signal.source.label}.",
        vibrate=False,
    )
