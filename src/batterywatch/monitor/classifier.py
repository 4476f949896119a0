"""Battery level notification decisions.

Turns a stream of battery snapshots into at most one notification intent
per meaningful transition:

- CRITICAL / WARNING while discharging and the percentage changed
- FULL once per full-charge episode while charging or idle

Repeats of the same kind are suppressed until the kind changes, the
charger is unplugged (``reset``) or the battery reaches the red-alert
level.
"""

from __future__ import annotations

import logging
from typing import Final

from batterywatch.common.enums import NotificationKind
from batterywatch.constants import FULL_PERCENTAGE, RED_ALERT_LEVEL
from batterywatch.models.battery import BatterySnapshot, NotificationIntent
from batterywatch.models.config import ClassifierConfig
from batterywatch.models.state import ClassifierState

logger: Final = logging.getLogger(__name__)


class BatteryEventClassifier:
    """Decides which battery notification, if any, a snapshot deserves.

    The classifier itself is stateless; all history lives in the
    ClassifierState passed to each call, which the caller owns and must
    feed in arrival order.
    """

    def __init__(self, config: ClassifierConfig | None = None) -> None:
        """Initialize with the default configuration for calls that omit one.

        Args:
            config: Thresholds and switches (default: ClassifierConfig())
        """
        self.config = config or ClassifierConfig()

    def classify(
        self,
        snapshot: BatterySnapshot,
        state: ClassifierState,
        config: ClassifierConfig | None = None,
    ) -> NotificationIntent | None:
        """Classify a snapshot and update the state in place.

        Args:
            snapshot: Current battery reading
            state: Session state, mutated by this call
            config: Overrides the classifier's configuration for this call

        Returns:
            The notification to raise, or None
        """
        cfg = config or self.config
        percentage = snapshot.percentage
        changed = percentage != state.previous_percentage
        intent: NotificationIntent | None = None

        if changed and not snapshot.charging:
            if percentage <= RED_ALERT_LEVEL:
                state.previous_notified_type = NotificationKind.NONE

            # Critical first: when both thresholds match, the lower one wins
            if percentage <= cfg.critical_level:
                if (
                    state.previous_notified_type is not NotificationKind.CRITICAL
                    or cfg.alert_every_tick
                ):
                    intent = NotificationIntent(NotificationKind.CRITICAL, cfg.critical_level)
                state.previous_notified_type = NotificationKind.CRITICAL
            elif percentage <= cfg.warning_level and cfg.warning_enabled:
                if state.previous_notified_type is not NotificationKind.WARNING:
                    intent = NotificationIntent(NotificationKind.WARNING, cfg.warning_level)
                state.previous_notified_type = NotificationKind.WARNING
        else:
            if (
                snapshot.is_full
                and cfg.full_notify_enabled
                and not state.full_notification_sent
            ):
                intent = NotificationIntent(NotificationKind.FULL, percentage)
                state.full_notification_sent = True

            if cfg.warning_level < percentage <= FULL_PERCENTAGE:
                state.full_notification_sent = False

        state.previous_percentage = percentage

        if intent:
            logger.debug(
                "Battery %d%% (charging=%s) → %s notification",
                percentage,
                snapshot.charging,
                intent.kind.name,
            )
        return intent

    @staticmethod
    def reset(state: ClassifierState) -> None:
        """Forget notification memory after the charger is unplugged.

        ``previous_percentage`` is kept so an unchanged reading still
        counts as unchanged.
        """
        state.full_notification_sent = False
        state.previous_notified_type = NotificationKind.NONE
