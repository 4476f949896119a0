"""One battery monitoring session."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass
from datetime import datetime
from threading import Lock
from typing import Final

from batterywatch.common.enums import PluggedSource
from batterywatch.models.battery import (
    BatterySnapshot,
    ChargeSessionSignal,
    HealthSummary,
    NotificationIntent,
)
from batterywatch.models.state import ClassifierState, HealthState
from batterywatch.monitor.classifier import BatteryEventClassifier
from batterywatch.monitor.health import HealthEstimator
from batterywatch.monitor.power import PowerConnectionTracker
from batterywatch.notify.messages import render_charge_notification, render_notification
from batterywatch.notify.protocols import LogNotifier, Notifier
from batterywatch.settings.user import UserSettings
from batterywatch.utils.time import TimeUtils

logger: Final = logging.getLogger(__name__)


@dataclass(frozen=True)
class MonitorEvent:
    """Everything one snapshot produced."""

    snapshot: BatterySnapshot
    intent: NotificationIntent | None
    signal: ChargeSessionSignal | None
    charge_cycles: int


class BatteryMonitor:
    """Main coordination point for one monitoring session.

    Owns the classifier and health state for the lifetime of the session
    and processes snapshots strictly one at a time:

    - Plugged-source transitions (charger connected/disconnected)
    - Level notifications (critical, warning, full)
    - Charge-cycle tracking for the health estimate

    Independent sessions must not share state; create one monitor per
    notification pipeline.
    """

    def __init__(
        self,
        settings: UserSettings | None = None,
        notifier: Notifier | None = None,
        health_state: HealthState | None = None,
        classifier_state: ClassifierState | None = None,
        plugged_source: PluggedSource | None = None,
    ) -> None:
        """Initialize the monitoring session.

        Args:
            settings: User settings (default: all defaults)
            notifier: Where notifications go (default: LogNotifier)
            health_state: Persisted charge-cycle state to resume from
            classifier_state: Notification memory to resume from
            plugged_source: Power source at session start; when omitted the
                first snapshot supplies it
        """
        self.settings = settings or UserSettings()
        self.notifier: Notifier = notifier or LogNotifier()
        self.health_state = health_state or HealthState()
        self.classifier_state = classifier_state or ClassifierState()

        self.classifier = BatteryEventClassifier(self.settings.classifier_config())
        self.power_tracker = PowerConnectionTracker(plugged_source)
        self.healthy_charge = False

        # Snapshots must be processed in arrival order, one at a time
        self._lock = Lock()

    def handle(self, snapshot: BatterySnapshot, now: datetime | None = None) -> MonitorEvent:
        """Process one battery snapshot.

        The charger transition is handled before the level decision, so an
        unplug report resets notification memory before it is classified.

        Args:
            snapshot: Current battery reading
            now: Observation time (default: current time)

        Returns:
            What the snapshot produced
        """
        now = now or TimeUtils.now_localized()
        with self._lock:
            signal = self.power_tracker.observe(snapshot, self.classifier_state)
            if signal:
                self._dispatch_signal(signal)

            intent = self.classifier.classify(snapshot, self.classifier_state)
            if intent:
                self._dispatch_intent(intent, now)

            HealthEstimator.observe(snapshot.percentage, snapshot.charging, self.health_state, now)

            return MonitorEvent(
                snapshot=snapshot,
                intent=intent,
                signal=signal,
                charge_cycles=self.health_state.charge_cycles,
            )

    def handle_all(
        self, snapshots: Iterable[BatterySnapshot], now: datetime | None = None
    ) -> list[MonitorEvent]:
        """Process snapshots in order and collect the events."""
        return [self.handle(snapshot, now) for snapshot in snapshots]

    def health_summary(self, now: datetime | None = None) -> HealthSummary:
        """Get the current battery health figures."""
        with self._lock:
            return HealthEstimator.summary(self.health_state, now)

    def _dispatch_signal(self, signal: ChargeSessionSignal) -> None:
        if signal.started:
            self.healthy_charge = signal.healthy
            self.notifier.notify(render_charge_notification(signal))
        else:
            self.notifier.clear()

    def _dispatch_intent(self, intent: NotificationIntent, now: datetime) -> None:
        silent = not self.settings.is_audible_time(now)
        if silent:
            logger.debug("Outside alert window → %s notification is silent", intent.kind.name)
        self.notifier.notify(
            render_notification(
                intent,
                healthy_charge=self.healthy_charge,
                silent=silent,
                sticky=self.settings.sticky,
                vibrate=self.settings.vibrate,
            )
        )
