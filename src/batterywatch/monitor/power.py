"""Charger connect/disconnect detection."""

from __future__ import annotations

import logging
from typing import Final

from batterywatch.common.enums import PluggedSource
from batterywatch.constants import HEALTHY_CHARGE_THRESHOLD
from batterywatch.models.battery import BatterySnapshot, ChargeSessionSignal
from batterywatch.models.state import ClassifierState
from batterywatch.monitor.classifier import BatteryEventClassifier

logger: Final = logging.getLogger(__name__)


class PowerConnectionTracker:
    """Turns plugged-source reports into charge session start/stop signals.

    Only the last seen plugged source is remembered. When no source is
    known yet, the first report only records it: a session that starts on
    the charger is not a new charge session. Repeated reports of the same
    source are ignored.
    """

    def __init__(self, initial_source: PluggedSource | None = None) -> None:
        """Initialize the tracker.

        Args:
            initial_source: Plugged source at session start, if already known
        """
        self.current_source: PluggedSource | None = initial_source

    def observe(
        self,
        snapshot: BatterySnapshot,
        classifier_state: ClassifierState | None = None,
    ) -> ChargeSessionSignal | None:
        """Detect a plugged-source transition.

        Args:
            snapshot: Current battery reading
            classifier_state: Reset when the charger is disconnected

        Returns:
            Signal for a connect/disconnect, None for the first or a
            repeated report
        """
        source = snapshot.plugged_source
        if self.current_source is None:
            self.current_source = source
            logger.debug("Initial power source: %s", source.label)
            return None
        if source is self.current_source:
            return None
        self.current_source = source

        if source.is_plugged:
            return self._charger_connected(source, snapshot.percentage)
        return self._charger_disconnected(classifier_state)

    def _charger_connected(self, source: PluggedSource, percentage: int) -> ChargeSessionSignal:
        # Plugging in while low is the pattern lithium-ion cells like best
        healthy = percentage <= HEALTHY_CHARGE_THRESHOLD
        logger.info(
            "Charger connected: %s (Battery: %d%%, Healthy: %s)", source.label, percentage, healthy
        )
        return ChargeSessionSignal(started=True, source=source, healthy=healthy)

    def _charger_disconnected(self, classifier_state: ClassifierState | None) -> ChargeSessionSignal:
        if classifier_state is not None:
            BatteryEventClassifier.reset(classifier_state)
        logger.info("Charger disconnected")
        return ChargeSessionSignal(started=False)
