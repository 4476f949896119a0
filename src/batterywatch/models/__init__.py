"""Data models for battery watch.

Immutable value types flowing in and out of the decision core, plus the
state objects each monitoring session owns.
"""

from batterywatch.models.battery import (
    BatterySnapshot,
    ChargeSessionSignal,
    HealthSummary,
    NotificationIntent,
)
from batterywatch.models.config import ClassifierConfig
from batterywatch.models.state import ClassifierState, HealthState

__all__ = [
    "BatterySnapshot",
    "ChargeSessionSignal",
    "ClassifierConfig",
    "ClassifierState",
    "HealthState",
    "HealthSummary",
    "NotificationIntent",
]
