"""Battery watch - battery level notifications and battery wear estimation.

This package provides:
- BatteryEventClassifier: threshold notifications with hysteresis
- PowerConnectionTracker: charger connect/disconnect detection
- HealthEstimator: charge-cycle counting and health estimation
- BatteryMonitor: one monitoring session tying the above together
"""

__version__ = "0.1.0"

from batterywatch.monitor import (
    BatteryEventClassifier,
    BatteryMonitor,
    HealthEstimator,
    PowerConnectionTracker,
)

__all__ = [
    "BatteryEventClassifier",
    "BatteryMonitor",
    "HealthEstimator",
    "PowerConnectionTracker",
]
