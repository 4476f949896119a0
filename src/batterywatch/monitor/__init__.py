"""Monitor package - the battery decision core and the session running it."""

from batterywatch.monitor.classifier import BatteryEventClassifier
from batterywatch.monitor.health import HealthEstimator
from batterywatch.monitor.power import PowerConnectionTracker
from batterywatch.monitor.session import BatteryMonitor, MonitorEvent

__all__ = [
    "BatteryEventClassifier",
    "BatteryMonitor",
    "HealthEstimator",
    "MonitorEvent",
    "PowerConnectionTracker",
]
