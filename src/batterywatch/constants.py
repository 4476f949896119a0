from typing import Final

# Classifier thresholds (percent)
RED_ALERT_LEVEL: Final = 4  # any prior notification memory is discarded at or below this
FULL_PERCENTAGE: Final = 95  # at or below this (and above warning) the full alert re-arms
DEFAULT_WARNING_LEVEL: Final = 40
DEFAULT_CRITICAL_LEVEL: Final = 20

# Charger sessions started at or below this level count as "healthy"
HEALTHY_CHARGE_THRESHOLD: Final = 20

# Charge-cycle detection (percent)
LOW_BATTERY_THRESHOLD: Final = 20
FULL_BATTERY_THRESHOLD: Final = 95

# Health curve breakpoints (completed charge cycles)
EXCELLENT_THRESHOLD: Final = 300
GOOD_THRESHOLD: Final = 500
FAIR_THRESHOLD: Final = 800
POOR_SPAN: Final = 500  # cycles past FAIR_THRESHOLD over which health falls to the floor
MIN_HEALTH_PERCENTAGE: Final = 40

# Default location of the persisted health state
DEFAULT_STATE_FILE: Final = "~/.local/share/batterywatch/health.json"
