from __future__ import annotations

from enum import Enum


class NotificationKind(Enum):
    """Kinds of battery level notifications.

    NONE is only used as classifier memory ("nothing notified yet") and is
    never emitted.
    """

    NONE = 0
    CRITICAL = 1
    WARNING = 2
    FULL = 3


class ChargeStatus(Enum):
    """Charging status as reported by the platform."""

    UNKNOWN = "unknown"
    CHARGING = "charging"
    DISCHARGING = "discharging"
    NOT_CHARGING = "not_charging"
    FULL = "full"

    @property
    def is_charging(self) -> bool:
        """Whether the battery counts as charging (charging or full)."""
        return self in (ChargeStatus.CHARGING, ChargeStatus.FULL)


class PluggedSource(Enum):
    """Power source the device is plugged into."""

    NONE = "none"
    USB = "usb"
    AC = "ac"
    WIRELESS = "wireless"
    OTHER = "other"

    @property
    def label(self) -> str:
        """Human-readable charger name."""
        return _PLUGGED_LABELS[self]

    @property
    def is_plugged(self) -> bool:
        return self is not PluggedSource.NONE

    @classmethod
    def parse(cls, value: str | int | None) -> PluggedSource:
        """Convert a reported plugged value to a source.

        Accepts the source names ("usb", "ac", ...) as well as the integer
        bit values platforms commonly report (0 unplugged, 1 AC, 2 USB,
        4 wireless). Any other non-zero value is OTHER.
        """
        if value is None or value == "":
            return cls.NONE
        if isinstance(value, int):
            return _PLUGGED_CODES.get(value, cls.OTHER)
        text = value.strip().lower()
        if text.isdigit():
            return _PLUGGED_CODES.get(int(text), cls.OTHER)
        try:
            return cls(text)
        except ValueError:
            return cls.OTHER


_PLUGGED_CODES: dict[int, PluggedSource] = {
    0: PluggedSource.NONE,
    1: PluggedSource.AC,
    2: PluggedSource.USB,
    4: PluggedSource.WIRELESS,
}

_PLUGGED_LABELS: dict[PluggedSource, str] = {
    PluggedSource.NONE: "Battery",
    PluggedSource.USB: "USB",
    PluggedSource.AC: "AC",
    PluggedSource.WIRELESS: "Wireless",
    PluggedSource.OTHER: "Charger",
}


class BatteryHealth(Enum):
    """Device-reported battery health, collapsed to a severity.

    Informational only; it takes no part in notification decisions.
    """

    GOOD = "good"
    WARNING = "warning"
    CRITICAL = "critical"
    UNKNOWN = "unknown"

    @classmethod
    def from_reported(cls, value: str | None) -> BatteryHealth:
        """Map a platform health string (e.g. "overheat") to a severity."""
        if not value:
            return cls.UNKNOWN
        return _REPORTED_HEALTH.get(value.strip().lower(), cls.UNKNOWN)


_REPORTED_HEALTH: dict[str, BatteryHealth] = {
    "good": BatteryHealth.GOOD,
    "cold": BatteryHealth.WARNING,
    "overheat": BatteryHealth.WARNING,
    "unspecified_failure": BatteryHealth.WARNING,
    "dead": BatteryHealth.CRITICAL,
    "over_voltage": BatteryHealth.CRITICAL,
    "warning": BatteryHealth.WARNING,
    "critical": BatteryHealth.CRITICAL,
}


class HealthStatus(Enum):
    """Wear category derived from the charge-cycle counter."""

    EXCELLENT = "Excellent"
    GOOD = "Good"
    FAIR = "Fair"
    POOR = "Poor"
