"""Value types exchanged with the decision core."""

from __future__ import annotations

from dataclasses import dataclass

from batterywatch.common.enums import (
    BatteryHealth,
    ChargeStatus,
    HealthStatus,
    NotificationKind,
    PluggedSource,
)
from batterywatch.errors import SnapshotError


@dataclass(frozen=True)
class BatterySnapshot:
    """One battery reading, as reported on a battery-changed event.

    The percentage arrives pre-computed; use :meth:`from_raw` to derive it
    from a level/scale pair.
    """

    percentage: int
    charging: bool = False
    is_full: bool = False
    plugged_source: PluggedSource = PluggedSource.NONE
    health: BatteryHealth = BatteryHealth.UNKNOWN

    @classmethod
    def from_raw(
        cls,
        level: int,
        scale: int,
        status: ChargeStatus | str = ChargeStatus.UNKNOWN,
        plugged: PluggedSource | str | int | None = None,
        health: BatteryHealth | str | None = None,
    ) -> BatterySnapshot:
        """Build a snapshot from raw platform values.

        Args:
            level: Raw battery level
            scale: Maximum battery level
            status: Charging status (enum or its string value)
            plugged: Plugged source (enum, name or platform code)
            health: Reported battery health (enum or platform string)

        Returns:
            Snapshot with the percentage rounded half-up and clamped to 0-100

        Raises:
            SnapshotError: If the scale is not positive, the level is negative
                or the status is not recognised
        """
        if scale <= 0:
            raise SnapshotError(f"Battery scale must be positive, got {scale}")
        if level < 0:
            raise SnapshotError(f"Battery level must not be negative, got {level}")

        if isinstance(status, str):
            try:
                status = ChargeStatus(status.strip().lower())
            except ValueError as exc:
                raise SnapshotError(f"Unknown charge status: {status!r}") from exc

        source = plugged if isinstance(plugged, PluggedSource) else PluggedSource.parse(plugged)
        reported = health if isinstance(health, BatteryHealth) else BatteryHealth.from_reported(health)

        percentage = min(100, int(level * 100 / scale + 0.5))
        return cls(
            percentage=percentage,
            charging=status.is_charging,
            is_full=status is ChargeStatus.FULL,
            plugged_source=source,
            health=reported,
        )

    @property
    def formatted_percentage(self) -> str:
        """Return formatted battery percentage string."""
        return f"{self.percentage}%"


@dataclass(frozen=True)
class NotificationIntent:
    """Decision to notify the user.

    ``threshold_value`` is the configured level for CRITICAL and WARNING
    and the observed percentage for FULL.
    """

    kind: NotificationKind
    threshold_value: int


@dataclass(frozen=True)
class ChargeSessionSignal:
    """Charger connected or disconnected."""

    started: bool
    source: PluggedSource = PluggedSource.NONE
    healthy: bool = False


@dataclass(frozen=True)
class HealthSummary:
    """Battery wear figures for display.

    Combines the charge-cycle counter with the health percentage and status
    derived from it, and how long tracking has been running.
    """

    cycles: int
    health_percent: int
    status: HealthStatus
    days_since_first_use: int
    description: str = ""

    @property
    def formatted_health(self) -> str:
        """Return formatted health percentage string."""
        return f"{self.health_percent}%"
