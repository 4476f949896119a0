from __future__ import annotations

from dataclasses import dataclass

from batterywatch.constants import DEFAULT_CRITICAL_LEVEL, DEFAULT_WARNING_LEVEL


@dataclass(frozen=True)
class ClassifierConfig:
    """Thresholds and switches consumed by the event classifier.

    No validation happens here: callers that bypass UserSettings can pass
    ``critical_level >= warning_level``, in which case critical always wins.
    """

    warning_level: int = DEFAULT_WARNING_LEVEL
    critical_level: int = DEFAULT_CRITICAL_LEVEL
    alert_every_tick: bool = False
    full_notify_enabled: bool = True
    warning_enabled: bool = True
