"""User-configurable settings loaded from config.yaml."""

from __future__ import annotations

import os
import re
from datetime import datetime
from pathlib import Path
from typing import ClassVar

from dotenv import load_dotenv
from pydantic import BaseModel, Field, ValidationError, field_validator, model_validator

from batterywatch.constants import (
    DEFAULT_CRITICAL_LEVEL,
    DEFAULT_STATE_FILE,
    DEFAULT_WARNING_LEVEL,
)
from batterywatch.models.config import ClassifierConfig
from batterywatch.utils.time import TimeUtils

# Load environment variables from .env file(s)
load_dotenv()


def _interpolate_env(content: str) -> str:
    return re.sub(r"\$\{(\w+)\}", lambda m: os.getenv(m.group(1), ""), content)


class AlertWindow(BaseModel):
    """Daily time range during which notifications may make sound.

    Outside the window notifications are still delivered, silently.
    Times are "HH:MM" strings; an end at or before the start runs into
    the next day.
    """

    start: str = Field("08:00", description="Start of the audible window (HH:MM)")
    end: str = Field("22:00", description="End of the audible window (HH:MM)")

    @field_validator("start", "end")
    @classmethod
    def validate_clock(cls, v: str) -> str:
        TimeUtils.parse_clock(v)  # raises ValueError on bad input
        return v

    def contains(self, current_time: datetime | None = None) -> bool:
        """Check if the current or specified time is within the window.

        Args:
            current_time: Time to check (default: current time)

        Returns:
            True if within the window
        """
        now = current_time or datetime.now()
        return TimeUtils.is_within_window(
            now, TimeUtils.parse_clock(self.start), TimeUtils.parse_clock(self.end)
        )


class UserSettings(BaseModel):
    """User settings for notification thresholds and behaviour.

    These values can be overridden by user settings in config.yaml.
    """

    # Default search paths for configuration
    DEFAULT_CONFIG_PATHS: ClassVar[list[Path]] = [
        Path("config.yaml"),
        Path("~/.config/batterywatch/config.yaml").expanduser(),
        Path("/etc/batterywatch/config.yaml"),
    ]

    # Thresholds
    warning_level: int = Field(
        DEFAULT_WARNING_LEVEL, ge=0, le=100, description="Battery % for the warning notification"
    )
    critical_level: int = Field(
        DEFAULT_CRITICAL_LEVEL, ge=0, le=100, description="Battery % for the critical notification"
    )

    # Notification switches
    alert_every_tick: bool = Field(
        False, description="Repeat the critical notification on every percentage drop"
    )
    warning_enabled: bool = Field(True, description="Notify when reaching the warning level")
    full_notify_enabled: bool = Field(True, description="Notify when the battery is full")
    vibrate: bool = Field(True, description="Vibrate together with notifications")
    sticky: bool = Field(False, description="Notifications cannot be swiped away")
    alert_window: AlertWindow | None = Field(
        None, description="Only make sound within this daily window; null means always"
    )

    # Storage
    state_file: str = Field(
        DEFAULT_STATE_FILE, description="Where charge-cycle tracking is persisted"
    )

    # ---- validators ----
    @model_validator(mode="after")
    def check_critical_below_warning(self) -> UserSettings:
        if self.critical_level >= self.warning_level:
            raise ValueError(
                f"critical_level ({self.critical_level}) must be lower than "
                f"warning_level ({self.warning_level})"
            )
        return self

    # ---- convenience methods ----
    def classifier_config(self) -> ClassifierConfig:
        """Get the thresholds and switches the event classifier consumes.

        Returns:
            Immutable ClassifierConfig
        """
        return ClassifierConfig(
            warning_level=self.warning_level,
            critical_level=self.critical_level,
            alert_every_tick=self.alert_every_tick,
            full_notify_enabled=self.full_notify_enabled,
            warning_enabled=self.warning_enabled,
        )

    def is_audible_time(self, current_time: datetime | None = None) -> bool:
        """Check if notifications may make sound at the given time.

        Args:
            current_time: Time to check (default: current time)

        Returns:
            True if no window is configured or the time is within it
        """
        if not self.alert_window:
            return True
        return self.alert_window.contains(current_time)

    @classmethod
    def load(cls, path: Path | None = None) -> UserSettings:
        """Load configuration from a YAML file.

        Args:
            path: Path to config file (optional, searches default locations if None)

        Returns:
            Validated UserSettings object

        Raises:
            FileNotFoundError: If no config file is found
            RuntimeError: If the config file cannot be parsed or is invalid
        """
        # Try to find config file
        if path is None:
            # Check environment variable first
            env_path = os.environ.get("BATTERYWATCH_CONFIG")
            if env_path:
                path = Path(env_path)
                if not path.exists():
                    raise FileNotFoundError(
                        f"Config file from BATTERYWATCH_CONFIG not found: {path}"
                    )
            else:
                # Try default paths
                for default_path in cls.DEFAULT_CONFIG_PATHS:
                    if default_path.exists():
                        path = default_path
                        break
                else:
                    raise FileNotFoundError(
                        "No configuration file found. Create config.yaml or set BATTERYWATCH_CONFIG."
                    )

        # Load and parse config
        import yaml  # local import to avoid hard dep for callers

        try:
            raw = _interpolate_env(path.read_text())
            data = yaml.safe_load(raw) or {}
        except Exception as exc:  # pragma: no cover
            raise RuntimeError(f"Unable to read config YAML: {exc}") from exc

        try:
            return cls.model_validate(data)
        except ValidationError as err:
            raise RuntimeError(f"Invalid configuration:\n{err}") from err
