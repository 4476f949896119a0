"""Mutable state owned by a single monitoring session."""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from datetime import datetime
from pathlib import Path
from typing import Any, Final

from pydantic import Field, ValidationError, field_validator

from batterywatch.common.enums import NotificationKind
from batterywatch.errors import StateFileError
from batterywatch.models.base import TimeStampModel
from batterywatch.utils.file import ensure_directory_exists

logger: Final = logging.getLogger(__name__)


@dataclass
class ClassifierState:
    """Notification memory of the event classifier.

    Safe to reset to defaults on restart; at worst one redundant
    notification follows.
    """

    previous_percentage: int = 0
    previous_notified_type: NotificationKind = NotificationKind.NONE
    full_notification_sent: bool = False


class HealthState(TimeStampModel):
    """Charge-cycle tracking state.

    Must survive restarts for the health model to stay meaningful, hence
    a pydantic model with JSON persistence.
    """

    charge_cycles: int = Field(0, ge=0, description="Completed charge cycles")
    cycle_in_progress: bool = Field(
        False, description="Battery dropped to the low threshold and has not yet recharged"
    )
    first_use_timestamp: datetime | None = Field(
        None, description="First observation recorded by this tracker"
    )
    last_low_battery_timestamp: datetime | None = Field(
        None, description="When the current charge cycle started"
    )

    @field_validator("first_use_timestamp", "last_low_battery_timestamp", mode="before")
    @classmethod
    def validate_timestamp(cls, v: Any) -> Any:
        # Plain epoch seconds are accepted for hand-written state files
        if isinstance(v, (int, float)) and not isinstance(v, bool):
            return cls.convert_timestamp(v)
        return v

    @classmethod
    def load(cls, path: Path) -> HealthState:
        """Load persisted state, or a fresh state if the file does not exist.

        Args:
            path: JSON state file

        Returns:
            Validated HealthState

        Raises:
            StateFileError: If the file exists but cannot be read or validated
        """
        if not path.exists():
            logger.debug("No health state at %s, starting fresh", path)
            return cls()

        try:
            data = json.loads(path.read_text(encoding="utf-8"))
        except (OSError, ValueError) as exc:
            raise StateFileError(f"Unable to read health state {path}", exc) from exc

        try:
            return cls.model_validate(data)
        except ValidationError as err:
            raise StateFileError(f"Invalid health state in {path}:\n{err}", err) from err

    def save(self, path: Path) -> None:
        """Persist the state as JSON.

        Raises:
            StateFileError: If the file cannot be written
        """
        try:
            ensure_directory_exists(path.parent)
            path.write_text(self.model_dump_json(indent=2), encoding="utf-8")
        except OSError as exc:
            raise StateFileError(f"Unable to write health state {path}", exc) from exc
        logger.debug("Health state saved to %s", path)
