"""Internal application settings derived from user settings."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from batterywatch.settings.user import UserSettings
from batterywatch.utils.file import resolve_path


@dataclass
class AppPaths:
    """Application file and directory paths."""

    state_file: Path

    @classmethod
    def from_user_settings(cls, user_settings: UserSettings) -> AppPaths:
        """Create paths from user settings."""
        return cls(state_file=resolve_path(user_settings.state_file))


class ApplicationSettings:
    """Application settings container.

    Combines user-provided configuration with derived values such as
    resolved file paths.

    Examples:
        user_settings = UserSettings.load()
        app_settings = ApplicationSettings(user_settings)
        state = HealthState.load(app_settings.paths.state_file)
    """

    def __init__(self, user_settings: UserSettings, paths: AppPaths | None = None):
        """Initialize application settings with configuration sources."""
        self.user = user_settings
        self.paths = paths or AppPaths.from_user_settings(user_settings)

    @classmethod
    def load(cls, config_path: Path | None = None) -> ApplicationSettings:
        """Load user settings from YAML and derive application settings.

        Raises:
            FileNotFoundError: If no config file is found
            RuntimeError: If the config file cannot be parsed or is invalid
        """
        return cls(UserSettings.load(config_path))
