"""Application settings management.

This package provides:
- UserSettings: User-configurable settings loaded from config.yaml
- ApplicationSettings: Internal application settings and defaults
"""

from batterywatch.settings.application import ApplicationSettings, AppPaths
from batterywatch.settings.user import AlertWindow, UserSettings

__all__ = ["AlertWindow", "AppPaths", "ApplicationSettings", "UserSettings"]
