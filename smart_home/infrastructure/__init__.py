"""
Infrastructure layer - Configuration and external concerns.

Contains:
- Settings
"""

from .settings import (
    DemoSettings,
    LoggingSettings,
    LokiSettings,
    Settings,
    get_settings,
)


__all__ = [
    "DemoSettings",
    "LoggingSettings",
    "LokiSettings",
    "Settings",
    "get_settings",
]
