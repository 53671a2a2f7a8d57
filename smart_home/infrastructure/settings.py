"""
Application settings.

Typed, immutable configuration sections aggregated into a single
settings object served as a module-level singleton.
"""

from dataclasses import dataclass, field
from typing import Optional


# =============================================================================
# Configuration Classes
# =============================================================================


@dataclass(frozen=True)
class LoggingSettings:
    """Local logging settings."""

    level: str = "WARNING"
    log_file: Optional[str] = None
    max_bytes: int = 5 * 1024 * 1024
    backup_count: int = 3


@dataclass(frozen=True)
class LokiSettings:
    """Remote logging settings. Disabled while ``url`` is unset."""

    url: Optional[str] = None
    app: str = "smart_home"
    timeout: float = 2.0


@dataclass(frozen=True)
class DemoSettings:
    """Parameters of the demo scenario."""

    room_name: str = "Living Room"
    light_name: str = "Living Room"
    thermostat_temperature: int = 22


# =============================================================================
# Main Settings
# =============================================================================


@dataclass
class Settings:
    """
    Main application settings.

    Aggregates all configuration sections.
    """

    logging: LoggingSettings = field(default_factory=LoggingSettings)
    loki: LokiSettings = field(default_factory=LokiSettings)
    demo: DemoSettings = field(default_factory=DemoSettings)


# =============================================================================
# Settings Singleton
# =============================================================================


_settings: Settings | None = None


def get_settings() -> Settings:
    """
    Get application settings singleton.

    Returns:
        Settings instance.
    """
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings
