"""
Configuration constants for the smart home demo.

This module holds the fixed output messages printed by devices and the
log formatting shared by every handler.
"""

from typing import Final


# =============================================================================
# Device Output Messages
# =============================================================================

LIGHT_ON_MESSAGE: Final[str] = "{name} light is ON"
THERMOSTAT_SET_MESSAGE: Final[str] = "Thermostat set to {temperature} degrees"
ROOM_HEADER_MESSAGE: Final[str] = "Operating devices in room: {name}"
SCHEDULED_OPERATION_MESSAGE: Final[str] = "Scheduled operation initiated"
LEGACY_LOCK_MESSAGE: Final[str] = "Legacy door locked."


# =============================================================================
# Demo Banners
# =============================================================================

TURN_ON_BANNER: Final[str] = "Turning on all devices:"
ADAPTED_LOCK_BANNER: Final[str] = "Using adapted lock:"


# =============================================================================
# Logging Format
# =============================================================================

DEFAULT_LOG_FORMAT: Final[str] = (
    "%(name)s | %(asctime)s | %(levelname)s | %(funcName)s:%(lineno)d | %(message)s"
)
DEFAULT_DATE_FORMAT: Final[str] = "%Y-%m-%d %H:%M:%S"

LOG_COLORS: Final[dict[str, str]] = {
    "DEBUG": "cyan",
    "INFO": "green",
    "WARNING": "yellow",
    "ERROR": "red",
    "CRITICAL": "bold_red",
}
