"""
Core module - Foundation layer with no external dependencies.

Contains:
- Exceptions
- Interfaces
"""

from .exceptions import (
    SmartHomeError,
    DeviceError,
    CompositeCycleError,
)
from .interfaces import (
    DeviceKind,
    SmartDevice,
    SmartHomeFactory,
    ModernLockSystem,
)


__all__ = [
    # Exceptions
    "SmartHomeError",
    "DeviceError",
    "CompositeCycleError",
    # Interfaces
    "DeviceKind",
    "SmartDevice",
    "SmartHomeFactory",
    "ModernLockSystem",
]
