"""
Smart home demo built from composable devices.

Rooms group devices, decorators wrap them, a factory builds them, a
controller operates them all, and an adapter fits a legacy lock to the
modern lock interface.
"""

from .application import SmartHomeController
from .core import (
    CompositeCycleError,
    DeviceError,
    DeviceKind,
    ModernLockSystem,
    SmartDevice,
    SmartHomeError,
    SmartHomeFactory,
)
from .domain import (
    BasicSmartHomeFactory,
    DeviceDecorator,
    LegacyDoorLock,
    Light,
    LockAdapter,
    Room,
    ScheduledOperationDecorator,
    Thermostat,
)


__all__ = [
    "SmartHomeController",
    "CompositeCycleError",
    "DeviceError",
    "DeviceKind",
    "ModernLockSystem",
    "SmartDevice",
    "SmartHomeError",
    "SmartHomeFactory",
    "BasicSmartHomeFactory",
    "DeviceDecorator",
    "LegacyDoorLock",
    "Light",
    "LockAdapter",
    "Room",
    "ScheduledOperationDecorator",
    "Thermostat",
]
