"""
Domain layer - Smart devices and their composition.

Contains:
- Leaf devices
- Room composite
- Device decorators
- Device factory
- Lock adapter
"""

from .devices import (
    Light,
    Thermostat,
)
from .room import Room
from .decorators import (
    DeviceDecorator,
    ScheduledOperationDecorator,
)
from .factory import BasicSmartHomeFactory
from .locks import (
    LegacyDoorLock,
    LockAdapter,
)


__all__ = [
    # Devices
    "Light",
    "Thermostat",
    "Room",
    # Decorators
    "DeviceDecorator",
    "ScheduledOperationDecorator",
    # Factory
    "BasicSmartHomeFactory",
    # Locks
    "LegacyDoorLock",
    "LockAdapter",
]
