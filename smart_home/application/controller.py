"""
Smart Home Controller - Facade over the device graph.

Collects rooms and devices and exposes a single bulk operation that
operates all of them.
"""

from __future__ import annotations

from ..core.interfaces import SmartDevice
from ..loggers import logger


class SmartHomeController:
    """
    Facade for operating a set of smart devices.

    Devices are operated in registration order. Registering the same
    device twice operates it twice.
    """

    def __init__(self) -> None:
        """Initialize the controller with no devices."""
        self._devices: list[SmartDevice] = []

    @property
    def devices(self) -> tuple[SmartDevice, ...]:
        """Get a snapshot of the registered devices in order."""
        return tuple(self._devices)

    def add_device(self, device: SmartDevice) -> None:
        """
        Register a device.

        Args:
            device: Device, room or decorated device to register.
        """
        self._devices.append(device)
        logger.debug(f"Registered device: {device.device_name} ({device.kind.name})")

    def turn_all_devices_on(self) -> None:
        """
        Operate every registered device in order.

        Exceptions raised by a device propagate unchanged; devices after
        it are not operated.
        """
        logger.info(f"Turning on {len(self._devices)} device(s)")
        for device in self._devices:
            device.operate()

    def __len__(self) -> int:
        """Get number of registered devices."""
        return len(self._devices)
