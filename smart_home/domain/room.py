"""
Room - Composite device.

A room is itself a device holding an ordered list of child devices,
which may be leaves, decorated devices or other rooms.
"""

from __future__ import annotations

from typing import Iterator

from ..configs import ROOM_HEADER_MESSAGE
from ..core.exceptions import CompositeCycleError
from ..core.interfaces import DeviceKind, SmartDevice
from ..loggers import logger


class Room(SmartDevice):
    """
    Composite device grouping other devices.

    Children are operated in insertion order. The same device may be
    added more than once and is then operated once per entry.
    """

    def __init__(self, name: str) -> None:
        """
        Initialize an empty room.

        Args:
            name: Room name, printed in the room header.
        """
        self._name = name
        self._devices: list[SmartDevice] = []

    @property
    def kind(self) -> DeviceKind:
        return DeviceKind.ROOM

    @property
    def name(self) -> str:
        """Get the room name."""
        return self._name

    @property
    def device_name(self) -> str:
        return f"room {self._name}"

    @property
    def devices(self) -> tuple[SmartDevice, ...]:
        """Get a snapshot of the child devices in insertion order."""
        return tuple(self._devices)

    def children(self) -> tuple[SmartDevice, ...]:
        return self.devices

    def add_device(self, device: SmartDevice) -> None:
        """
        Append a device to the room.

        Args:
            device: Device to add.

        Raises:
            CompositeCycleError: If the room is reachable from ``device``,
                which would make the room contain itself.
        """
        if self._reachable_from(device):
            raise CompositeCycleError(
                f"Cannot add {device.device_name} to {self.device_name}: "
                f"the room would contain itself",
                device_name=self.device_name,
            )

        self._devices.append(device)
        logger.debug(f"Added {device.device_name} to {self.device_name}")

    def _reachable_from(self, device: SmartDevice) -> bool:
        """Check if this room is ``device`` or one of its descendants."""
        pending = [device]
        seen: set[int] = set()
        while pending:
            current = pending.pop()
            if current is self:
                return True
            if id(current) in seen:
                continue
            seen.add(id(current))
            pending.extend(current.children())
        return False

    def operate(self) -> None:
        logger.debug(f"Operating {len(self._devices)} device(s) in {self.device_name}")
        print(ROOM_HEADER_MESSAGE.format(name=self._name))
        for device in self._devices:
            device.operate()

    def __iter__(self) -> Iterator[SmartDevice]:
        return iter(self.devices)

    def __len__(self) -> int:
        return len(self._devices)

    def __repr__(self) -> str:
        return f"Room(name={self._name!r}, devices={len(self._devices)})"
