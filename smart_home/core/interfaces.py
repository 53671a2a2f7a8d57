"""
Interfaces for the smart home demo.

Defines the device contract shared by leaves, composites and decorators,
the abstract device factory, and the lock protocol targeted by adapters.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from enum import Enum, auto
from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from ..domain.devices import Light, Thermostat


# =============================================================================
# Enums
# =============================================================================


class DeviceKind(Enum):
    """Kinds of smart devices in the system."""

    LIGHT = auto()
    THERMOSTAT = auto()
    ROOM = auto()
    DECORATOR = auto()


# =============================================================================
# Device Interfaces
# =============================================================================


class SmartDevice(ABC):
    """
    Abstract base class for all smart devices.

    A device may be referenced by several containers at once; no
    container owns it exclusively.
    """

    @property
    @abstractmethod
    def kind(self) -> DeviceKind:
        """Get the device kind."""
        ...

    @property
    @abstractmethod
    def device_name(self) -> str:
        """Get a human-readable device name for logs and errors."""
        ...

    @abstractmethod
    def operate(self) -> None:
        """Operate the device, writing its output lines to stdout."""
        ...

    def children(self) -> tuple[SmartDevice, ...]:
        """
        Get the devices directly reachable from this one.

        Returns:
            Empty tuple for leaf devices.
        """
        return ()


class SmartHomeFactory(ABC):
    """Abstract factory for leaf devices."""

    @abstractmethod
    def create_light(self, name: str) -> Light:
        """
        Create a light.

        Args:
            name: Light name, used verbatim in its output.

        Returns:
            New Light instance.
        """
        ...

    @abstractmethod
    def create_thermostat(self, temperature: int) -> Thermostat:
        """
        Create a thermostat.

        Args:
            temperature: Target temperature in degrees.

        Returns:
            New Thermostat instance.
        """
        ...


# =============================================================================
# Lock Interfaces
# =============================================================================


@runtime_checkable
class ModernLockSystem(Protocol):
    """Protocol for locks exposing the modern interface."""

    def lock(self) -> None:
        """Lock the door."""
        ...
