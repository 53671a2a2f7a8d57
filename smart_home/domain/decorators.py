"""
Device decorators.

A decorator is a device wrapping exactly one other device. It adds its
own behaviour and then delegates to the wrapped device. Decorators stack,
since a decorated device is itself a device.
"""

from abc import abstractmethod

from ..configs import SCHEDULED_OPERATION_MESSAGE
from ..core.interfaces import DeviceKind, SmartDevice
from ..loggers import logger


# =============================================================================
# Base Decorator
# =============================================================================


class DeviceDecorator(SmartDevice):
    """
    Base class for device decorators.

    The wrapped device is fixed for the decorator's lifetime.
    """

    def __init__(self, device: SmartDevice) -> None:
        """
        Initialize the decorator.

        Args:
            device: Device to wrap.
        """
        self._wrapped = device

    @property
    def kind(self) -> DeviceKind:
        return DeviceKind.DECORATOR

    @property
    def wrapped(self) -> SmartDevice:
        """Get the wrapped device."""
        return self._wrapped

    @property
    def device_name(self) -> str:
        return self._wrapped.device_name

    def children(self) -> tuple[SmartDevice, ...]:
        return (self._wrapped,)

    @abstractmethod
    def operate(self) -> None:
        """Add the decorator behaviour, then operate the wrapped device."""
        self._wrapped.operate()


# =============================================================================
# Scheduled Operation
# =============================================================================


class ScheduledOperationDecorator(DeviceDecorator):
    """Announces a scheduled operation before operating the wrapped device."""

    @property
    def device_name(self) -> str:
        return f"scheduled {self._wrapped.device_name}"

    def operate(self) -> None:
        logger.debug(f"Running {self.device_name}")
        print(SCHEDULED_OPERATION_MESSAGE)
        super().operate()

    def __repr__(self) -> str:
        return f"ScheduledOperationDecorator({self._wrapped!r})"
