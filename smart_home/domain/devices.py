"""
Leaf devices - lights and thermostats.
"""

from ..configs import LIGHT_ON_MESSAGE, THERMOSTAT_SET_MESSAGE
from ..core.interfaces import DeviceKind, SmartDevice
from ..loggers import logger


class Light(SmartDevice):
    """A named light. Operating it switches it on."""

    def __init__(self, name: str) -> None:
        self._name = name

    @property
    def kind(self) -> DeviceKind:
        return DeviceKind.LIGHT

    @property
    def name(self) -> str:
        """Get the light name."""
        return self._name

    @property
    def device_name(self) -> str:
        return f"{self._name} light"

    def operate(self) -> None:
        logger.debug(f"Operating {self.device_name}")
        print(LIGHT_ON_MESSAGE.format(name=self._name))

    def __repr__(self) -> str:
        return f"Light(name={self._name!r})"


class Thermostat(SmartDevice):
    """A thermostat with a fixed target temperature."""

    def __init__(self, temperature: int) -> None:
        self._temperature = temperature

    @property
    def kind(self) -> DeviceKind:
        return DeviceKind.THERMOSTAT

    @property
    def temperature(self) -> int:
        """Get the target temperature in degrees."""
        return self._temperature

    @property
    def device_name(self) -> str:
        return "thermostat"

    def operate(self) -> None:
        logger.debug(f"Operating thermostat at {self._temperature}")
        print(THERMOSTAT_SET_MESSAGE.format(temperature=self._temperature))

    def __repr__(self) -> str:
        return f"Thermostat(temperature={self._temperature!r})"
