"""
Device factories.
"""

from ..core.interfaces import SmartHomeFactory
from ..loggers import logger
from .devices import Light, Thermostat


class BasicSmartHomeFactory(SmartHomeFactory):
    """Factory building plain lights and thermostats without validation."""

    def create_light(self, name: str) -> Light:
        logger.debug(f"Creating light {name!r}")
        return Light(name)

    def create_thermostat(self, temperature: int) -> Thermostat:
        logger.debug(f"Creating thermostat at {temperature}")
        return Thermostat(temperature)
