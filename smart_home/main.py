"""
Smart Home Demo - Main entry point.

Builds a small device graph with the factory, composite, decorator,
facade and adapter, then operates it. Output is identical on every run.
"""

import sys

from .application.controller import SmartHomeController
from .configs import ADAPTED_LOCK_BANNER, TURN_ON_BANNER
from .core.interfaces import ModernLockSystem, SmartDevice, SmartHomeFactory
from .domain.decorators import ScheduledOperationDecorator
from .domain.factory import BasicSmartHomeFactory
from .domain.locks import LegacyDoorLock, LockAdapter
from .domain.room import Room
from .infrastructure.settings import get_settings
from .loggers import logger


# =============================================================================
# Demo Scenario
# =============================================================================


def run_demo() -> None:
    """
    Run the demo scenario once.

    Every call builds a fresh object graph, so the demo can be run
    repeatedly in the same process.
    """
    demo = get_settings().demo
    factory: SmartHomeFactory = BasicSmartHomeFactory()

    living_room = Room(demo.room_name)
    living_room_light = factory.create_light(demo.light_name)
    living_room_thermostat = factory.create_thermostat(demo.thermostat_temperature)

    living_room.add_device(living_room_light)
    living_room.add_device(living_room_thermostat)

    scheduled_light: SmartDevice = ScheduledOperationDecorator(living_room_light)

    controller = SmartHomeController()
    controller.add_device(living_room)
    controller.add_device(scheduled_light)

    print(TURN_ON_BANNER)
    controller.turn_all_devices_on()

    old_lock = LegacyDoorLock()
    adapted_lock: ModernLockSystem = LockAdapter(old_lock)
    print(ADAPTED_LOCK_BANNER)
    adapted_lock.lock()


# =============================================================================
# Main Entry Point
# =============================================================================


def main() -> int:
    """
    Main entry point for the smart home demo.

    Command-line arguments are ignored.

    Returns:
        Process exit status.
    """
    logger.info("Starting smart home demo")
    try:
        run_demo()
    except KeyboardInterrupt:
        logger.info("Demo stopped by user")
    return 0


if __name__ == "__main__":
    sys.exit(main())
