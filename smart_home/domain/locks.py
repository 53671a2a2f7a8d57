"""
Lock Adapters - Modern lock interface over legacy hardware.

Wraps the legacy door lock, whose method names predate the
ModernLockSystem protocol, so it can be used wherever a modern lock
is expected.
"""

from ..configs import LEGACY_LOCK_MESSAGE
from ..core.interfaces import ModernLockSystem
from ..loggers import logger


class LegacyDoorLock:
    """Door lock with the legacy interface."""

    def old_lock_method(self) -> None:
        """Lock the door."""
        print(LEGACY_LOCK_MESSAGE)


class LockAdapter(ModernLockSystem):
    """
    Adapter exposing a legacy door lock as a ModernLockSystem.

    No data is translated: ``lock`` forwards to ``old_lock_method``.
    """

    def __init__(self, legacy_lock: LegacyDoorLock) -> None:
        """
        Initialize the adapter.

        Args:
            legacy_lock: The underlying legacy lock.
        """
        self._legacy_lock = legacy_lock

    @property
    def legacy_lock(self) -> LegacyDoorLock:
        """Get the adapted legacy lock."""
        return self._legacy_lock

    def lock(self) -> None:
        """Lock the door through the legacy lock."""
        logger.debug("Forwarding lock() to legacy door lock")
        self._legacy_lock.old_lock_method()
