"""
Custom exceptions for the smart home demo.

Devices themselves never fail; the only guarded fault is a composite
that would end up containing itself.
"""

from typing import Any, Optional


class SmartHomeError(Exception):
    """Base exception for all smart home errors."""

    def __init__(
        self,
        message: str,
        code: Optional[str] = None,
        details: Optional[dict[str, Any]] = None,
    ) -> None:
        """
        Initialize the exception.

        Args:
            message: Human-readable error message.
            code: Optional error code for programmatic handling.
            details: Optional additional error details.
        """
        super().__init__(message)
        self.message = message
        self.code = code or self.__class__.__name__
        self.details = details or {}

    def to_dict(self) -> dict[str, Any]:
        """Convert exception to dictionary."""
        return {
            "error": self.code,
            "message": self.message,
            "details": self.details,
        }


# =============================================================================
# Device Errors
# =============================================================================


class DeviceError(SmartHomeError):
    """Base exception for device-related errors."""

    def __init__(
        self,
        message: str,
        device_name: Optional[str] = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(message, **kwargs)
        self.device_name = device_name
        if device_name:
            self.details["device"] = device_name


class CompositeCycleError(DeviceError):
    """Adding a device would make a room contain itself."""

    pass
