"""
Application layer - Facades over the domain.

Contains:
- Smart home controller
"""

from .controller import SmartHomeController


__all__ = [
    "SmartHomeController",
]
