"""
Core services for the application.

This package contains snapshot loading and alert generation.
"""

from .alerts import OUTSIDE_RANGE_ALERT, alert_if_outside_range, check_rooms
from .snapshots import Result, load_room, load_rooms

__all__ = [
    "OUTSIDE_RANGE_ALERT",
    "Result",
    "alert_if_outside_range",
    "check_rooms",
    "load_room",
    "load_rooms",
]
