"""
Enumeration types for the type tour.
"""

from enum import Enum


class Color(Enum):
    """String-valued colors."""
    RED = "RED"
    GREEN = "GREEN"
    BLUE = "BLUE"


class Direction(Enum):
    """Numeric directions, starting at 1."""
    UP = 1
    DOWN = 2
    LEFT = 3
    RIGHT = 4


class Status(Enum):
    """Lifecycle of a tracked job."""
    PENDING = "pending"
    COMPLETED = "completed"
    FAILED = "failed"


class Role(Enum):
    """Roles an admin account can hold."""
    ADMIN = "admin"
    SUPERADMIN = "superadmin"
    RECEPTIONIST = "Receptionist"
