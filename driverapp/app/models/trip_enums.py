"""
Trip-related enumerations.
"""

import enum


class TripStatus(str, enum.Enum):
    """Trip status enumeration."""
    PENDING = "pending"  # Waiting for a driver
    COMPLETED = "completed"  # A driver accepted it


class OrderTripStatus(str, enum.Enum):
    """Order trip status enumeration. Set once when a driver accepts."""
    ACCEPTED = "accepted"


def enum_values(enum_cls):
    """Persist enum values ("pending") instead of member names ("PENDING")."""
    return [member.value for member in enum_cls]
