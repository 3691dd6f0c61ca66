"""
User roles enumeration.

Defines the role names seeded into the ``userroles`` table.
"""

import enum


class RoleName(str, enum.Enum):
    """
    Role name enumeration.

    Roles:
        USER: Rider who requests trips
        DRIVER: Accepts pending trips
    """
    USER = "user"
    DRIVER = "driver"


# Seed order matters: on a fresh database "user" gets id 1 and "driver" id 2
SEED_ROLES = (RoleName.USER, RoleName.DRIVER)
