"""
Database seeding for the fixed user roles.

Runs at application startup, before requests are served. Can also be run
directly after the database is set up.
"""

import asyncio
import logging

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from driverapp.app.models.enums import SEED_ROLES
from driverapp.app.models.user_role import UserRole

logger = logging.getLogger("driverapp.db")


async def ensure_roles(db: AsyncSession) -> list[UserRole]:
    """
    Find or create every seed role, in seed order.

    Idempotent: existing rows are left alone and nothing is committed
    when all roles are already present.

    Returns:
        The role rows, in seed order
    """
    roles = []
    created = False

    for role_name in SEED_ROLES:
        result = await db.execute(
            select(UserRole).where(UserRole.role_name == role_name.value)
        )
        role = result.scalar_one_or_none()

        if role is None:
            role = UserRole(role_name=role_name.value)
            db.add(role)
            await db.flush()
            created = True
            logger.info("Created role %r (id=%s)", role.role_name, role.id)

        roles.append(role)

    if created:
        await db.commit()

    return roles


async def seed_roles():
    """Open a session on the configured database and seed the roles."""
    from driverapp.app.db.session import AsyncSessionLocal

    async with AsyncSessionLocal() as db:
        await ensure_roles(db)


def main():
    asyncio.run(seed_roles())


if __name__ == "__main__":
    main()
