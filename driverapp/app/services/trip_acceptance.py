"""
Trip acceptance service.

Moves a trip from PENDING to COMPLETED and records which driver took it.
Both writes share one transaction.
"""

import logging

from sqlalchemy import select, update
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.exc import SQLAlchemyError

from driverapp.app.core.exceptions import ConflictError, ResourceNotFoundError
from driverapp.app.models.order_trip import OrderTrip
from driverapp.app.models.trip import Trip
from driverapp.app.models.trip_enums import TripStatus, OrderTripStatus

logger = logging.getLogger("driverapp.trips")

# Ids are int4 columns; anything outside this range cannot name a row
MAX_TRIP_ID = 2**31 - 1


async def accept_trip(
    db: AsyncSession,
    trip_id: int,
    driver_id: int
) -> OrderTrip:
    """
    Accept a pending trip on behalf of a driver.

    The status flip is a conditional UPDATE (``... WHERE status = 'pending'``),
    so of two drivers racing for the same trip exactly one wins and the
    other sees a conflict.

    Args:
        db: Database session
        trip_id: Trip to accept
        driver_id: Authenticated user accepting the trip

    Returns:
        The created order trip

    Raises:
        ResourceNotFoundError: If the trip does not exist
        ConflictError: If the trip is no longer pending
        SQLAlchemyError: On persistence failure; nothing is written
    """
    if not 1 <= trip_id <= MAX_TRIP_ID:
        raise ResourceNotFoundError("Trip")

    result = await db.execute(select(Trip.id).where(Trip.id == trip_id))
    if result.scalar_one_or_none() is None:
        raise ResourceNotFoundError("Trip")

    try:
        claimed = await db.execute(
            update(Trip)
            .where(Trip.id == trip_id, Trip.status == TripStatus.PENDING)
            .values(status=TripStatus.COMPLETED)
        )
        if claimed.rowcount != 1:
            await db.rollback()
            raise ConflictError("Trip already accepted")

        order_trip = OrderTrip(
            trip_id=trip_id,
            driver_id=driver_id,
            status=OrderTripStatus.ACCEPTED
        )
        db.add(order_trip)
        await db.flush()
        await db.refresh(order_trip)
        await db.commit()
    except SQLAlchemyError:
        await db.rollback()
        raise

    logger.info("Trip %s accepted by driver %s (order trip %s)", trip_id, driver_id, order_trip.id)
    return order_trip
