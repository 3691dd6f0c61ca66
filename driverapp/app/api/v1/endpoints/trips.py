"""
Trip API endpoints.

Riders create and list their trips; drivers browse pending trips and
accept one. Every route here requires a bearer token.
"""

import logging
from typing import List

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError

from driverapp.app.db.session import get_db
from driverapp.app.models.trip import Trip
from driverapp.app.models.trip_enums import TripStatus
from driverapp.app.schemas.trip import (
    TripCreate,
    TripResponse,
    TripCreateResponse,
    TripAccept,
    TripAcceptResponse,
    OrderTripResponse,
)
from driverapp.app.core.dependencies import get_current_user
from driverapp.app.core.exceptions import AppException
from driverapp.app.services.trip_acceptance import accept_trip as accept_trip_service

router = APIRouter(tags=["Trip"])
logger = logging.getLogger("driverapp.trips")


@router.post("/trips", response_model=TripCreateResponse)
async def create_trip(
    trip_data: TripCreate,
    current_user: dict = Depends(get_current_user),
    db: AsyncSession = Depends(get_db)
):
    """
    Create a trip for the authenticated user.

    ``user_id`` always comes from the token.
    """
    try:
        trip = Trip(
            start_location=trip_data.start_location,
            end_location=trip_data.end_location,
            user_id=current_user["userId"],
            status=TripStatus.PENDING
        )
        db.add(trip)
        await db.commit()
        await db.refresh(trip)
    except SQLAlchemyError:
        await db.rollback()
        logger.exception("Failed to create trip for user %s", current_user["userId"])
        raise AppException("Failed to create trip")

    return TripCreateResponse(
        message="Trip created successfully",
        trip=TripResponse.model_validate(trip)
    )


@router.get("/trips", response_model=List[TripResponse])
async def list_my_trips(
    current_user: dict = Depends(get_current_user),
    db: AsyncSession = Depends(get_db)
):
    """List trips created by the authenticated user."""
    try:
        result = await db.execute(
            select(Trip)
            .where(Trip.user_id == current_user["userId"])
            .order_by(Trip.id)
        )
        return result.scalars().all()
    except SQLAlchemyError:
        logger.exception("Failed to fetch trips for user %s", current_user["userId"])
        raise AppException("Failed to fetch trips")


@router.get("/available-trips", response_model=List[TripResponse])
async def list_available_trips(
    current_user: dict = Depends(get_current_user),
    db: AsyncSession = Depends(get_db)
):
    """List every pending trip, regardless of who created it."""
    try:
        result = await db.execute(
            select(Trip)
            .where(Trip.status == TripStatus.PENDING)
            .order_by(Trip.id)
        )
        return result.scalars().all()
    except SQLAlchemyError:
        logger.exception("Failed to fetch available trips")
        raise AppException("Failed to fetch available trips")


@router.post("/accept-trip", response_model=TripAcceptResponse)
async def accept_trip(
    payload: TripAccept,
    current_user: dict = Depends(get_current_user),
    db: AsyncSession = Depends(get_db)
):
    """
    Accept a pending trip as the authenticated driver.

    Returns 404 if the trip does not exist and 409 if it was already accepted.
    """
    try:
        order_trip = await accept_trip_service(db, payload.tripId, current_user["userId"])
    except SQLAlchemyError:
        logger.exception("Failed to accept trip %s", payload.tripId)
        raise AppException("Failed to accept trip")

    return TripAcceptResponse(
        message="Trip accepted successfully",
        orderTrip=OrderTripResponse.model_validate(order_trip)
    )
