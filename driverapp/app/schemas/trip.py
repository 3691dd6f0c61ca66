"""
Pydantic schemas for trips and trip acceptance.
"""

from pydantic import BaseModel, ConfigDict, Field
from datetime import datetime
from driverapp.app.models.trip_enums import TripStatus, OrderTripStatus


class TripCreate(BaseModel):
    """Request schema for creating a trip."""
    start_location: str = Field(..., description="Free-form pickup location")
    end_location: str = Field(..., description="Free-form drop-off location")


class TripResponse(BaseModel):
    """Response schema for a trip."""
    model_config = ConfigDict(from_attributes=True)

    id: int
    start_location: str
    end_location: str
    user_id: int
    status: TripStatus
    created_at: datetime
    updated_at: datetime


class TripCreateResponse(BaseModel):
    message: str
    trip: TripResponse


class TripAccept(BaseModel):
    """Request schema for accepting a trip."""
    tripId: int = Field(..., description="ID of the trip to accept")


class OrderTripResponse(BaseModel):
    """Response schema for a driver's acceptance record."""
    model_config = ConfigDict(from_attributes=True)

    id: int
    trip_id: int
    driver_id: int
    status: OrderTripStatus
    created_at: datetime
    updated_at: datetime


class TripAcceptResponse(BaseModel):
    message: str
    orderTrip: OrderTripResponse
