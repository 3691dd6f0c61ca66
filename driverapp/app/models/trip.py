"""
Trip database model.

Trips are ride requests created by riders and accepted by drivers.
"""

from sqlalchemy import Column, Integer, String, ForeignKey, DateTime, Enum
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func
from driverapp.app.db.session import Base
from driverapp.app.models.trip_enums import TripStatus, enum_values


class Trip(Base):
    """
    Trip model.

    Created as PENDING by the requesting user and moved to COMPLETED
    exactly once, when a driver accepts it.
    """
    __tablename__ = "trips"

    id = Column(Integer, primary_key=True, index=True, autoincrement=True)

    start_location = Column(String(255), nullable=False)
    end_location = Column(String(255), nullable=False)

    # Ownership - Trip belongs to the requesting user
    user_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)

    # Status
    status = Column(
        Enum(TripStatus, name="trip_status", values_callable=enum_values),
        default=TripStatus.PENDING,
        nullable=False,
        index=True,
    )

    # Timestamps
    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now(), nullable=False)

    user = relationship("User", lazy="raise")

    def __repr__(self):
        return f"<Trip(id={self.id}, user_id={self.user_id}, status='{self.status.value}')>"
