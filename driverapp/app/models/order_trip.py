"""
Order trip database model.

Records a driver's acceptance of a trip.
"""

from sqlalchemy import Column, Integer, ForeignKey, DateTime, Enum
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func
from driverapp.app.db.session import Base
from driverapp.app.models.trip_enums import OrderTripStatus, enum_values


class OrderTrip(Base):
    """
    Acceptance record linking a trip to the driver who took it.

    Immutable once written; ``status`` stays ACCEPTED.
    """
    __tablename__ = "ordertrips"

    id = Column(Integer, primary_key=True, index=True, autoincrement=True)

    trip_id = Column(Integer, ForeignKey("trips.id"), nullable=False, index=True)
    driver_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)

    status = Column(
        Enum(OrderTripStatus, name="order_trip_status", values_callable=enum_values),
        default=OrderTripStatus.ACCEPTED,
        nullable=False,
    )

    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now(), nullable=False)

    trip = relationship("Trip", lazy="raise")
    driver = relationship("User", lazy="raise")

    def __repr__(self):
        return f"<OrderTrip(id={self.id}, trip_id={self.trip_id}, driver_id={self.driver_id})>"
