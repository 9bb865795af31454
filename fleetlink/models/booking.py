# fleetlink/models/booking.py
"""
Bookings table, one row per live reservation of a vehicle.
Rows are inserted by booking_service.book_vehicle and hard-deleted on cancel.
For a fixed vehicle_id no two rows may overlap (see overlap_service).
"""

from datetime import datetime
from uuid import uuid4

from sqlalchemy import CheckConstraint, Column, DateTime, ForeignKey, Index, Integer, String
from sqlalchemy.orm import relationship
from fleetlink.database import Base


class Booking(Base):
    __tablename__ = "bookings"
    __table_args__ = (
        # Zero-hour rides are legal, so end may equal start
        CheckConstraint("end_time >= start_time", name="ck_bookings_end_after_start"),
        CheckConstraint(
            "estimated_ride_duration_hours >= 0 AND estimated_ride_duration_hours < 24",
            name="ck_bookings_duration_range",
        ),
        Index("ix_bookings_vehicle_window", "vehicle_id", "start_time", "end_time"),
    )

    id = Column(String(36), primary_key=True, default=lambda: str(uuid4()))
    vehicle_id = Column(String(36), ForeignKey("vehicles.id"), nullable=False)
    from_pincode = Column(String(6), nullable=False)
    to_pincode = Column(String(6), nullable=False)
    start_time = Column(DateTime, nullable=False)
    end_time = Column(DateTime, nullable=False)
    customer_id = Column(String(100), nullable=False, index=True)
    estimated_ride_duration_hours = Column(Integer, nullable=False)
    created_at = Column(DateTime, default=datetime.utcnow, nullable=False)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow, nullable=False)

    vehicle = relationship("Vehicle")

    def __repr__(self):
        return f"<Booking {self.id} vehicle={self.vehicle_id} {self.start_time}→{self.end_time}>"
