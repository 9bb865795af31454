# fleetlink/services/overlap_service.py
"""
Booking overlap check for one vehicle and a candidate [start, end) window.

A stored booking R overlaps when any of these holds:
  1. R.start in [start, end)
  2. R.end   in (start, end]
  3. R covers the window: R.start <= start and R.end >= end
Clauses 1 and 2 are not mirror images of each other. Keep them as they are
until the intended boundary semantics are settled.
"""

from datetime import datetime
from typing import Optional

from sqlalchemy import and_, or_
from sqlalchemy.orm import Query, Session
from fleetlink.models.booking import Booking


def overlap_condition(start_time: datetime, end_time: datetime):
    return or_(
        and_(Booking.start_time < end_time, Booking.start_time >= start_time),
        and_(Booking.end_time > start_time, Booking.end_time <= end_time),
        and_(Booking.start_time <= start_time, Booking.end_time >= end_time),
    )


def overlapping_bookings(db: Session, vehicle_id: str, start_time: datetime, end_time: datetime,
                         exclude_booking_id: Optional[str] = None) -> Query:
    q = db.query(Booking).filter(
        Booking.vehicle_id == vehicle_id,
        overlap_condition(start_time, end_time),
    )
    if exclude_booking_id:
        q = q.filter(Booking.id != exclude_booking_id)
    return q


def has_overlap(db: Session, vehicle_id: str, start_time: datetime, end_time: datetime,
                exclude_booking_id: Optional[str] = None) -> bool:
    """True if any stored booking for vehicle_id overlaps the candidate window."""
    q = overlapping_bookings(db, vehicle_id, start_time, end_time, exclude_booking_id)
    return db.query(q.exists()).scalar()
