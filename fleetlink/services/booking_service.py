# fleetlink/services/booking_service.py
"""
Booking transaction and cancellation.

How a booking is made:
  - vehicle must exist                                 → NotFoundError
  - ride window = start + |to - from| % 24 hours
  - overlap re-check and insert run under a per-vehicle lock
    (in-process vehicle_lock + SELECT ... FOR UPDATE on the vehicle row)
  - overlap found                                      → ConflictError
  - constraint violated on insert                      → ValidationError

The re-check after an availability search is not enough on its own: two
requests could both pass it before either inserts. Holding the vehicle lock
across check + insert closes that window.
"""

from datetime import datetime

from sqlalchemy.orm import Session, joinedload
from fleetlink.database import store_errors
from fleetlink.models.booking import Booking
from fleetlink.models.vehicle import Vehicle
from fleetlink.services.duration_service import ride_window
from fleetlink.services.overlap_service import has_overlap
from fleetlink.services.vehicle_service import get_vehicle
from fleetlink.utils.errors import ConflictError, NotFoundError
from fleetlink.utils.locks import vehicle_lock
from fleetlink.utils.logger import get_logger

logger = get_logger(__name__)


def book_vehicle(db: Session, vehicle_id, from_pincode: str, to_pincode: str,
                 start_time: datetime, customer_id: str) -> Booking:
    vehicle_id = str(vehicle_id)
    if get_vehicle(db, vehicle_id) is None:
        raise NotFoundError("Vehicle not found")

    hours, end_time = ride_window(from_pincode, to_pincode, start_time)

    with vehicle_lock(vehicle_id), store_errors(db, "book vehicle"):
        # Row lock serializes bookings of this vehicle across workers (no-op on SQLite)
        db.query(Vehicle).filter(Vehicle.id == vehicle_id).with_for_update().one()

        if has_overlap(db, vehicle_id, start_time, end_time):
            logger.warning(
                f"Conflict: vehicle {vehicle_id} already booked within "
                f"{start_time:%Y-%m-%d %H:%M}→{end_time:%Y-%m-%d %H:%M} (customer {customer_id})"
            )
            raise ConflictError()

        booking = Booking(
            vehicle_id=vehicle_id,
            from_pincode=from_pincode,
            to_pincode=to_pincode,
            start_time=start_time,
            end_time=end_time,
            customer_id=customer_id,
            estimated_ride_duration_hours=hours,
        )
        db.add(booking)
        db.commit()
        db.refresh(booking)

    logger.info(
        f"Booked vehicle {vehicle_id} for {customer_id}: "
        f"{start_time:%Y-%m-%d %H:%M} +{hours}h (booking {booking.id})"
    )
    return booking


def list_bookings(db: Session) -> list[Booking]:
    with store_errors(db, "list bookings"):
        return (
            db.query(Booking)
            .options(joinedload(Booking.vehicle))
            .order_by(Booking.start_time)
            .all()
        )


def cancel_booking(db: Session, booking_id) -> Booking:
    """Hard-delete a booking and return the removed record. The slot is free once this returns."""
    booking_id = str(booking_id)
    with store_errors(db, "cancel booking"):
        booking = (
            db.query(Booking)
            .options(joinedload(Booking.vehicle))
            .filter(Booking.id == booking_id)
            .first()
        )
        if booking is None:
            raise NotFoundError("Booking not found")
        db.delete(booking)
        db.commit()

    logger.info(f"Cancelled booking {booking_id} (vehicle {booking.vehicle_id})")
    return booking
