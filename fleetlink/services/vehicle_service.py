# fleetlink/services/vehicle_service.py
"""
Fleet registration and the availability search.
Used by the vehicles router and by booking_service for vehicle lookup.
"""

from datetime import datetime
from typing import Optional

from sqlalchemy.orm import Session
from fleetlink.database import store_errors
from fleetlink.models.vehicle import Vehicle
from fleetlink.schemas.types import MAX_DB_INT
from fleetlink.services.duration_service import ride_window
from fleetlink.services.overlap_service import has_overlap
from fleetlink.utils.logger import get_logger

logger = get_logger(__name__)


def register_vehicle(db: Session, name: str, capacity_kg: int, tyres: int) -> Vehicle:
    vehicle = Vehicle(name=name, capacity_kg=capacity_kg, tyres=tyres)
    with store_errors(db, "register vehicle"):
        db.add(vehicle)
        db.commit()
        db.refresh(vehicle)
    logger.info(f"Registered vehicle {vehicle.id} '{name}' ({capacity_kg}kg, {tyres} tyres)")
    return vehicle


def get_vehicle(db: Session, vehicle_id: str) -> Optional[Vehicle]:
    """Find a vehicle by id. Returns None if not found."""
    with store_errors(db, "lookup vehicle"):
        return db.query(Vehicle).filter(Vehicle.id == vehicle_id).first()


def list_vehicles(db: Session) -> list[Vehicle]:
    with store_errors(db, "list vehicles"):
        return db.query(Vehicle).order_by(Vehicle.created_at).all()


def find_available_vehicles(db: Session, capacity_required: int, from_pincode: str,
                            to_pincode: str, start_time: datetime) -> list[tuple[Vehicle, int]]:
    """
    Vehicles with capacity_kg >= capacity_required and no booking overlapping
    the ride window, each paired with the estimated ride duration in hours.
    Returns an empty list when nothing qualifies. Order is not guaranteed.
    """
    hours, end_time = ride_window(from_pincode, to_pincode, start_time)

    if capacity_required > MAX_DB_INT:
        # No stored capacity can reach it
        return []

    with store_errors(db, "availability search"):
        candidates = db.query(Vehicle).filter(Vehicle.capacity_kg >= capacity_required).all()
        available = [
            (vehicle, hours)
            for vehicle in candidates
            if not has_overlap(db, vehicle.id, start_time, end_time)
        ]

    logger.debug(
        f"Availability {from_pincode}→{to_pincode} @ {start_time:%Y-%m-%d %H:%M} "
        f"(≥{capacity_required}kg, {hours}h): {len(available)}/{len(candidates)} free"
    )
    return available
