# fleetlink/routers/bookings.py
"""Booking endpoints: create, list and cancel."""

from uuid import UUID

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session
from fleetlink.config import settings
from fleetlink.database import get_db
from fleetlink.schemas.booking import BookingCreate, BookingOut
from fleetlink.schemas.response import ApiResponse, ok
from fleetlink.services import booking_service

router = APIRouter()


def _dump(booking) -> dict:
    return BookingOut.model_validate(booking).model_dump(by_alias=True, mode="json")


@router.post("/bookings", response_model=ApiResponse, status_code=status.HTTP_201_CREATED,
             summary="Book a vehicle")
def book_vehicle(body: BookingCreate, db: Session = Depends(get_db)):
    """404 if the vehicle does not exist, 409 if it is taken for the ride window."""
    booking = booking_service.book_vehicle(
        db, body.vehicle_id, body.from_pincode, body.to_pincode, body.start_time, body.customer_id
    )
    return ok(201, _dump(booking), "Booking created successfully")


@router.get("/bookings", response_model=ApiResponse, summary="List all bookings")
def list_bookings(db: Session = Depends(get_db)):
    bookings = [_dump(b) for b in booking_service.list_bookings(db)]
    message = "Bookings fetched successfully"
    if settings.LEGACY_BOOKINGS_ENVELOPE:
        # Old clients read the list from "message" and the text from "data"
        return ok(200, message, bookings)
    return ok(200, bookings, message)


@router.delete("/bookings/{booking_id}", response_model=ApiResponse, summary="Cancel a booking")
def cancel_booking(booking_id: UUID, db: Session = Depends(get_db)):
    booking = booking_service.cancel_booking(db, booking_id)
    return ok(200, _dump(booking), "Booking cancelled successfully")
