# fleetlink/schemas/booking.py
from typing import Optional
from uuid import UUID

from pydantic import BaseModel, Field
from pydantic.alias_generators import to_camel

from fleetlink.schemas.types import Pincode, UtcInstant, UtcTimestamp
from fleetlink.schemas.vehicle import VehicleOut


class BookingCreate(BaseModel):
    vehicle_id: UUID
    from_pincode: Pincode
    to_pincode: Pincode
    start_time: UtcInstant
    customer_id: str = Field(..., min_length=1, max_length=100)

    class Config:
        alias_generator = to_camel
        populate_by_name = True
        str_strip_whitespace = True


class BookingOut(BaseModel):
    id: str
    vehicle_id: str
    vehicle: Optional[VehicleOut] = None
    from_pincode: str
    to_pincode: str
    start_time: UtcTimestamp
    end_time: UtcTimestamp
    customer_id: str
    estimated_ride_duration_hours: int
    created_at: UtcTimestamp
    updated_at: UtcTimestamp

    class Config:
        alias_generator = to_camel
        populate_by_name = True
        from_attributes = True
