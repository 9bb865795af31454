# fleetlink/schemas/vehicle.py
from pydantic import BaseModel, Field
from pydantic.alias_generators import to_camel

from fleetlink.schemas.types import MAX_DB_INT, UtcTimestamp


class VehicleCreate(BaseModel):
    name: str = Field(..., min_length=1, max_length=100)
    capacity_kg: int = Field(..., gt=0, le=MAX_DB_INT)
    tyres: int = Field(..., ge=0, le=MAX_DB_INT)

    class Config:
        alias_generator = to_camel
        populate_by_name = True
        str_strip_whitespace = True


class VehicleOut(BaseModel):
    id: str
    name: str
    capacity_kg: int
    tyres: int
    created_at: UtcTimestamp
    updated_at: UtcTimestamp

    class Config:
        alias_generator = to_camel
        populate_by_name = True
        from_attributes = True
