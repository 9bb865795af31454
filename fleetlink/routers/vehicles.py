# fleetlink/routers/vehicles.py
"""Fleet endpoints: registration, fleet listing and the availability search."""

from typing import Annotated

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session
from fleetlink.database import get_db
from fleetlink.schemas.response import ApiResponse, ok
from fleetlink.schemas.types import Pincode, UtcInstant
from fleetlink.schemas.vehicle import VehicleCreate, VehicleOut
from fleetlink.services import vehicle_service

router = APIRouter()


def _dump(vehicle) -> dict:
    return VehicleOut.model_validate(vehicle).model_dump(by_alias=True, mode="json")


@router.post("/vehicles", response_model=ApiResponse, status_code=status.HTTP_201_CREATED,
             summary="Register a new vehicle")
def add_vehicle(body: VehicleCreate, db: Session = Depends(get_db)):
    vehicle = vehicle_service.register_vehicle(db, body.name, body.capacity_kg, body.tyres)
    return ok(201, _dump(vehicle), "Vehicle created successfully")


@router.get("/vehicles", response_model=ApiResponse, summary="List the fleet")
def list_vehicles(db: Session = Depends(get_db)):
    vehicles = vehicle_service.list_vehicles(db)
    return ok(200, [_dump(v) for v in vehicles], "Vehicles fetched successfully")


@router.get("/vehicles/available", response_model=ApiResponse,
            summary="Vehicles free for a ride starting at startTime")
def get_available_vehicles(
    capacity_required: Annotated[int, Query(alias="capacityRequired", ge=0)],
    from_pincode: Annotated[Pincode, Query(alias="fromPincode")],
    to_pincode: Annotated[Pincode, Query(alias="toPincode")],
    start_time: Annotated[UtcInstant, Query(alias="startTime")],
    db: Session = Depends(get_db),
):
    """
    Vehicles with at least capacityRequired kg and no booking overlapping
    [startTime, startTime + estimated duration). Each carries estimatedRideDurationHours.
    """
    available = vehicle_service.find_available_vehicles(
        db, capacity_required, from_pincode, to_pincode, start_time
    )
    data = [{**_dump(vehicle), "estimatedRideDurationHours": hours} for vehicle, hours in available]
    return ok(200, data, "Available vehicles fetched successfully")
