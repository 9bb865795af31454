# fleetlink/models/vehicle.py
"""
Registered vehicles table (the fleet).
Created by vehicle_service.register_vehicle, never deleted.
Queried by capacity in the availability search.
"""

from datetime import datetime
from uuid import uuid4

from sqlalchemy import CheckConstraint, Column, DateTime, Integer, String
from fleetlink.database import Base


class Vehicle(Base):
    __tablename__ = "vehicles"
    __table_args__ = (
        CheckConstraint("capacity_kg > 0", name="ck_vehicles_capacity_positive"),
        CheckConstraint("tyres >= 0", name="ck_vehicles_tyres_non_negative"),
    )

    id = Column(String(36), primary_key=True, default=lambda: str(uuid4()))
    name = Column(String(100), nullable=False)
    capacity_kg = Column(Integer, nullable=False, index=True)
    tyres = Column(Integer, nullable=False)
    created_at = Column(DateTime, default=datetime.utcnow, nullable=False)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow, nullable=False)

    def __repr__(self):
        return f"<Vehicle {self.id} name={self.name} capacity={self.capacity_kg}kg>"
