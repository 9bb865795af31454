"""Shared fixtures: in-memory SQLite store, session, API client."""

import sys
import os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

# Keep the module-level engine off the real database
os.environ.setdefault("DATABASE_URL", "sqlite://")

import pytest
from datetime import datetime
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from fleetlink.database import create_tables, get_db
from fleetlink.main import app
from fleetlink.models.booking import Booking
from fleetlink.models.vehicle import Vehicle


@pytest.fixture
def engine():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    create_tables(bind=engine)
    yield engine
    engine.dispose()


@pytest.fixture
def session_factory(engine):
    return sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture
def db(session_factory):
    session = session_factory()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def client(session_factory):
    def override_get_db():
        session = session_factory()
        try:
            yield session
        finally:
            session.close()

    app.dependency_overrides[get_db] = override_get_db
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def vehicle(db):
    truck = Vehicle(name="Test Truck", capacity_kg=1000, tyres=6)
    db.add(truck)
    db.commit()
    db.refresh(truck)
    return truck


@pytest.fixture
def add_booking(db):
    """Insert a booking row directly, bypassing the overlap check."""
    def _add(vehicle_id, start, end, customer_id="customer1"):
        booking = Booking(
            vehicle_id=vehicle_id,
            from_pincode="110001",
            to_pincode="110002",
            start_time=start,
            end_time=end,
            customer_id=customer_id,
            estimated_ride_duration_hours=int((end - start).total_seconds() // 3600),
        )
        db.add(booking)
        db.commit()
        db.refresh(booking)
        return booking
    return _add


def at(hour, minute=0):
    """2023-10-27 at the given UTC hour (naive, as stored)."""
    return datetime(2023, 10, 27, hour, minute)
