"""Shared fixtures: in-memory SQLite database and a TestClient wired to it."""

import sys
import os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

os.environ.setdefault("DATABASE_URL", "sqlite://")
os.environ.setdefault("LOG_TO_FILE", "false")

from decimal import Decimal

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from app.database import create_tables, get_db
from app.models.car import Car
from app.models.user import User


@pytest.fixture
def session_factory():
    engine = create_engine("sqlite://", connect_args={"check_same_thread": False}, poolclass=StaticPool)
    create_tables(bind=engine)
    yield sessionmaker(bind=engine, autocommit=False, autoflush=False)
    engine.dispose()


@pytest.fixture
def db(session_factory):
    session = session_factory()
    yield session
    session.close()


@pytest.fixture
def client(session_factory):
    from app.main import app

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
def users(db):
    """owner, second owner, renter, admin — committed, keyed by role-ish name."""
    people = {
        "owner": User(id="owner-1", email="owner@example.com", role="owner"),
        "other_owner": User(id="owner-2", email="owner2@example.com", role="owner"),
        "renter": User(id="renter-1", email="renter@example.com", role="user"),
        "admin": User(id="admin-1", email="admin@example.com", role="admin"),
    }
    db.add_all(people.values())
    db.commit()
    return {name: u.id for name, u in people.items()}


@pytest.fixture
def make_car(db):
    def _make_car(owner_id, registration="KA01AB1234", **overrides):
        fields = dict(
            owner_id=owner_id, brand="Maruti", model="Swift", year=2022,
            registration_number=registration, car_type="Hatchback", transmission="Manual",
            fuel_type="Petrol", seats=5, price_per_day=Decimal("1500.00"),
            images=["https://example.com/swift.jpg"],
        )
        fields.update(overrides)
        car = Car(**fields)
        db.add(car)
        db.commit()
        return car.id
    return _make_car
