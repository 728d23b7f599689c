"""
Initialize database — creates all tables (and the booking overlap constraint on PostgreSQL).
Run once before first launch, or after adding new models.
Usage: python scripts/setup/init_db.py [--seed]
"""

import argparse
import sys
import os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), "..", ".."))

from decimal import Decimal
from sqlalchemy import inspect, text
from app.database import create_tables, engine, SessionLocal
from app.config import settings
from app.models.car import Car
from app.models.enums import UserRole
from app.models.user import User


def seed_demo_data():
    """One owner, one renter, one admin and two listed cars. Skips if users exist."""
    db = SessionLocal()
    try:
        if db.query(User).first():
            print("Users already present — skipping seed")
            return
        owner = User(email="owner@example.com", first_name="Olivia", last_name="Owner",
                     role=UserRole.OWNER.value)
        renter = User(email="renter@example.com", first_name="Ravi", last_name="Renter",
                      role=UserRole.USER.value)
        admin = User(email="admin@example.com", first_name="Ada", last_name="Admin",
                     role=UserRole.ADMIN.value)
        db.add_all([owner, renter, admin])
        db.flush()
        db.add_all([
            Car(owner_id=owner.id, brand="Maruti", model="Swift", year=2022,
                registration_number="KA01AB1234", car_type="Hatchback", transmission="Manual",
                fuel_type="Petrol", seats=5, price_per_day=Decimal("1500.00"),
                images=["https://example.com/swift.jpg"], features=["AC", "Bluetooth"]),
            Car(owner_id=owner.id, brand="Hyundai", model="Creta", year=2023,
                registration_number="KA01CD5678", car_type="SUV", transmission="Automatic",
                fuel_type="Diesel", seats=5, price_per_day=Decimal("3200.00"),
                images=["https://example.com/creta.jpg"], features=["AC", "GPS"]),
        ])
        db.commit()
        print(f"Seeded users: owner={owner.id} renter={renter.id} admin={admin.id}")
    finally:
        db.close()


def main():
    parser = argparse.ArgumentParser(description="Create car rental tables")
    parser.add_argument("--seed", action="store_true", help="Insert demo users and cars")
    args = parser.parse_args()

    print("Car Rental DB Initialization")
    print("=" * 40)
    print(f"Database: {engine.url.render_as_string(hide_password=True)}")

    try:
        with engine.connect() as conn:
            conn.execute(text("SELECT 1"))
        print("Database connection OK")
    except Exception as e:
        print(f"Cannot connect to database: {e}")
        print("\nMake sure PostgreSQL is running and DATABASE_URL is set.")
        sys.exit(1)

    print("\nCreating tables...")
    create_tables()

    tables = sorted(inspect(engine).get_table_names())
    print(f"\nTables in database ({len(tables)} total):")
    for t in tables:
        print(f"   - {t}")

    if args.seed:
        seed_demo_data()

    print("\nDatabase ready! You can now start the backend:")
    print(f"   uvicorn app.main:app --host {settings.BACKEND_IP} --port {settings.BACKEND_PORT} --reload")


if __name__ == "__main__":
    main()
