# app/models/car.py
"""
Car listings. Each car belongs to exactly one owner.
`is_available` is the listing switch (shown in the catalogue or not);
date-level availability is computed from bookings by availability_service.
"""

import uuid
from datetime import datetime
from sqlalchemy import (Column, Integer, String, DateTime, Text, Numeric, Boolean, JSON,
                        ForeignKey, CheckConstraint)
from sqlalchemy.orm import relationship
from app.database import Base
from app.models.enums import CarType, Transmission, FuelType, sql_in


class Car(Base):
    __tablename__ = "cars"

    id = Column(String(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    owner_id = Column(String(36), ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)
    brand = Column(String(100), nullable=False)
    model = Column(String(100), nullable=False)
    year = Column(Integer, nullable=False)
    registration_number = Column(String(50), unique=True, nullable=False)
    car_type = Column(String(50), nullable=False)
    transmission = Column(String(20), nullable=False)
    fuel_type = Column(String(20), nullable=False)
    seats = Column(Integer, nullable=False)
    price_per_day = Column(Numeric(10, 2), nullable=False)
    images = Column(JSON, nullable=False, default=list)
    features = Column(JSON)
    description = Column(Text)
    is_available = Column(Boolean, nullable=False, default=True)
    created_at = Column(DateTime, default=datetime.utcnow)
    updated_at = Column(DateTime, default=datetime.utcnow)

    owner = relationship("User", back_populates="cars")
    bookings = relationship("Booking", back_populates="car", cascade="all, delete-orphan")
    reviews = relationship("Review", back_populates="car", cascade="all, delete-orphan")

    __table_args__ = (
        CheckConstraint("price_per_day >= 0", name="car_price_non_negative"),
        CheckConstraint(f"car_type IN ({sql_in(CarType)})", name="car_type_check"),
        CheckConstraint(f"transmission IN ({sql_in(Transmission)})", name="car_transmission_check"),
        CheckConstraint(f"fuel_type IN ({sql_in(FuelType)})", name="car_fuel_type_check"),
    )

    def __repr__(self):
        return f"<Car {self.registration_number} {self.brand} {self.model}>"
