# app/schemas/car.py
from pydantic import BaseModel, Field, model_validator
from datetime import date, datetime
from decimal import Decimal
from typing import Optional
from app.models.enums import CarType, Transmission, FuelType
from app.schemas.review import ReviewWithUserOut
from app.schemas.user import UserOut


class CarCreate(BaseModel):
    brand: str = Field(min_length=1, max_length=100)
    model: str = Field(min_length=1, max_length=100)
    year: int = Field(ge=1900, le=2100)
    registration_number: str = Field(min_length=1, max_length=50)
    car_type: CarType
    transmission: Transmission
    fuel_type: FuelType
    seats: int = Field(ge=1, le=50)
    price_per_day: Decimal = Field(ge=0, max_digits=10, decimal_places=2)
    images: list[str]
    features: Optional[list[str]] = None
    description: Optional[str] = None
    is_available: bool = True

    class Config:
        use_enum_values = True


# Columns a partial update may clear
NULLABLE_CAR_FIELDS = {"features", "description"}


class CarUpdate(BaseModel):
    """Partial update — only fields sent by the client are applied."""
    brand: Optional[str] = Field(default=None, min_length=1, max_length=100)
    model: Optional[str] = Field(default=None, min_length=1, max_length=100)
    year: Optional[int] = Field(default=None, ge=1900, le=2100)
    registration_number: Optional[str] = Field(default=None, min_length=1, max_length=50)
    car_type: Optional[CarType] = None
    transmission: Optional[Transmission] = None
    fuel_type: Optional[FuelType] = None
    seats: Optional[int] = Field(default=None, ge=1, le=50)
    price_per_day: Optional[Decimal] = Field(default=None, ge=0, max_digits=10, decimal_places=2)
    images: Optional[list[str]] = None
    features: Optional[list[str]] = None
    description: Optional[str] = None
    is_available: Optional[bool] = None

    @model_validator(mode="after")
    def reject_nulls_for_required_columns(self):
        nulled = sorted(f for f in self.model_fields_set
                        if f not in NULLABLE_CAR_FIELDS and getattr(self, f) is None)
        if nulled:
            raise ValueError(f"Fields cannot be null: {', '.join(nulled)}")
        return self

    class Config:
        use_enum_values = True


class CarOut(BaseModel):
    id: str
    owner_id: str
    brand: str
    model: str
    year: int
    registration_number: str
    car_type: str
    transmission: str
    fuel_type: str
    seats: int
    price_per_day: Decimal
    images: list[str]
    features: Optional[list[str]]
    description: Optional[str]
    is_available: bool
    average_rating: Optional[float] = None
    review_count: Optional[int] = None
    created_at: Optional[datetime]

    class Config:
        from_attributes = True


class CarWithOwnerOut(CarOut):
    owner: Optional[UserOut] = None


class CarDetailOut(BaseModel):
    car: CarOut
    owner: Optional[UserOut]
    reviews: list[ReviewWithUserOut]
    average_rating: float


class AvailabilityOut(BaseModel):
    car_id: str
    start_date: date
    end_date: date
    available: bool
    days: int
    quoted_cost: Decimal
