# app/schemas/booking.py
from pydantic import BaseModel, Field, model_validator
from datetime import date, datetime
from decimal import Decimal
from typing import Optional
from app.models.enums import BookingStatus
from app.schemas.car import CarOut
from app.schemas.payment import PaymentOut
from app.schemas.user import UserOut


class BookingCreate(BaseModel):
    car_id: str
    start_date: date
    end_date: date
    total_cost: Decimal = Field(ge=0, max_digits=10, decimal_places=2)

    @model_validator(mode="after")
    def check_date_order(self):
        if self.start_date > self.end_date:
            raise ValueError("start_date must be on or before end_date")
        return self


class BookingStatusUpdate(BaseModel):
    status: BookingStatus

    class Config:
        use_enum_values = True


class BookingOut(BaseModel):
    id: str
    car_id: str
    user_id: str
    start_date: date
    end_date: date
    total_cost: Decimal
    status: str
    payment_status: str
    created_at: Optional[datetime]
    updated_at: Optional[datetime]

    class Config:
        from_attributes = True


class BookingWithCarOut(BookingOut):
    car: Optional[CarOut] = None


class UserBookingOut(BookingWithCarOut):
    payment: Optional[PaymentOut] = None


class AdminBookingOut(BookingWithCarOut):
    user: Optional[UserOut] = None
