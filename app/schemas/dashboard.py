# app/schemas/dashboard.py
from pydantic import BaseModel
from app.schemas.booking import UserBookingOut, BookingWithCarOut, AdminBookingOut
from app.schemas.car import CarOut, CarWithOwnerOut
from app.schemas.user import UserOut


class UserStats(BaseModel):
    total_bookings: int
    upcoming_bookings: int
    completed_bookings: int


class UserDashboardOut(BaseModel):
    bookings: list[UserBookingOut]
    stats: UserStats


class OwnerStats(BaseModel):
    total_cars: int
    total_revenue: float
    active_bookings: int
    average_rating: float


class OwnerDashboardOut(BaseModel):
    cars: list[CarOut]
    bookings: list[BookingWithCarOut]
    stats: OwnerStats


class AdminStats(BaseModel):
    total_users: int
    total_cars: int
    total_bookings: int
    total_revenue: float
    active_bookings: int


class AdminDashboardOut(BaseModel):
    users: list[UserOut]
    cars: list[CarWithOwnerOut]
    bookings: list[AdminBookingOut]
    stats: AdminStats
