# app/routers/bookings.py
"""Booking creation, status changes and the renter's own booking list."""

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from app.database import get_db
from app.schemas.booking import BookingCreate, BookingOut, BookingStatusUpdate
from app.schemas.dashboard import UserDashboardOut
from app.services import booking_service, dashboard_service
from app.utils.auth import AuthContext, get_auth_context

router = APIRouter()


@router.post("/bookings", response_model=BookingOut, summary="Book a car for a date range")
def create_booking(body: BookingCreate, ctx: AuthContext = Depends(get_auth_context),
                   db: Session = Depends(get_db)):
    """
    Creates the booking and its pending payment in one transaction.
    Returns 400 when the car already has an active booking touching these dates.
    """
    return booking_service.create_booking(db, ctx, body.car_id, body.start_date, body.end_date,
                                          body.total_cost)


@router.patch("/bookings/{booking_id}/status", response_model=BookingOut)
def change_booking_status(booking_id: str, body: BookingStatusUpdate,
                          ctx: AuthContext = Depends(get_auth_context),
                          db: Session = Depends(get_db)):
    return booking_service.change_booking_status(db, ctx, booking_id, body.status)


@router.get("/user/bookings", response_model=UserDashboardOut, summary="Caller's bookings + stats")
def get_user_bookings(ctx: AuthContext = Depends(get_auth_context), db: Session = Depends(get_db)):
    return dashboard_service.user_dashboard(db, ctx.user_id)
