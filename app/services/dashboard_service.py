# app/services/dashboard_service.py
"""
Read-side reducers for the user, owner and admin dashboards.
Recomputed from rows on every request; nothing is cached.
"""

from datetime import date
from decimal import Decimal
from typing import Iterable, Optional
from sqlalchemy.orm import Session
from app.models.booking import Booking
from app.models.car import Car
from app.models.enums import ACTIVE_BOOKING_STATUSES, BookingPaymentStatus, BookingStatus
from app.models.review import Review
from app.models.user import User
from app.services.booking_service import get_all_bookings, get_bookings_by_owner, get_bookings_by_user
from app.services.car_service import attach_ratings, get_cars_by_owner
from app.services.rating_service import average_rating


def total_revenue(bookings: Iterable[Booking]) -> Decimal:
    """Sum of total_cost over bookings whose payment_status is paid."""
    return sum(
        (Decimal(str(b.total_cost)) for b in bookings
         if b.payment_status == BookingPaymentStatus.PAID.value),
        Decimal("0"),
    )


def count_active(bookings: Iterable[Booking]) -> int:
    return sum(1 for b in bookings if b.status in ACTIVE_BOOKING_STATUSES)


def user_booking_stats(bookings: list[Booking], today: Optional[date] = None) -> dict:
    today = today or date.today()
    return {
        "total_bookings": len(bookings),
        "upcoming_bookings": sum(1 for b in bookings
                                 if b.status == BookingStatus.CONFIRMED.value and b.start_date > today),
        "completed_bookings": sum(1 for b in bookings if b.status == BookingStatus.COMPLETED.value),
    }


def user_dashboard(db: Session, user_id: str) -> dict:
    bookings = get_bookings_by_user(db, user_id)
    return {"bookings": bookings, "stats": user_booking_stats(bookings)}


def owner_dashboard(db: Session, owner_id: str) -> dict:
    cars = attach_ratings(db, get_cars_by_owner(db, owner_id))
    bookings = get_bookings_by_owner(db, owner_id)

    car_ids = [c.id for c in cars]
    ratings = []
    if car_ids:
        ratings = [r for (r,) in db.query(Review.rating).filter(Review.car_id.in_(car_ids)).all()]

    return {
        "cars": cars,
        "bookings": bookings,
        "stats": {
            "total_cars": len(cars),
            "total_revenue": float(total_revenue(bookings)),
            "active_bookings": count_active(bookings),
            "average_rating": average_rating(ratings),
        },
    }


def admin_dashboard(db: Session) -> dict:
    users = db.query(User).order_by(User.created_at.desc()).all()
    cars = db.query(Car).order_by(Car.created_at.desc()).all()
    attach_ratings(db, cars)
    bookings = get_all_bookings(db)

    return {
        "users": users,
        "cars": cars,
        "bookings": bookings,
        "stats": {
            "total_users": len(users),
            "total_cars": len(cars),
            "total_bookings": len(bookings),
            "total_revenue": float(total_revenue(bookings)),
            "active_bookings": count_active(bookings),
        },
    }
