# app/services/availability_service.py
"""
Date-level availability of a car.

A request [start, end] conflicts with an existing booking [s, e] iff
s <= end and e >= start (closed intervals). Returning a car on the same day
another renter picks it up therefore counts as a conflict.
Only pending/confirmed bookings hold the car; completed/cancelled never block.
"""

from datetime import date
from decimal import Decimal
from sqlalchemy.orm import Session
from app.models.booking import Booking
from app.models.enums import ACTIVE_BOOKING_STATUSES


def ranges_overlap(start_a: date, end_a: date, start_b: date, end_b: date) -> bool:
    return start_a <= end_b and end_a >= start_b


def active_bookings_for_car(db: Session, car_id: str) -> list[Booking]:
    return db.query(Booking).filter(
        Booking.car_id == car_id,
        Booking.status.in_(ACTIVE_BOOKING_STATUSES),
    ).all()


def find_conflicts(db: Session, car_id: str, start_date: date, end_date: date) -> list[Booking]:
    """Active bookings of the car whose range intersects [start_date, end_date]."""
    return [
        b for b in active_bookings_for_car(db, car_id)
        if ranges_overlap(b.start_date, b.end_date, start_date, end_date)
    ]


def is_available(db: Session, car_id: str, start_date: date, end_date: date) -> bool:
    """
    True when no active booking of the car overlaps the requested range.
    An unknown car_id has no bookings and is reported as available; callers
    that care check the car exists first.
    """
    return not find_conflicts(db, car_id, start_date, end_date)


def rental_days(start_date: date, end_date: date) -> int:
    """Billable days for a closed range: both pickup and return day count."""
    return (end_date - start_date).days + 1


def quote_total(price_per_day, start_date: date, end_date: date) -> Decimal:
    return Decimal(str(price_per_day)) * rental_days(start_date, end_date)
