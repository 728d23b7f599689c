# app/services/booking_service.py
"""
Booking lifecycle: creation (with its payment) and status updates.

create_booking holds a row lock on the car while it checks availability and
inserts, so two concurrent requests for the same car are serialized and the
second one sees the first booking. Booking and Payment are committed together;
a failure on either leaves neither behind.
"""

from datetime import date, datetime
from decimal import Decimal
from typing import Optional
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session
from app.config import settings
from app.models.booking import Booking, NO_OVERLAP_CONSTRAINT
from app.models.car import Car
from app.models.enums import BookingStatus, BookingPaymentStatus, PaymentStatus
from app.models.payment import Payment
from app.services.availability_service import find_conflicts
from app.services.transitions import (BOOKING_STATUS_TRANSITIONS, BOOKING_PAYMENT_STATUS_TRANSITIONS,
                                      check_transition)
from app.utils.auth import AuthContext
from app.utils.errors import BookingConflictError, ForbiddenError, NotFoundError, ValidationFailedError
from app.utils.logger import get_logger

logger = get_logger(__name__)

UPDATABLE_BOOKING_FIELDS = {"status", "payment_status"}

# PostgreSQL SQLSTATE for exclusion_violation
_EXCLUSION_VIOLATION = "23P01"


def _is_overlap_violation(exc: IntegrityError) -> bool:
    orig = getattr(exc, "orig", None)
    if getattr(orig, "pgcode", None) == _EXCLUSION_VIOLATION:
        return True
    return NO_OVERLAP_CONSTRAINT in str(orig)


def _lock_for_booking(db: Session):
    """SQLite ignores FOR UPDATE; take its database write lock up front instead."""
    conn = db.connection()
    if conn.dialect.name == "sqlite" and not conn.connection.dbapi_connection.in_transaction:
        conn.exec_driver_sql("BEGIN IMMEDIATE")


def create_booking(db: Session, ctx: AuthContext, car_id: str, start_date: date, end_date: date,
                   total_cost: Decimal) -> Booking:
    """
    Book car_id for [start_date, end_date] on behalf of ctx.user_id.
    total_cost is stored as given; pricing is the caller's responsibility.
    """
    _lock_for_booking(db)
    car = db.query(Car).filter(Car.id == car_id).with_for_update().first()
    if not car:
        db.rollback()
        raise NotFoundError("Car", car_id)

    conflicts = find_conflicts(db, car_id, start_date, end_date)
    if conflicts:
        db.rollback()  # release the car lock
        logger.warning(f"[BOOKING] Conflict for car={car_id} {start_date}..{end_date} "
                       f"with {[b.id for b in conflicts]}")
        raise BookingConflictError()

    booking = Booking(
        car_id=car_id,
        user_id=ctx.user_id,
        start_date=start_date,
        end_date=end_date,
        total_cost=total_cost,
        status=BookingStatus.PENDING.value,
        payment_status=BookingPaymentStatus.PENDING.value,
    )
    booking.payment = Payment(
        amount=total_cost,
        currency=settings.DEFAULT_CURRENCY,
        status=PaymentStatus.PENDING.value,
    )
    db.add(booking)
    try:
        db.commit()
    except IntegrityError as exc:
        db.rollback()
        if _is_overlap_violation(exc):
            logger.warning(f"[BOOKING] Overlap constraint rejected car={car_id} {start_date}..{end_date}")
            raise BookingConflictError() from exc
        raise
    db.refresh(booking)
    logger.info(f"[BOOKING] Created {booking.id} car={car_id} user={ctx.user_id} "
                f"{start_date}..{end_date} cost={total_cost}")
    return booking


def get_booking(db: Session, booking_id: str) -> Optional[Booking]:
    return db.query(Booking).filter(Booking.id == booking_id).first()


def get_bookings_by_user(db: Session, user_id: str) -> list[Booking]:
    return (db.query(Booking).filter(Booking.user_id == user_id)
            .order_by(Booking.created_at.desc()).all())


def get_bookings_by_owner(db: Session, owner_id: str) -> list[Booking]:
    return (db.query(Booking).join(Car, Booking.car_id == Car.id)
            .filter(Car.owner_id == owner_id)
            .order_by(Booking.created_at.desc()).all())


def get_all_bookings(db: Session) -> list[Booking]:
    return db.query(Booking).order_by(Booking.created_at.desc()).all()


def apply_booking_fields(booking: Booking, fields: dict):
    """Validate and apply a partial update to a loaded booking (no commit)."""
    unknown = set(fields) - UPDATABLE_BOOKING_FIELDS
    if unknown:
        raise ValidationFailedError(f"Booking fields cannot be updated: {', '.join(sorted(unknown))}")

    if "status" in fields:
        check_transition(BOOKING_STATUS_TRANSITIONS, "status", booking.status, fields["status"])
    if "payment_status" in fields:
        check_transition(BOOKING_PAYMENT_STATUS_TRANSITIONS, "payment_status",
                         booking.payment_status, fields["payment_status"])

    for key, value in fields.items():
        setattr(booking, key, value)
    booking.updated_at = datetime.utcnow()


def update_booking(db: Session, booking_id: str, fields: dict) -> Optional[Booking]:
    """Partial update through the transition tables. None if the booking does not exist."""
    booking = get_booking(db, booking_id)
    if not booking:
        return None
    previous = (booking.status, booking.payment_status)
    apply_booking_fields(booking, fields)
    db.commit()
    db.refresh(booking)
    logger.info(f"[BOOKING] {booking_id}: {previous[0]}/{previous[1]} → "
                f"{booking.status}/{booking.payment_status}")
    return booking


def change_booking_status(db: Session, ctx: AuthContext, booking_id: str, new_status: str) -> Booking:
    """
    Status change requested through the API.
    Car owner and admins may drive the whole table; the renter may only cancel.
    """
    booking = get_booking(db, booking_id)
    if not booking:
        raise NotFoundError("Booking", booking_id)

    is_car_owner = booking.car is not None and booking.car.owner_id == ctx.user_id
    if not (ctx.is_admin or is_car_owner):
        if booking.user_id != ctx.user_id:
            raise ForbiddenError()
        if new_status != BookingStatus.CANCELLED.value:
            raise ForbiddenError("Renters can only cancel their bookings")

    return update_booking(db, booking_id, {"status": new_status})
