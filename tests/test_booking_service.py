"""Unit tests for booking creation and status updates."""

import sys
import os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

import pytest
from datetime import date
from decimal import Decimal
from unittest.mock import MagicMock
from sqlalchemy.exc import IntegrityError
from app.services.booking_service import create_booking, update_booking, change_booking_status
from app.utils.auth import AuthContext
from app.utils.errors import (BookingConflictError, ForbiddenError, InvalidTransitionError,
                              NotFoundError, ValidationFailedError)

RENTER = AuthContext(user_id="renter-1", role="user")
OWNER = AuthContext(user_id="owner-1", role="owner")
ADMIN = AuthContext(user_id="admin-1", role="admin")


def booking_db(car=None, active=()):
    db = MagicMock()
    db.query.return_value.filter.return_value.with_for_update.return_value.first.return_value = car
    db.query.return_value.filter.return_value.all.return_value = list(active)
    return db


def existing_booking(start, end, status="confirmed"):
    booking = MagicMock()
    booking.id = "existing"
    booking.start_date = start
    booking.end_date = end
    booking.status = status
    return booking


class TestCreateBooking:
    def test_creates_booking_with_pending_payment(self):
        db = booking_db(car=MagicMock(id="car-1"))

        booking = create_booking(db, RENTER, "car-1", date(2024, 6, 1), date(2024, 6, 3), Decimal("4500.00"))

        db.add.assert_called_once_with(booking)
        db.commit.assert_called_once()
        assert booking.car_id == "car-1"
        assert booking.user_id == "renter-1"
        assert (booking.status, booking.payment_status) == ("pending", "pending")
        assert booking.payment.amount == Decimal("4500.00")
        assert booking.payment.status == "pending"
        assert booking.payment.currency == "INR"

    def test_total_cost_stored_as_given(self):
        db = booking_db(car=MagicMock(id="car-1"))
        booking = create_booking(db, RENTER, "car-1", date(2024, 6, 1), date(2024, 6, 3), Decimal("1.00"))
        assert booking.total_cost == Decimal("1.00")

    def test_car_row_is_locked(self):
        db = booking_db(car=MagicMock(id="car-1"))
        create_booking(db, RENTER, "car-1", date(2024, 6, 1), date(2024, 6, 3), Decimal("10"))
        db.query.return_value.filter.return_value.with_for_update.assert_called_once()

    def test_conflict_writes_nothing(self):
        db = booking_db(car=MagicMock(id="car-1"),
                        active=[existing_booking(date(2024, 6, 1), date(2024, 6, 5))])

        with pytest.raises(BookingConflictError):
            create_booking(db, RENTER, "car-1", date(2024, 6, 5), date(2024, 6, 7), Decimal("10"))

        db.add.assert_not_called()
        db.commit.assert_not_called()

    def test_unknown_car_is_not_found(self):
        db = booking_db(car=None)
        with pytest.raises(NotFoundError):
            create_booking(db, RENTER, "ghost", date(2024, 6, 1), date(2024, 6, 2), Decimal("10"))
        db.add.assert_not_called()

    def test_exclusion_violation_becomes_conflict(self):
        db = booking_db(car=MagicMock(id="car-1"))
        orig = MagicMock()
        orig.pgcode = "23P01"
        db.commit.side_effect = IntegrityError("INSERT INTO bookings", {}, orig)

        with pytest.raises(BookingConflictError):
            create_booking(db, RENTER, "car-1", date(2024, 6, 1), date(2024, 6, 2), Decimal("10"))
        db.rollback.assert_called()

    def test_other_integrity_errors_propagate(self):
        db = booking_db(car=MagicMock(id="car-1"))
        db.commit.side_effect = IntegrityError("INSERT INTO payments", {}, Exception("fk violation"))

        with pytest.raises(IntegrityError):
            create_booking(db, RENTER, "car-1", date(2024, 6, 1), date(2024, 6, 2), Decimal("10"))
        db.rollback.assert_called()


def lookup_db(booking):
    db = MagicMock()
    db.query.return_value.filter.return_value.first.return_value = booking
    return db


def stored_booking(status="pending", payment_status="pending"):
    booking = MagicMock()
    booking.status = status
    booking.payment_status = payment_status
    booking.user_id = "renter-1"
    booking.car.owner_id = "owner-1"
    return booking


class TestUpdateBooking:
    def test_missing_booking_returns_none(self):
        assert update_booking(lookup_db(None), "nope", {"status": "confirmed"}) is None

    def test_allowed_transition_applied(self):
        booking = stored_booking()
        db = lookup_db(booking)

        update_booking(db, "b-1", {"status": "confirmed"})

        assert booking.status == "confirmed"
        db.commit.assert_called_once()

    def test_completed_to_pending_rejected(self):
        booking = stored_booking(status="completed")
        db = lookup_db(booking)

        with pytest.raises(InvalidTransitionError):
            update_booking(db, "b-1", {"status": "pending"})
        assert booking.status == "completed"
        db.commit.assert_not_called()

    def test_payment_status_table(self):
        booking = stored_booking(payment_status="paid")
        update_booking(lookup_db(booking), "b-1", {"payment_status": "refunded"})
        assert booking.payment_status == "refunded"

        with pytest.raises(InvalidTransitionError):
            update_booking(lookup_db(stored_booking(payment_status="refunded")), "b-1",
                           {"payment_status": "paid"})

    def test_same_value_is_noop(self):
        booking = stored_booking(status="cancelled")
        update_booking(lookup_db(booking), "b-1", {"status": "cancelled"})
        assert booking.status == "cancelled"

    def test_unknown_fields_rejected(self):
        with pytest.raises(ValidationFailedError):
            update_booking(lookup_db(stored_booking()), "b-1", {"total_cost": 0})


class TestChangeBookingStatus:
    def test_renter_can_cancel(self):
        booking = stored_booking()
        change_booking_status(lookup_db(booking), RENTER, "b-1", "cancelled")
        assert booking.status == "cancelled"

    def test_renter_cannot_confirm(self):
        with pytest.raises(ForbiddenError):
            change_booking_status(lookup_db(stored_booking()), RENTER, "b-1", "confirmed")

    def test_stranger_forbidden(self):
        stranger = AuthContext(user_id="someone", role="user")
        with pytest.raises(ForbiddenError):
            change_booking_status(lookup_db(stored_booking()), stranger, "b-1", "cancelled")

    def test_car_owner_confirms(self):
        booking = stored_booking()
        change_booking_status(lookup_db(booking), OWNER, "b-1", "confirmed")
        assert booking.status == "confirmed"

    def test_admin_completes(self):
        booking = stored_booking(status="confirmed")
        change_booking_status(lookup_db(booking), ADMIN, "b-1", "completed")
        assert booking.status == "completed"

    def test_missing_booking_not_found(self):
        with pytest.raises(NotFoundError):
            change_booking_status(lookup_db(None), ADMIN, "nope", "confirmed")
