"""Unit tests for dashboard reducers."""

import sys
import os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

from datetime import date
from decimal import Decimal
from unittest.mock import MagicMock
from app.services.dashboard_service import total_revenue, count_active, user_booking_stats


def booking(status="pending", payment_status="pending", total_cost="1000.00", start=date(2024, 6, 1)):
    b = MagicMock()
    b.status = status
    b.payment_status = payment_status
    b.total_cost = Decimal(total_cost)
    b.start_date = start
    return b


class TestRevenue:
    def test_only_paid_bookings_count(self):
        bookings = [
            booking(payment_status="paid", total_cost="4500.00"),
            booking(payment_status="pending", total_cost="3000.00"),
            booking(payment_status="failed", total_cost="2000.00"),
            booking(payment_status="refunded", total_cost="1000.00"),
            booking(payment_status="paid", total_cost="500.50"),
        ]
        assert total_revenue(bookings) == Decimal("5000.50")

    def test_no_bookings(self):
        assert total_revenue([]) == 0


class TestActiveBookings:
    def test_pending_and_confirmed_are_active(self):
        bookings = [booking("pending"), booking("confirmed"), booking("completed"), booking("cancelled")]
        assert count_active(bookings) == 2


class TestUserStats:
    def test_upcoming_requires_confirmed_and_future_start(self):
        today = date(2024, 6, 10)
        bookings = [
            booking("confirmed", start=date(2024, 6, 20)),
            booking("pending", start=date(2024, 6, 20)),
            booking("confirmed", start=date(2024, 6, 1)),
            booking("completed", start=date(2024, 5, 1)),
        ]
        stats = user_booking_stats(bookings, today=today)
        assert stats == {"total_bookings": 4, "upcoming_bookings": 1, "completed_bookings": 1}
