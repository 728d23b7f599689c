# app/models/booking.py
"""
Bookings table. A booking holds one car for a closed date range [start_date, end_date].
Created as (status=pending, payment_status=pending) together with its Payment row.

On PostgreSQL an exclusion constraint forbids two active (pending/confirmed)
bookings of the same car with intersecting ranges. Booking creation also locks
the car row, so the constraint only fires if that lock is bypassed.
"""

import uuid
from datetime import datetime
from sqlalchemy import (Column, String, Date, DateTime, Numeric, ForeignKey,
                        CheckConstraint, DDL, event)
from sqlalchemy.orm import relationship
from app.database import Base
from app.models.enums import (BookingStatus, BookingPaymentStatus, ACTIVE_BOOKING_STATUSES,
                              sql_in)

NO_OVERLAP_CONSTRAINT = "booking_no_active_overlap"


class Booking(Base):
    __tablename__ = "bookings"

    id = Column(String(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    car_id = Column(String(36), ForeignKey("cars.id", ondelete="CASCADE"), nullable=False, index=True)
    user_id = Column(String(36), ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)
    start_date = Column(Date, nullable=False)
    end_date = Column(Date, nullable=False)
    total_cost = Column(Numeric(10, 2), nullable=False)
    status = Column(String(20), nullable=False, default=BookingStatus.PENDING.value)
    payment_status = Column(String(20), nullable=False, default=BookingPaymentStatus.PENDING.value)
    created_at = Column(DateTime, default=datetime.utcnow, index=True)
    updated_at = Column(DateTime, default=datetime.utcnow)

    car = relationship("Car", back_populates="bookings")
    user = relationship("User", back_populates="bookings")
    payment = relationship("Payment", back_populates="booking", uselist=False,
                           cascade="all, delete-orphan")

    __table_args__ = (
        CheckConstraint("start_date <= end_date", name="booking_date_order"),
        CheckConstraint("total_cost >= 0", name="booking_cost_non_negative"),
        CheckConstraint(f"status IN ({sql_in(BookingStatus)})", name="booking_status_check"),
        CheckConstraint(f"payment_status IN ({sql_in(BookingPaymentStatus)})",
                        name="booking_payment_status_check"),
    )

    def __repr__(self):
        return (f"<Booking {self.id} car={self.car_id} {self.start_date}..{self.end_date} "
                f"status={self.status}/{self.payment_status}>")


# ── PostgreSQL-only overlap guard ───────────────────────────────────────────
event.listen(
    Booking.__table__,
    "before_create",
    DDL("CREATE EXTENSION IF NOT EXISTS btree_gist").execute_if(dialect="postgresql"),
)
event.listen(
    Booking.__table__,
    "after_create",
    DDL(
        f"ALTER TABLE bookings ADD CONSTRAINT {NO_OVERLAP_CONSTRAINT} "
        "EXCLUDE USING gist (car_id WITH =, daterange(start_date, end_date, '[]') WITH &&) "
        f"WHERE (status IN ({sql_in(ACTIVE_BOOKING_STATUSES)}))"
    ).execute_if(dialect="postgresql"),
)
