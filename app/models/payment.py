# app/models/payment.py
"""
Payments table — exactly one row per booking (unique booking_id).
Gateway ids stay NULL until the gateway callback arrives.
"""

import uuid
from datetime import datetime
from sqlalchemy import Column, String, DateTime, Numeric, ForeignKey, CheckConstraint
from sqlalchemy.orm import relationship
from app.config import settings
from app.database import Base
from app.models.enums import PaymentStatus, sql_in


class Payment(Base):
    __tablename__ = "payments"

    id = Column(String(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    booking_id = Column(String(36), ForeignKey("bookings.id", ondelete="CASCADE"),
                        unique=True, nullable=False)
    amount = Column(Numeric(10, 2), nullable=False)
    currency = Column(String(3), nullable=False, default=lambda: settings.DEFAULT_CURRENCY)
    gateway_order_id = Column(String(100))
    gateway_payment_id = Column(String(100))
    status = Column(String(20), nullable=False, default=PaymentStatus.PENDING.value)
    created_at = Column(DateTime, default=datetime.utcnow)
    updated_at = Column(DateTime, default=datetime.utcnow)

    booking = relationship("Booking", back_populates="payment")

    __table_args__ = (
        CheckConstraint(f"status IN ({sql_in(PaymentStatus)})", name="payment_status_check"),
    )

    def __repr__(self):
        return f"<Payment {self.id} booking={self.booking_id} {self.amount} {self.currency} status={self.status}>"
