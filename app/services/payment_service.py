# app/services/payment_service.py
"""
Payment status updates, usually driven by the payment gateway callback.
The booking's payment_status follows the payment: success → paid, failed → failed.
"""

from datetime import datetime
from typing import Optional
from sqlalchemy.orm import Session
from app.models.enums import PaymentStatus, BookingPaymentStatus
from app.models.payment import Payment
from app.services.booking_service import apply_booking_fields
from app.services.transitions import PAYMENT_STATUS_TRANSITIONS, check_transition
from app.utils.errors import ValidationFailedError
from app.utils.logger import get_logger

logger = get_logger(__name__)

UPDATABLE_PAYMENT_FIELDS = {"status", "gateway_order_id", "gateway_payment_id"}

BOOKING_STATUS_FOR_PAYMENT = {
    PaymentStatus.PENDING.value: BookingPaymentStatus.PENDING.value,
    PaymentStatus.SUCCESS.value: BookingPaymentStatus.PAID.value,
    PaymentStatus.FAILED.value: BookingPaymentStatus.FAILED.value,
}


def get_payment(db: Session, payment_id: str) -> Optional[Payment]:
    return db.query(Payment).filter(Payment.id == payment_id).first()


def get_payment_by_booking_id(db: Session, booking_id: str) -> Optional[Payment]:
    return db.query(Payment).filter(Payment.booking_id == booking_id).first()


def update_payment(db: Session, payment_id: str, fields: dict) -> Optional[Payment]:
    """Partial update through the transition table. None if the payment does not exist."""
    payment = get_payment(db, payment_id)
    if not payment:
        return None

    unknown = set(fields) - UPDATABLE_PAYMENT_FIELDS
    if unknown:
        raise ValidationFailedError(f"Payment fields cannot be updated: {', '.join(sorted(unknown))}")

    previous = payment.status
    if "status" in fields:
        check_transition(PAYMENT_STATUS_TRANSITIONS, "status", payment.status, fields["status"])
        if fields["status"] != previous and payment.booking is not None:
            apply_booking_fields(payment.booking,
                                 {"payment_status": BOOKING_STATUS_FOR_PAYMENT[fields["status"]]})

    for key, value in fields.items():
        setattr(payment, key, value)
    payment.updated_at = datetime.utcnow()
    db.commit()
    db.refresh(payment)

    if payment.status != previous:
        logger.info(f"[PAYMENT] {payment_id} booking={payment.booking_id}: {previous} → {payment.status}")
    return payment
