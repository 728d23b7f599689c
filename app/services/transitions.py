# app/services/transitions.py
"""
Allowed status moves for bookings and payments.
Anything not listed here is rejected with InvalidTransitionError.
Setting a field to the value it already has is always accepted.
"""

from app.models.enums import BookingStatus, BookingPaymentStatus, PaymentStatus
from app.utils.errors import InvalidTransitionError, ValidationFailedError

BOOKING_STATUS_TRANSITIONS = {
    BookingStatus.PENDING.value: {BookingStatus.CONFIRMED.value, BookingStatus.CANCELLED.value},
    BookingStatus.CONFIRMED.value: {BookingStatus.COMPLETED.value, BookingStatus.CANCELLED.value},
    BookingStatus.COMPLETED.value: set(),
    BookingStatus.CANCELLED.value: set(),
}

BOOKING_PAYMENT_STATUS_TRANSITIONS = {
    BookingPaymentStatus.PENDING.value: {BookingPaymentStatus.PAID.value, BookingPaymentStatus.FAILED.value},
    BookingPaymentStatus.FAILED.value: {BookingPaymentStatus.PENDING.value, BookingPaymentStatus.PAID.value},
    BookingPaymentStatus.PAID.value: {BookingPaymentStatus.REFUNDED.value},
    BookingPaymentStatus.REFUNDED.value: set(),
}

PAYMENT_STATUS_TRANSITIONS = {
    PaymentStatus.PENDING.value: {PaymentStatus.SUCCESS.value, PaymentStatus.FAILED.value},
    PaymentStatus.FAILED.value: {PaymentStatus.PENDING.value, PaymentStatus.SUCCESS.value},
    PaymentStatus.SUCCESS.value: set(),
}


def check_transition(table: dict, field: str, current: str, requested: str):
    if requested not in table:
        raise ValidationFailedError(f"Unknown {field} '{requested}'")
    if current == requested:
        return
    if requested not in table.get(current, set()):
        raise InvalidTransitionError(field, current, requested)
