# app/schemas/payment.py
from pydantic import BaseModel
from datetime import datetime
from decimal import Decimal
from typing import Optional
from app.models.enums import PaymentStatus


class PaymentOut(BaseModel):
    id: str
    booking_id: str
    amount: Decimal
    currency: str
    gateway_order_id: Optional[str]
    gateway_payment_id: Optional[str]
    status: str
    created_at: Optional[datetime]
    updated_at: Optional[datetime]

    class Config:
        from_attributes = True


class PaymentCallback(BaseModel):
    """Status push from the payment gateway."""
    status: PaymentStatus
    gateway_order_id: Optional[str] = None
    gateway_payment_id: Optional[str] = None

    class Config:
        use_enum_values = True
