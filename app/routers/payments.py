# app/routers/payments.py
"""
Payment gateway callback.
The gateway has no user identity; when PAYMENT_WEBHOOK_SECRET is set it must
send the same value in X-Webhook-Secret.
"""

import hmac
from typing import Optional
from fastapi import APIRouter, Depends, Header
from sqlalchemy.orm import Session
from app.config import settings
from app.database import get_db
from app.schemas.payment import PaymentCallback, PaymentOut
from app.services import payment_service
from app.utils.errors import ForbiddenError, NotFoundError
from app.utils.logger import get_logger

router = APIRouter()
logger = get_logger(__name__)


def verify_webhook_secret(x_webhook_secret: Optional[str] = Header(default=None)):
    if not settings.PAYMENT_WEBHOOK_SECRET:
        return
    if not x_webhook_secret or not hmac.compare_digest(x_webhook_secret, settings.PAYMENT_WEBHOOK_SECRET):
        logger.warning("[PAYMENT] Callback rejected: bad webhook secret")
        raise ForbiddenError("Invalid webhook secret")


@router.post("/payments/{payment_id}/callback", response_model=PaymentOut,
             dependencies=[Depends(verify_webhook_secret)], summary="Gateway payment status push")
def payment_callback(payment_id: str, body: PaymentCallback, db: Session = Depends(get_db)):
    payment = payment_service.update_payment(db, payment_id, body.model_dump(exclude_none=True))
    if not payment:
        raise NotFoundError("Payment", payment_id)
    return payment
