# app/services/review_service.py
"""Reviews: any signed-in user can review a car; only that car's owner can answer."""

from datetime import datetime
from typing import Optional
from sqlalchemy.orm import Session
from app.models.car import Car
from app.models.review import Review
from app.utils.auth import AuthContext
from app.utils.errors import ForbiddenError, NotFoundError, ValidationFailedError
from app.utils.logger import get_logger

logger = get_logger(__name__)


def create_review(db: Session, ctx: AuthContext, car_id: str, rating: int,
                  comment: Optional[str] = None) -> Review:
    if not 1 <= rating <= 5:
        raise ValidationFailedError("Rating must be between 1 and 5")
    if not db.query(Car).filter(Car.id == car_id).first():
        raise NotFoundError("Car", car_id)

    review = Review(car_id=car_id, user_id=ctx.user_id, rating=rating, comment=comment)
    db.add(review)
    db.commit()
    db.refresh(review)
    logger.info(f"[REVIEW] {ctx.user_id} rated car {car_id}: {rating}")
    return review


def respond_to_review(db: Session, ctx: AuthContext, review_id: str, response: str) -> Review:
    review = db.query(Review).filter(Review.id == review_id).first()
    if not review:
        raise NotFoundError("Review", review_id)
    if review.car is None or review.car.owner_id != ctx.user_id:
        raise ForbiddenError("Only the car's owner can respond to reviews")

    review.owner_response = response
    review.updated_at = datetime.utcnow()
    db.commit()
    db.refresh(review)
    return review
