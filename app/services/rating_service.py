# app/services/rating_service.py
"""
Average rating. average_rating() is the only formula in the codebase:
car list, car detail and owner dashboard all go through it so their numbers agree.
"""

from typing import Iterable
from sqlalchemy.orm import Session
from app.models.review import Review


def average_rating(ratings: Iterable[int]) -> float:
    """Arithmetic mean, unrounded. 0.0 when there are no ratings."""
    ratings = list(ratings)
    if not ratings:
        return 0.0
    return sum(ratings) / len(ratings)


def get_reviews_by_car(db: Session, car_id: str) -> list[Review]:
    return (db.query(Review).filter(Review.car_id == car_id)
            .order_by(Review.created_at.desc()).all())


def get_average_rating(db: Session, car_id: str) -> float:
    return average_rating(r.rating for r in get_reviews_by_car(db, car_id))


def rating_summary(db: Session, car_ids: list[str]) -> dict[str, tuple[float, int]]:
    """{car_id: (average_rating, review_count)} for every id, one query."""
    ratings: dict[str, list[int]] = {car_id: [] for car_id in car_ids}
    if car_ids:
        rows = db.query(Review.car_id, Review.rating).filter(Review.car_id.in_(car_ids)).all()
        for car_id, rating in rows:
            ratings[car_id].append(rating)
    return {car_id: (average_rating(values), len(values)) for car_id, values in ratings.items()}
