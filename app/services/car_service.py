# app/services/car_service.py
"""
Car catalogue: listing with filters, detail view and owner-side CRUD.
"""

from datetime import date, datetime
from decimal import Decimal
from typing import Optional
from sqlalchemy import or_
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session
from app.models.car import Car
from app.models.enums import UserRole
from app.services.availability_service import is_available, quote_total, rental_days
from app.services.rating_service import get_reviews_by_car, average_rating, rating_summary
from app.utils.auth import AuthContext
from app.utils.errors import ForbiddenError, NotFoundError, ValidationFailedError
from app.utils.logger import get_logger

logger = get_logger(__name__)


def split_csv(value: Optional[str]) -> list[str]:
    if not value:
        return []
    return [v.strip() for v in value.split(",") if v.strip()]


def like_pattern(term: str) -> str:
    """Substring pattern for ilike with the LIKE wildcards in term matched literally."""
    escaped = term.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")
    return f"%{escaped}%"


def attach_ratings(db: Session, cars: list[Car]) -> list[Car]:
    """Decorate each car with average_rating and review_count."""
    summary = rating_summary(db, [c.id for c in cars])
    for car in cars:
        car.average_rating, car.review_count = summary[car.id]
    return cars


def list_cars(db: Session, search: Optional[str] = None, min_price: Optional[Decimal] = None,
              max_price: Optional[Decimal] = None, brands: Optional[str] = None,
              car_types: Optional[str] = None, transmission: Optional[str] = None) -> list[Car]:
    """Listed (is_available) cars matching every given filter, with ratings attached."""
    q = db.query(Car).filter(Car.is_available.is_(True))
    if search:
        pattern = like_pattern(search)
        q = q.filter(or_(Car.brand.ilike(pattern, escape="\\"), Car.model.ilike(pattern, escape="\\")))
    if min_price is not None:
        q = q.filter(Car.price_per_day >= min_price)
    if max_price is not None:
        q = q.filter(Car.price_per_day <= max_price)
    if split_csv(brands):
        q = q.filter(Car.brand.in_(split_csv(brands)))
    if split_csv(car_types):
        q = q.filter(Car.car_type.in_(split_csv(car_types)))
    if split_csv(transmission):
        q = q.filter(Car.transmission.in_(split_csv(transmission)))
    return attach_ratings(db, q.order_by(Car.created_at.desc()).all())


def get_car(db: Session, car_id: str) -> Optional[Car]:
    return db.query(Car).filter(Car.id == car_id).first()


def get_car_or_404(db: Session, car_id: str) -> Car:
    car = get_car(db, car_id)
    if not car:
        raise NotFoundError("Car", car_id)
    return car


def get_cars_by_owner(db: Session, owner_id: str) -> list[Car]:
    return db.query(Car).filter(Car.owner_id == owner_id).order_by(Car.created_at.desc()).all()


def car_detail(db: Session, car_id: str) -> dict:
    car = get_car_or_404(db, car_id)
    reviews = get_reviews_by_car(db, car.id)
    return {
        "car": car,
        "owner": car.owner,
        "reviews": reviews,
        "average_rating": average_rating(r.rating for r in reviews),
    }


def check_car_availability(db: Session, car_id: str, start_date: date, end_date: date) -> dict:
    """Availability plus an informational price quote; 404 for an unknown car."""
    car = get_car_or_404(db, car_id)
    return {
        "car_id": car.id,
        "start_date": start_date,
        "end_date": end_date,
        "available": is_available(db, car.id, start_date, end_date),
        "days": rental_days(start_date, end_date),
        "quoted_cost": quote_total(car.price_per_day, start_date, end_date),
    }


def _ensure_unique_registration(db: Session, registration_number: str, car_id: Optional[str] = None):
    q = db.query(Car).filter(Car.registration_number == registration_number)
    if car_id:
        q = q.filter(Car.id != car_id)
    if q.first():
        raise ValidationFailedError(f"Registration {registration_number} already listed")


def _commit_car(db: Session, registration_number: Optional[str]):
    # registration_number is unique in the table too; the pre-check alone can race
    try:
        db.commit()
    except IntegrityError as exc:
        db.rollback()
        logger.warning(f"[CAR] Write rejected by the database: {exc.orig}")
        raise ValidationFailedError(f"Registration {registration_number} already listed"
                                    if registration_number else "Car violates a database constraint") from exc


def create_car(db: Session, ctx: AuthContext, data: dict) -> Car:
    ctx.require_role(UserRole.OWNER, message="Only owners can add cars")
    _ensure_unique_registration(db, data["registration_number"])
    car = Car(owner_id=ctx.user_id, **data)
    db.add(car)
    _commit_car(db, data.get("registration_number"))
    db.refresh(car)
    logger.info(f"[CAR] Owner {ctx.user_id} listed {car.id} ({car.brand} {car.model})")
    return car


def _owned_car(db: Session, ctx: AuthContext, car_id: str) -> Car:
    car = get_car_or_404(db, car_id)
    if car.owner_id != ctx.user_id:
        raise ForbiddenError()
    return car


def update_car(db: Session, ctx: AuthContext, car_id: str, data: dict) -> Car:
    car = _owned_car(db, ctx, car_id)
    if "registration_number" in data:
        _ensure_unique_registration(db, data["registration_number"], car_id=car.id)
    for key, value in data.items():
        setattr(car, key, value)
    car.updated_at = datetime.utcnow()
    _commit_car(db, data.get("registration_number"))
    db.refresh(car)
    return car


def delete_car(db: Session, ctx: AuthContext, car_id: str):
    car = _owned_car(db, ctx, car_id)
    db.delete(car)
    db.commit()
    logger.info(f"[CAR] Owner {ctx.user_id} removed {car_id}")
