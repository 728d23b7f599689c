# app/routers/cars.py
"""Car catalogue — public browsing + owner-side listing management."""

from datetime import date
from decimal import Decimal
from typing import Optional
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from app.database import get_db
from app.schemas.car import CarCreate, CarUpdate, CarOut, CarDetailOut, AvailabilityOut
from app.services import car_service
from app.utils.auth import AuthContext, get_auth_context
from app.utils.errors import ValidationFailedError

router = APIRouter()


@router.get("/cars", response_model=list[CarOut], summary="Browse listed cars")
def list_cars(
    search: Optional[str] = None,
    min_price: Optional[Decimal] = None,
    max_price: Optional[Decimal] = None,
    brands: Optional[str] = None,
    car_types: Optional[str] = None,
    transmission: Optional[str] = None,
    db: Session = Depends(get_db),
):
    """Listed cars with rating. brands / car_types / transmission take comma-separated values."""
    return car_service.list_cars(db, search=search, min_price=min_price, max_price=max_price,
                                 brands=brands, car_types=car_types, transmission=transmission)


@router.get("/cars/{car_id}", response_model=CarDetailOut)
def get_car(car_id: str, db: Session = Depends(get_db)):
    return car_service.car_detail(db, car_id)


@router.get("/cars/{car_id}/availability", response_model=AvailabilityOut,
            summary="Check dates and get a price quote")
def check_availability(car_id: str, start_date: date, end_date: date, db: Session = Depends(get_db)):
    if start_date > end_date:
        raise ValidationFailedError("start_date must be on or before end_date")
    return car_service.check_car_availability(db, car_id, start_date, end_date)


@router.post("/cars", response_model=CarOut, summary="List a new car (owners only)")
def create_car(body: CarCreate, ctx: AuthContext = Depends(get_auth_context),
               db: Session = Depends(get_db)):
    return car_service.create_car(db, ctx, body.model_dump())


@router.put("/cars/{car_id}", response_model=CarOut)
def update_car(car_id: str, body: CarUpdate, ctx: AuthContext = Depends(get_auth_context),
               db: Session = Depends(get_db)):
    return car_service.update_car(db, ctx, car_id, body.model_dump(exclude_unset=True))


@router.delete("/cars/{car_id}")
def delete_car(car_id: str, ctx: AuthContext = Depends(get_auth_context),
               db: Session = Depends(get_db)):
    car_service.delete_car(db, ctx, car_id)
    return {"id": car_id, "status": "deleted"}
