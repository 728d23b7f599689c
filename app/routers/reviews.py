# app/routers/reviews.py
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from app.database import get_db
from app.schemas.review import ReviewCreate, ReviewOut, OwnerResponseUpdate
from app.services import review_service
from app.utils.auth import AuthContext, get_auth_context

router = APIRouter()


@router.post("/reviews", response_model=ReviewOut, summary="Rate a car (1-5)")
def create_review(body: ReviewCreate, ctx: AuthContext = Depends(get_auth_context),
                  db: Session = Depends(get_db)):
    return review_service.create_review(db, ctx, body.car_id, body.rating, body.comment)


@router.put("/reviews/{review_id}/response", response_model=ReviewOut,
            summary="Owner reply to a review of their car")
def respond_to_review(review_id: str, body: OwnerResponseUpdate,
                      ctx: AuthContext = Depends(get_auth_context),
                      db: Session = Depends(get_db)):
    return review_service.respond_to_review(db, ctx, review_id, body.owner_response)
