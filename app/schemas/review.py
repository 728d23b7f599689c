# app/schemas/review.py
from pydantic import BaseModel, Field
from datetime import datetime
from typing import Optional
from app.schemas.user import UserOut


class ReviewCreate(BaseModel):
    car_id: str
    rating: int = Field(ge=1, le=5)
    comment: Optional[str] = None


class OwnerResponseUpdate(BaseModel):
    owner_response: str = Field(min_length=1)


class ReviewOut(BaseModel):
    id: str
    car_id: str
    user_id: str
    rating: int
    comment: Optional[str]
    owner_response: Optional[str]
    created_at: Optional[datetime]

    class Config:
        from_attributes = True


class ReviewWithUserOut(ReviewOut):
    user: Optional[UserOut] = None
