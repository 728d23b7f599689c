# app/schemas/user.py
from pydantic import BaseModel
from datetime import datetime
from typing import Optional


class UserOut(BaseModel):
    id: str
    email: Optional[str]
    first_name: Optional[str]
    last_name: Optional[str]
    profile_image_url: Optional[str]
    role: str
    created_at: Optional[datetime]

    class Config:
        from_attributes = True


class UserProfileUpdate(BaseModel):
    """Identity claims forwarded by the auth gateway. Role is not accepted here."""
    email: Optional[str] = None
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    profile_image_url: Optional[str] = None
