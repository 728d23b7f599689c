# app/services/user_service.py
"""
User lookup and upsert for the identity forwarded by the auth gateway.
Role is never taken from the caller's own profile data.
"""

from datetime import datetime
from typing import Optional
from sqlalchemy.orm import Session
from app.models.user import User
from app.utils.logger import get_logger

logger = get_logger(__name__)

PROFILE_FIELDS = ("email", "first_name", "last_name", "profile_image_url")


def get_user(db: Session, user_id: str) -> Optional[User]:
    return db.query(User).filter(User.id == user_id).first()


def upsert_user(db: Session, user_id: str, profile: dict) -> User:
    """Create or refresh a user from identity claims. Unknown keys and `role` are ignored."""
    user = get_user(db, user_id)
    if not user:
        user = User(id=user_id)
        db.add(user)
        logger.info(f"[USER] New user {user_id}")
    for key in PROFILE_FIELDS:
        if key in profile:
            setattr(user, key, profile[key])
    user.updated_at = datetime.utcnow()
    db.commit()
    db.refresh(user)
    return user
