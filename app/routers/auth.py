# app/routers/auth.py
"""
Current-user endpoints. The gateway calls PUT after each login to sync
profile claims; the web client calls GET to learn who it is and its role.
"""

from fastapi import APIRouter, Depends, Request
from sqlalchemy.orm import Session
from app.config import settings
from app.database import get_db
from app.schemas.user import UserOut, UserProfileUpdate
from app.services import user_service
from app.utils.auth import AuthContext, get_auth_context
from app.utils.errors import UnauthenticatedError

router = APIRouter()


@router.get("/auth/user", response_model=UserOut)
def get_current_user(ctx: AuthContext = Depends(get_auth_context), db: Session = Depends(get_db)):
    return user_service.get_user(db, ctx.user_id)


@router.put("/auth/user", response_model=UserOut, summary="Upsert the caller from identity claims")
def upsert_current_user(body: UserProfileUpdate, request: Request, db: Session = Depends(get_db)):
    user_id = request.headers.get(settings.AUTH_USER_HEADER)
    if not user_id:
        raise UnauthenticatedError()
    return user_service.upsert_user(db, user_id, body.model_dump(exclude_unset=True))
