# app/utils/auth.py
"""
Authenticated-context plumbing.

OIDC is terminated by the gateway in front of this service; it forwards the
verified user id in a header (settings.AUTH_USER_HEADER). We resolve that id to
an AuthContext and hand it to services explicitly, never via global request state.
"""

from dataclasses import dataclass
from fastapi import Depends, Request
from sqlalchemy.orm import Session
from app.config import settings
from app.database import get_db
from app.models.enums import UserRole
from app.models.user import User
from app.utils.errors import ForbiddenError, UnauthenticatedError


@dataclass(frozen=True)
class AuthContext:
    user_id: str
    role: str

    @property
    def is_admin(self) -> bool:
        return self.role == UserRole.ADMIN.value

    @property
    def is_owner(self) -> bool:
        return self.role == UserRole.OWNER.value

    def require_role(self, *roles: UserRole, message: str = "Not authorized"):
        if self.role not in {r.value for r in roles}:
            raise ForbiddenError(message)


def get_auth_context(request: Request, db: Session = Depends(get_db)) -> AuthContext:
    """FastAPI dependency — 401 unless the gateway header names a known user."""
    user_id = request.headers.get(settings.AUTH_USER_HEADER)
    if not user_id:
        raise UnauthenticatedError()
    user = db.query(User).filter(User.id == user_id).first()
    if not user:
        raise UnauthenticatedError()
    return AuthContext(user_id=user.id, role=user.role)
