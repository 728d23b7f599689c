# app/routers/dashboards.py
"""Owner and admin dashboards."""

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from app.database import get_db
from app.models.enums import UserRole
from app.schemas.dashboard import OwnerDashboardOut, AdminDashboardOut
from app.services import dashboard_service
from app.utils.auth import AuthContext, get_auth_context

router = APIRouter()


@router.get("/owner/dashboard", response_model=OwnerDashboardOut, summary="Fleet, bookings, revenue")
def owner_dashboard(ctx: AuthContext = Depends(get_auth_context), db: Session = Depends(get_db)):
    ctx.require_role(UserRole.OWNER)
    return dashboard_service.owner_dashboard(db, ctx.user_id)


@router.get("/admin/dashboard", response_model=AdminDashboardOut, summary="Platform-wide overview")
def admin_dashboard(ctx: AuthContext = Depends(get_auth_context), db: Session = Depends(get_db)):
    ctx.require_role(UserRole.ADMIN)
    return dashboard_service.admin_dashboard(db)
