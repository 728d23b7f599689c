# app/models/user.py
"""
Users table. Rows are upserted from the identity supplied by the OIDC gateway.
`role` decides what the API lets a caller do (user | owner | admin).
"""

import uuid
from datetime import datetime
from sqlalchemy import Column, String, DateTime, CheckConstraint
from sqlalchemy.orm import relationship
from app.database import Base
from app.models.enums import UserRole, sql_in


class User(Base):
    __tablename__ = "users"

    id = Column(String(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    email = Column(String(255), unique=True)
    first_name = Column(String(100))
    last_name = Column(String(100))
    profile_image_url = Column(String(500))
    role = Column(String(20), nullable=False, default=UserRole.USER.value)
    government_id = Column(String(50))  # Aadhaar/PAN, verification placeholder
    created_at = Column(DateTime, default=datetime.utcnow)
    updated_at = Column(DateTime, default=datetime.utcnow)

    cars = relationship("Car", back_populates="owner", cascade="all, delete-orphan")
    bookings = relationship("Booking", back_populates="user", cascade="all, delete-orphan")
    reviews = relationship("Review", back_populates="user", cascade="all, delete-orphan")

    __table_args__ = (
        CheckConstraint(f"role IN ({sql_in(UserRole)})", name="user_role_check"),
    )

    def __repr__(self):
        return f"<User {self.id} role={self.role}>"
