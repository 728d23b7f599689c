# app/models/enums.py
"""
Status and category vocabularies shared by models, schemas and services.
Stored as plain strings; CheckConstraints on the tables keep them honest.
"""

import enum


class UserRole(str, enum.Enum):
    USER = "user"
    OWNER = "owner"
    ADMIN = "admin"


class BookingStatus(str, enum.Enum):
    PENDING = "pending"
    CONFIRMED = "confirmed"
    COMPLETED = "completed"
    CANCELLED = "cancelled"


class BookingPaymentStatus(str, enum.Enum):
    PENDING = "pending"
    PAID = "paid"
    FAILED = "failed"
    REFUNDED = "refunded"


class PaymentStatus(str, enum.Enum):
    PENDING = "pending"
    SUCCESS = "success"
    FAILED = "failed"


class CarType(str, enum.Enum):
    SUV = "SUV"
    SEDAN = "Sedan"
    HATCHBACK = "Hatchback"
    LUXURY = "Luxury"
    COMPACT = "Compact"


class Transmission(str, enum.Enum):
    MANUAL = "Manual"
    AUTOMATIC = "Automatic"


class FuelType(str, enum.Enum):
    PETROL = "Petrol"
    DIESEL = "Diesel"
    ELECTRIC = "Electric"
    HYBRID = "Hybrid"
    CNG = "CNG"


# Bookings in these states hold the car for their date range
ACTIVE_BOOKING_STATUSES = (BookingStatus.PENDING.value, BookingStatus.CONFIRMED.value)


def sql_in(values) -> str:
    """Render a list of enum values as a SQL IN-list for CheckConstraints."""
    return ", ".join(f"'{v.value if isinstance(v, enum.Enum) else v}'" for v in values)
