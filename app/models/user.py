"""User model."""

import enum
from decimal import Decimal

from sqlalchemy import Column, DateTime, Integer, Numeric, String

from app.database import Base, utcnow


class VehicleType(str, enum.Enum):
    """Kind of vehicle a user drives on business trips."""

    CAR = "car"
    MOTORCYCLE = "motorcycle"


class Theme(str, enum.Enum):
    LIGHT = "light"
    DARK = "dark"


class User(Base):
    """Application user. Owns routes and trips."""

    __tablename__ = "users"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(256), nullable=False)
    email = Column(String(256), unique=True, nullable=False, index=True)
    username = Column(String(64), unique=True, nullable=False, index=True)
    password_hash = Column(String(256), nullable=False)
    vehicle = Column(String(32), nullable=False, default=VehicleType.CAR.value)
    license_plate = Column(String(16), nullable=False)
    fuel_price_per_liter = Column(Numeric(10, 2), nullable=False, default=Decimal("6.00"))
    theme = Column(String(16), nullable=False, default=Theme.DARK.value)
    password_reset_token = Column(String(128), nullable=True, index=True)
    password_reset_expires_at = Column(DateTime, nullable=True)
    created_at = Column(DateTime, nullable=False, default=utcnow)
