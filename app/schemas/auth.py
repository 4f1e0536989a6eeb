"""Pydantic schemas for authentication endpoints."""

from datetime import datetime
from decimal import Decimal

from pydantic import Field, field_validator, model_validator

from app.models.user import Theme, VehicleType
from app.schemas.base import CamelModel
from app.services.password import BCRYPT_MAX_BYTES

EMAIL_PATTERN = r"^[^@\s]+@[^@\s]+\.[^@\s]+$"
USERNAME_PATTERN = r"^[^@\s]+$"


def _check_password_bytes(value: str) -> str:
    if len(value.encode("utf-8")) > BCRYPT_MAX_BYTES:
        raise ValueError(f"Password must be at most {BCRYPT_MAX_BYTES} bytes")
    return value


class PasswordConfirmation(CamelModel):
    password: str = Field(min_length=6, max_length=72)
    confirm_password: str

    @field_validator("password")
    @classmethod
    def password_fits_bcrypt(cls, value: str) -> str:
        return _check_password_bytes(value)

    @model_validator(mode="after")
    def passwords_match(self):
        if self.password != self.confirm_password:
            raise ValueError("Passwords do not match")
        return self


class RegisterRequest(PasswordConfirmation):
    name: str = Field(min_length=2, max_length=256)
    email: str = Field(max_length=256, pattern=EMAIL_PATTERN)
    username: str = Field(min_length=3, max_length=64, pattern=USERNAME_PATTERN)
    vehicle: VehicleType
    license_plate: str = Field(min_length=7, max_length=16)


class LoginRequest(CamelModel):
    email_or_username: str = Field(min_length=1)
    password: str = Field(min_length=1)


class ProfileUpdateRequest(CamelModel):
    name: str | None = Field(default=None, min_length=2, max_length=256)
    email: str | None = Field(default=None, max_length=256, pattern=EMAIL_PATTERN)
    username: str | None = Field(default=None, min_length=3, max_length=64, pattern=USERNAME_PATTERN)
    vehicle: VehicleType | None = None
    license_plate: str | None = Field(default=None, min_length=7, max_length=16)
    fuel_price_per_liter: Decimal | None = Field(default=None, gt=0, max_digits=10, decimal_places=2)
    theme: Theme | None = None


class ChangePasswordRequest(CamelModel):
    current_password: str = Field(min_length=1)
    new_password: str = Field(min_length=6, max_length=72)

    @field_validator("new_password")
    @classmethod
    def new_password_fits_bcrypt(cls, value: str) -> str:
        return _check_password_bytes(value)


class ForgotPasswordRequest(CamelModel):
    email: str = Field(max_length=256, pattern=EMAIL_PATTERN)


class ResetPasswordRequest(PasswordConfirmation):
    token: str = Field(min_length=1, max_length=128)


class UserResponse(CamelModel):
    """Public view of a user. Never carries the password hash or reset fields."""

    id: int
    name: str
    email: str
    username: str
    vehicle: VehicleType
    license_plate: str
    fuel_price_per_liter: Decimal
    theme: Theme
    created_at: datetime


class AuthResponse(CamelModel):
    user: UserResponse
    token: str
