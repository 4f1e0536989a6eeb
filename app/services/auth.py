"""Authentication service: registration, login, profile and password lifecycle."""

import logging
from dataclasses import dataclass
from datetime import timedelta
from typing import Any

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from app.config import get_settings
from app.database import utcnow
from app.models.user import User
from app.services.jwt import get_jwt_service
from app.services.password import hash_password, verify_password

logger = logging.getLogger("trip_ledger")

EMAIL_IN_USE = "Email already in use"
USERNAME_IN_USE = "Username already in use"
INVALID_CREDENTIALS = "Invalid credentials"
INVALID_RESET_TOKEN = "Invalid or expired token"
WRONG_CURRENT_PASSWORD = "Current password is incorrect"
USER_NOT_FOUND = "User not found"

# Fields a user may change through a profile update
PROFILE_FIELDS = {"name", "email", "username", "vehicle", "license_plate", "fuel_price_per_liter", "theme"}


@dataclass
class AuthResult:
    """Result of an authentication or account operation."""

    success: bool
    error: str | None = None
    field: str | None = None
    user: User | None = None


class AuthService:
    """Handles user registration, authentication and password management."""

    def get_user(self, db: Session, user_id: int) -> User | None:
        return db.get(User, user_id)

    def _conflict(
        self, db: Session, email: str | None, username: str | None, exclude_id: int | None = None
    ) -> AuthResult | None:
        """Return a conflict result if email or username belongs to another user."""
        checks = (("email", email, EMAIL_IN_USE), ("username", username, USERNAME_IN_USE))
        for field, value, message in checks:
            if value is None:
                continue
            query = db.query(User).filter(getattr(User, field) == value)
            if exclude_id is not None:
                query = query.filter(User.id != exclude_id)
            if query.first():
                return AuthResult(success=False, error=message, field=field)
        return None

    def register(
        self,
        db: Session,
        name: str,
        email: str,
        username: str,
        password: str,
        vehicle: str,
        license_plate: str,
    ) -> AuthResult:
        """Register a new user. Returns AuthResult with the created user or a conflict."""
        conflict = self._conflict(db, email, username)
        if conflict:
            return conflict

        user = User(
            name=name.strip(),
            email=email,
            username=username,
            password_hash=hash_password(password),
            vehicle=vehicle,
            license_plate=license_plate.strip(),
        )
        db.add(user)
        try:
            db.commit()
        except IntegrityError:
            # Lost a race against a concurrent registration
            db.rollback()
            return self._conflict(db, email, username) or AuthResult(success=False, error=EMAIL_IN_USE, field="email")
        db.refresh(user)

        logger.info("Registered user %s (id=%s)", user.username, user.id)
        return AuthResult(success=True, user=user)

    def authenticate(self, db: Session, email_or_username: str, password: str) -> AuthResult:
        """Authenticate by email or username. An email match wins over a username match."""
        user = (
            db.query(User).filter(User.email == email_or_username).first()
            or db.query(User).filter(User.username == email_or_username).first()
        )
        if not user or not verify_password(password, user.password_hash):
            return AuthResult(success=False, error=INVALID_CREDENTIALS)

        return AuthResult(success=True, user=user)

    def update_profile(self, db: Session, user_id: int, changes: dict[str, Any]) -> AuthResult:
        """Apply a partial profile update. Password and reset fields are never touched here."""
        user = self.get_user(db, user_id)
        if not user:
            return AuthResult(success=False, error=USER_NOT_FOUND)

        changes = {key: value for key, value in changes.items() if key in PROFILE_FIELDS}
        conflict = self._conflict(db, changes.get("email"), changes.get("username"), exclude_id=user_id)
        if conflict:
            return conflict

        for key, value in changes.items():
            setattr(user, key, value)
        try:
            db.commit()
        except IntegrityError:
            db.rollback()
            return self._conflict(db, changes.get("email"), changes.get("username"), exclude_id=user_id) or AuthResult(
                success=False, error=EMAIL_IN_USE, field="email"
            )
        db.refresh(user)
        return AuthResult(success=True, user=user)

    def change_password(self, db: Session, user_id: int, current_password: str, new_password: str) -> AuthResult:
        """Replace the password after re-verifying the current one."""
        user = self.get_user(db, user_id)
        if not user:
            return AuthResult(success=False, error=USER_NOT_FOUND)

        if not verify_password(current_password, user.password_hash):
            return AuthResult(success=False, error=WRONG_CURRENT_PASSWORD)

        user.password_hash = hash_password(new_password)
        db.commit()
        return AuthResult(success=True, user=user)

    def request_password_reset(self, db: Session, email: str) -> str | None:
        """Generate a password reset token for the given email.

        Returns the token if user exists, None otherwise.
        Caller should not reveal whether the user was found.
        A new request replaces any token issued earlier.
        """
        user = db.query(User).filter(User.email == email).first()
        if not user:
            return None

        settings = get_settings()
        token = get_jwt_service().generate_reset_token()
        user.password_reset_token = token
        user.password_reset_expires_at = utcnow() + timedelta(minutes=settings.PASSWORD_RESET_EXPIRE_MINUTES)
        db.commit()

        return token

    def reset_password(self, db: Session, token: str, new_password: str) -> AuthResult:
        """Reset a user's password using a valid, unexpired reset token.

        Expired tokens are left in place; they stop matching and are replaced
        by the next reset request.
        """
        user = (
            db.query(User)
            .filter(User.password_reset_token == token, User.password_reset_expires_at > utcnow())
            .first()
        )
        if not user:
            return AuthResult(success=False, error=INVALID_RESET_TOKEN)

        user.password_hash = hash_password(new_password)
        user.password_reset_token = None
        user.password_reset_expires_at = None
        db.commit()

        return AuthResult(success=True, user=user)


_auth_service: AuthService | None = None


def get_auth_service() -> AuthService:
    """Get singleton auth service instance."""
    global _auth_service
    if _auth_service is None:
        _auth_service = AuthService()
    return _auth_service
