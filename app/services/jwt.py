"""JWT Token Service."""

import secrets
from datetime import datetime, timedelta, timezone
from typing import Any

from jose import JWTError, jwt

from app.config import get_settings


class JWTService:
    """Handles session token creation and validation, and reset token generation."""

    def __init__(self) -> None:
        settings = get_settings()
        self.secret_key = settings.JWT_SECRET_KEY
        self.algorithm = settings.JWT_ALGORITHM
        self.expire_minutes = settings.JWT_EXPIRE_MINUTES

    def create_token(self, user_id: int, expires_delta: timedelta | None = None) -> str:
        """Create a signed session token for the given user."""
        if expires_delta is None:
            expires_delta = timedelta(minutes=self.expire_minutes)
        now = datetime.now(timezone.utc)
        payload = {
            "sub": str(user_id),
            "iat": now,
            "exp": now + expires_delta,
        }
        return jwt.encode(payload, self.secret_key, algorithm=self.algorithm)

    def decode_token(self, token: str) -> dict[str, Any] | None:
        """Decode and validate a JWT token. Returns None if invalid."""
        try:
            return jwt.decode(token, self.secret_key, algorithms=[self.algorithm])
        except JWTError:
            return None

    def verify_token(self, token: str) -> int | None:
        """Resolve the user id a token was issued for, or None if the token is not valid."""
        payload = self.decode_token(token)
        if not payload:
            return None
        try:
            return int(payload["sub"])
        except (KeyError, TypeError, ValueError):
            return None

    def generate_reset_token(self) -> str:
        """Generate an opaque one-time password reset token (256 bits)."""
        return secrets.token_hex(32)


_jwt_service: JWTService | None = None


def get_jwt_service() -> JWTService:
    """Get singleton JWT service instance."""
    global _jwt_service
    if _jwt_service is None:
        _jwt_service = JWTService()
    return _jwt_service
