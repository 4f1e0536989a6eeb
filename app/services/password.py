"""Password hashing with bcrypt."""

import bcrypt

from app.config import get_settings

# bcrypt ignores input past 72 bytes, so longer passwords are refused
BCRYPT_MAX_BYTES = 72


def _encode(password: str) -> bytes:
    encoded = password.encode("utf-8")
    if len(encoded) > BCRYPT_MAX_BYTES:
        raise ValueError(f"Password exceeds {BCRYPT_MAX_BYTES} bytes")
    return encoded


def hash_password(password: str) -> str:
    """Hash a plaintext password with a fresh salt. Raises ValueError past 72 bytes."""
    rounds = get_settings().BCRYPT_ROUNDS
    return bcrypt.hashpw(_encode(password), bcrypt.gensalt(rounds=rounds)).decode("utf-8")


def verify_password(password: str, password_hash: str | None) -> bool:
    """Check a plaintext password against a stored hash. Returns False for malformed hashes or over-long input."""
    if not password_hash:
        return False
    try:
        return bcrypt.checkpw(_encode(password), password_hash.encode("utf-8"))
    except ValueError:
        return False
