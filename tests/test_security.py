"""Tests for password hashing and token primitives."""

import re
from datetime import timedelta

import pytest
from jose import jwt

from app.services.jwt import JWTService
from app.services.password import hash_password, verify_password


class TestPasswordHashing:
    """Tests for bcrypt hashing helpers."""

    def test_verify_matching_password(self):
        hashed = hash_password("correct horse")
        assert verify_password("correct horse", hashed) is True

    def test_verify_wrong_password(self):
        hashed = hash_password("correct horse")
        assert verify_password("battery staple", hashed) is False

    def test_hash_is_salted(self):
        assert hash_password("same-password") != hash_password("same-password")

    def test_malformed_hash_returns_false(self):
        assert verify_password("anything", "not-a-bcrypt-hash") is False
        assert verify_password("anything", "") is False
        assert verify_password("anything", None) is False

    def test_unicode_password(self):
        hashed = hash_password("sénha-çom-acentos")
        assert verify_password("sénha-çom-acentos", hashed) is True

    def test_multibyte_password_over_72_bytes_is_refused(self):
        # 36 two-byte characters fill the limit exactly
        at_limit = "é" * 36
        hashed = hash_password(at_limit)
        assert verify_password(at_limit, hashed) is True
        assert verify_password(at_limit + "a", hashed) is False
        with pytest.raises(ValueError):
            hash_password(at_limit + "b")


class TestSessionTokens:
    """Tests for signed bearer tokens."""

    def test_round_trip_user_id(self):
        service = JWTService()
        token = service.create_token(42)
        assert service.verify_token(token) == 42

    def test_default_expiry_is_thirty_days(self):
        service = JWTService()
        payload = service.decode_token(service.create_token(7))
        assert payload["exp"] - payload["iat"] == 30 * 24 * 60 * 60

    def test_expired_token_is_invalid(self):
        service = JWTService()
        token = service.create_token(42, expires_delta=timedelta(seconds=-1))
        assert service.verify_token(token) is None

    def test_tampered_token_is_invalid(self):
        service = JWTService()
        token = service.create_token(42)
        header, payload, signature = token.split(".")
        tampered = f"{header}.{payload}.{signature[::-1]}"
        assert service.verify_token(tampered) is None

    def test_token_signed_with_other_key_is_invalid(self):
        service = JWTService()
        forged = jwt.encode({"sub": "42"}, "some-other-secret", algorithm=service.algorithm)
        assert service.verify_token(forged) is None

    def test_garbage_is_invalid(self):
        service = JWTService()
        assert service.verify_token("") is None
        assert service.verify_token("not-a-token") is None

    def test_non_integer_subject_is_invalid(self):
        service = JWTService()
        token = jwt.encode({"sub": "admin"}, service.secret_key, algorithm=service.algorithm)
        assert service.verify_token(token) is None


class TestResetTokens:
    """Tests for opaque reset token generation."""

    def test_reset_token_has_256_bits(self):
        token = JWTService().generate_reset_token()
        assert re.fullmatch(r"[0-9a-f]{64}", token)

    def test_reset_tokens_are_unique(self):
        service = JWTService()
        assert len({service.generate_reset_token() for _ in range(50)}) == 50
