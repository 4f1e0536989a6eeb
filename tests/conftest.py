"""Pytest configuration and fixtures."""

import os

# Keep bcrypt fast in tests; must be set before settings are loaded
os.environ.setdefault("BCRYPT_ROUNDS", "4")
os.environ.setdefault("JWT_SECRET_KEY", "test-secret-key")

import pytest  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402
from sqlalchemy import create_engine  # noqa: E402
from sqlalchemy.orm import Session, sessionmaker  # noqa: E402
from sqlalchemy.pool import StaticPool  # noqa: E402

from app.database import Base, get_db  # noqa: E402
from app.models.route import Route  # noqa: E402, F401
from app.models.trip import Trip  # noqa: E402, F401
from app.models.user import User  # noqa: E402, F401
from app.services.auth import AuthService  # noqa: E402
from app.services.jwt import get_jwt_service  # noqa: E402

DEFAULT_PASSWORD = "password123"


@pytest.fixture(name="db_session")
def db_session_fixture():
    """Create an in-memory SQLite database for tests."""
    engine = create_engine(
        "sqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    testing_session_local = sessionmaker(bind=engine, autocommit=False, autoflush=False)
    session = testing_session_local()
    try:
        yield session
    finally:
        session.close()
        Base.metadata.drop_all(bind=engine)


@pytest.fixture(name="client")
def client_fixture(db_session: Session):
    """Create a test client with overridden DB dependency and disabled rate limiting."""
    from app.rate_limit import limiter
    from main import app

    def override_get_db():
        try:
            yield db_session
        finally:
            pass

    app.dependency_overrides[get_db] = override_get_db
    limiter.enabled = False
    with TestClient(app) as c:
        yield c
    limiter.enabled = True
    app.dependency_overrides.clear()


def make_user(db_session: Session, email: str, username: str) -> dict:
    """Register a user directly through the service and return its id, credentials and token."""
    result = AuthService().register(
        db_session,
        name="Test User",
        email=email,
        username=username,
        password=DEFAULT_PASSWORD,
        vehicle="car",
        license_plate="ABC1D23",
    )
    token = get_jwt_service().create_token(user_id=result.user.id)
    return {
        "user_id": result.user.id,
        "email": email,
        "username": username,
        "password": DEFAULT_PASSWORD,
        "token": token,
        "headers": {"Authorization": f"Bearer {token}"},
    }


@pytest.fixture(name="test_user")
def test_user_fixture(db_session: Session):
    """Create a test user and return its credentials and token."""
    return make_user(db_session, "test@example.com", "testuser")


@pytest.fixture(name="other_user")
def other_user_fixture(db_session: Session):
    """A second user for ownership checks."""
    return make_user(db_session, "other@example.com", "otheruser")
