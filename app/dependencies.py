"""Authentication dependencies for FastAPI routes."""

from dataclasses import dataclass

from fastapi import HTTPException, Request

from app.services.jwt import get_jwt_service

BEARER_PREFIX = "Bearer "


@dataclass
class CurrentUser:
    """Authenticated user context."""

    user_id: int


def get_bearer_token(request: Request) -> str | None:
    """Read the token from an `Authorization: Bearer <token>` header."""
    auth_header = request.headers.get("Authorization")
    if not auth_header or not auth_header.startswith(BEARER_PREFIX):
        return None
    return auth_header[len(BEARER_PREFIX) :].strip() or None


def get_current_user(request: Request) -> CurrentUser:
    """Validate the bearer token. Raises 401 when it is missing and 403 when it is invalid."""
    token = get_bearer_token(request)
    if not token:
        raise HTTPException(status_code=401, detail="Access token required")

    user_id = get_jwt_service().verify_token(token)
    if user_id is None:
        raise HTTPException(status_code=403, detail="Invalid token")

    return CurrentUser(user_id=user_id)


def require_owner(resource, user: CurrentUser, name: str):
    """Return the resource if the user owns it. 404 when missing, 403 when owned by someone else."""
    if resource is None:
        raise HTTPException(status_code=404, detail=f"{name} not found")
    if resource.user_id != user.user_id:
        raise HTTPException(status_code=403, detail="Access denied")
    return resource
