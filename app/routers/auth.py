"""Authentication API endpoints."""

import logging

from fastapi import APIRouter, Depends, HTTPException, Request
from sqlalchemy.orm import Session

from app.database import get_db
from app.dependencies import CurrentUser, get_current_user
from app.rate_limit import limiter
from app.schemas.auth import (
    AuthResponse,
    ChangePasswordRequest,
    ForgotPasswordRequest,
    LoginRequest,
    ProfileUpdateRequest,
    RegisterRequest,
    ResetPasswordRequest,
    UserResponse,
)
from app.schemas.base import MessageResponse
from app.services.auth import USER_NOT_FOUND, get_auth_service
from app.services.jwt import get_jwt_service

logger = logging.getLogger("trip_ledger")

router = APIRouter(prefix="/api/auth", tags=["Authentication"])

FORGOT_PASSWORD_MESSAGE = "If the email exists, you will receive password recovery instructions"


def _auth_response(user) -> AuthResponse:
    token = get_jwt_service().create_token(user_id=user.id)
    return AuthResponse(user=UserResponse.model_validate(user), token=token)


@router.post("/register", response_model=AuthResponse, status_code=201)
@limiter.limit("5/minute")
def register(request: Request, body: RegisterRequest, db: Session = Depends(get_db)) -> AuthResponse:
    """Register a new user account and sign them in."""
    result = get_auth_service().register(
        db,
        name=body.name,
        email=body.email,
        username=body.username,
        password=body.password,
        vehicle=body.vehicle,
        license_plate=body.license_plate,
    )

    if not result.success:
        raise HTTPException(status_code=400, detail=result.error)

    return _auth_response(result.user)


@router.post("/login", response_model=AuthResponse)
@limiter.limit("10/minute")
def login(request: Request, body: LoginRequest, db: Session = Depends(get_db)) -> AuthResponse:
    """Authenticate by email or username and receive a bearer token."""
    result = get_auth_service().authenticate(db, body.email_or_username, body.password)

    if not result.success:
        raise HTTPException(status_code=401, detail=result.error)

    return _auth_response(result.user)


@router.get("/me", response_model=UserResponse)
def get_me(user: CurrentUser = Depends(get_current_user), db: Session = Depends(get_db)) -> UserResponse:
    """Get the current user's profile."""
    record = get_auth_service().get_user(db, user.user_id)
    if not record:
        raise HTTPException(status_code=404, detail=USER_NOT_FOUND)
    return UserResponse.model_validate(record)


@router.put("/profile", response_model=UserResponse)
def update_profile(
    body: ProfileUpdateRequest,
    user: CurrentUser = Depends(get_current_user),
    db: Session = Depends(get_db),
) -> UserResponse:
    """Update profile fields. Passwords are changed through /change-password."""
    changes = {key: value for key, value in body.model_dump(exclude_unset=True).items() if value is not None}
    result = get_auth_service().update_profile(db, user.user_id, changes)

    if not result.success:
        raise HTTPException(status_code=404 if result.error == USER_NOT_FOUND else 400, detail=result.error)

    return UserResponse.model_validate(result.user)


@router.post("/change-password", response_model=MessageResponse)
def change_password(
    body: ChangePasswordRequest,
    user: CurrentUser = Depends(get_current_user),
    db: Session = Depends(get_db),
) -> MessageResponse:
    """Change password after confirming the current one."""
    result = get_auth_service().change_password(db, user.user_id, body.current_password, body.new_password)

    if not result.success:
        raise HTTPException(status_code=404 if result.error == USER_NOT_FOUND else 400, detail=result.error)

    logger.info("Password changed for user id=%s", user.user_id)
    return MessageResponse(message="Password changed successfully")


@router.post("/forgot-password", response_model=MessageResponse)
@limiter.limit("3/minute")
def forgot_password(request: Request, body: ForgotPasswordRequest, db: Session = Depends(get_db)) -> MessageResponse:
    """Request a password reset. The reset link is written to the server log."""
    token = get_auth_service().request_password_reset(db, body.email)

    if token:
        base_url = str(request.base_url).rstrip("/")
        logger.info("PASSWORD RESET: %s/reset-password?token=%s", base_url, token)

    return MessageResponse(message=FORGOT_PASSWORD_MESSAGE)


@router.post("/reset-password", response_model=MessageResponse)
@limiter.limit("5/minute")
def reset_password(request: Request, body: ResetPasswordRequest, db: Session = Depends(get_db)) -> MessageResponse:
    """Set a new password using a valid reset token."""
    result = get_auth_service().reset_password(db, body.token, body.password)

    if not result.success:
        raise HTTPException(status_code=400, detail=result.error)

    logger.info("Password reset completed for user id=%s", result.user.id)  # type: ignore[union-attr]
    return MessageResponse(message="Password reset successfully")
