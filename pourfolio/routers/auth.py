"""Authentication endpoints with fastapi-users integration."""

import logging
from datetime import datetime, timezone

from fastapi import APIRouter, HTTPException, Request, status
from pydantic import BaseModel, Field
from slowapi.util import get_remote_address

from pourfolio.auth import UserCreate, UserRead, auth_backend, fastapi_users
from pourfolio.config import settings
from pourfolio.rate_limit import limiter
from pourfolio.services.auth import RequireAuth, get_password_hash, verify_password

security_logger = logging.getLogger("pourfolio.security")

router = APIRouter()

AUTH_RATE_LIMIT = f"{settings.auth_rate_limit_per_minute}/minute"


# Login endpoint (POST /api/auth/login)
router.include_router(fastapi_users.get_auth_router(auth_backend), prefix="")

# Registration endpoint (POST /api/auth/register)
if settings.registration_enabled:
    router.include_router(
        fastapi_users.get_register_router(UserRead, UserCreate),
        prefix="",
    )


class PasswordChangeRequest(BaseModel):
    """Password change request model."""

    current_password: str
    new_password: str = Field(..., min_length=8)


@router.get("/me", response_model=UserRead)
async def get_current_user_info(current_user: RequireAuth) -> UserRead:
    """Get the current authenticated user's information."""
    return UserRead.model_validate(current_user)


@router.put("/password")
@limiter.limit(AUTH_RATE_LIMIT)
async def change_password(
    request: Request,  # Required for rate limiting
    password_request: PasswordChangeRequest,
    current_user: RequireAuth,
) -> dict:
    """Change the current user's password."""
    if not verify_password(password_request.current_password, current_user.hashed_password):
        security_logger.warning(
            "Password change failed - invalid current password: user_id=%s, ip=%s",
            str(current_user.id),
            get_remote_address(request),
        )
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Current password is incorrect",
        )

    current_user.hashed_password = get_password_hash(password_request.new_password)
    current_user.updated_at = datetime.now(timezone.utc)
    await current_user.save()

    security_logger.info(
        "Password changed successfully: user_id=%s, ip=%s",
        str(current_user.id),
        get_remote_address(request),
    )
    return {"message": "Password updated successfully"}
