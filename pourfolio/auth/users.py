"""User manager for fastapi-users."""

import hashlib
import logging
from collections.abc import AsyncGenerator
from datetime import datetime, timezone
from typing import Optional

from beanie import PydanticObjectId
from fastapi import Depends, Request
from fastapi_users import BaseUserManager, FastAPIUsers
from fastapi_users_db_beanie import BeanieUserDatabase, ObjectIDIDMixin

from pourfolio.auth.backend import auth_backend
from pourfolio.auth.db import get_user_db
from pourfolio.config import settings
from pourfolio.models.user import User

logger = logging.getLogger(__name__)
security_logger = logging.getLogger("pourfolio.security")


def _derive_secret(base_secret: str, purpose: str) -> str:
    """Derive a purpose-specific secret from the base secret.

    Args:
        base_secret: The main application secret key.
        purpose: A string identifying the purpose (e.g., 'reset_password').

    Returns:
        A derived secret string.
    """
    combined = f"{base_secret}:{purpose}"
    return hashlib.sha256(combined.encode()).hexdigest()


class UserManager(ObjectIDIDMixin, BaseUserManager[User, PydanticObjectId]):
    """User manager that records registration and login events."""

    reset_password_token_secret = _derive_secret(settings.secret_key, "reset_password")
    verification_token_secret = _derive_secret(settings.secret_key, "verification")

    async def on_after_register(
        self, user: User, request: Optional[Request] = None
    ) -> None:
        logger.info("User registered (id=%s, email=%s)", user.id, user.email)

    async def on_after_login(
        self,
        user: User,
        request: Optional[Request] = None,
        response=None,
    ) -> None:
        ip_address = request.client.host if request and request.client else None
        security_logger.info(
            "Successful login: user_id=%s, ip=%s",
            str(user.id),
            ip_address or "unknown",
        )
        user.last_login = datetime.now(timezone.utc)
        await user.save()


async def get_user_manager(
    user_db: BeanieUserDatabase = Depends(get_user_db),
) -> AsyncGenerator[UserManager, None]:
    """Yield the user manager instance."""
    yield UserManager(user_db)


fastapi_users = FastAPIUsers[User, PydanticObjectId](get_user_manager, [auth_backend])
