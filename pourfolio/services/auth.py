"""Authentication service: token handling and per-request caller context."""

import logging
from dataclasses import dataclass
from typing import Annotated

from beanie import PydanticObjectId
from bson.errors import InvalidId
from fastapi import Depends, HTTPException, status
from fastapi.security import OAuth2PasswordBearer
from jose import JWTError, jwt
from pwdlib import PasswordHash
from pwdlib.hashers.argon2 import Argon2Hasher

from pourfolio.config import settings
from pourfolio.models.user import User

# Security event logger
security_logger = logging.getLogger("pourfolio.security")

# Password hashing using pwdlib with Argon2 (matches fastapi-users default)
password_hash = PasswordHash((Argon2Hasher(),))

# OAuth2 scheme for token authentication
oauth2_scheme = OAuth2PasswordBearer(tokenUrl="/api/auth/login", auto_error=False)

# JWT settings, shared with the fastapi-users strategy in auth/backend.py
ALGORITHM = "HS256"
TOKEN_AUDIENCE = "fastapi-users:auth"
ACCESS_TOKEN_EXPIRE_MINUTES = 120
TOKEN_LIFETIME_SECONDS = ACCESS_TOKEN_EXPIRE_MINUTES * 60


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """Verify a password against its hash."""
    return password_hash.verify(plain_password, hashed_password)


def get_password_hash(password: str) -> str:
    """Hash a password."""
    return password_hash.hash(password)


async def get_current_user(
    token: Annotated[str | None, Depends(oauth2_scheme)],
) -> User | None:
    """Resolve the bearer token to an active user, or None."""
    if not token:
        return None

    try:
        payload = jwt.decode(
            token,
            settings.secret_key,
            algorithms=[ALGORITHM],
            audience=TOKEN_AUDIENCE,
        )
    except JWTError:
        security_logger.info("Rejected bearer token: invalid or expired")
        return None

    subject: str | None = payload.get("sub")
    if subject is None:
        return None

    try:
        user = await User.get(PydanticObjectId(subject))
    except InvalidId:
        return None

    if user is None or not user.is_active:
        return None

    return user


async def require_auth(
    user: Annotated[User | None, Depends(get_current_user)],
) -> User:
    """Require authentication - raises 401 if not authenticated."""
    if user is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Not authenticated",
            headers={"WWW-Authenticate": "Bearer"},
        )
    return user


@dataclass(frozen=True)
class RequestContext:
    """The authenticated caller of one request.

    Handlers receive this explicitly instead of looking the user up
    themselves; every owner-scoped query filters on ``user_id``.
    """

    user: User

    @property
    def user_id(self) -> PydanticObjectId:
        return self.user.id


async def get_request_context(
    user: Annotated[User, Depends(require_auth)],
) -> RequestContext:
    return RequestContext(user=user)


# Type aliases for dependency injection
CurrentUser = Annotated[User | None, Depends(get_current_user)]
RequireAuth = Annotated[User, Depends(require_auth)]
Context = Annotated[RequestContext, Depends(get_request_context)]
