"""JWT authentication backend for fastapi-users."""

from fastapi_users.authentication import (
    AuthenticationBackend,
    BearerTransport,
    JWTStrategy,
)

from pourfolio.config import settings

# Bearer token transport (Authorization: Bearer <token>)
bearer_transport = BearerTransport(tokenUrl="/api/auth/login")


def get_jwt_strategy() -> JWTStrategy:
    """Get the JWT strategy with current settings."""
    # Import here to avoid circular dependency
    from pourfolio.services.auth import ALGORITHM, TOKEN_AUDIENCE, TOKEN_LIFETIME_SECONDS

    return JWTStrategy(
        secret=settings.secret_key,
        lifetime_seconds=TOKEN_LIFETIME_SECONDS,
        token_audience=[TOKEN_AUDIENCE],
        algorithm=ALGORITHM,
    )


auth_backend = AuthenticationBackend(
    name="jwt",
    transport=bearer_transport,
    get_strategy=get_jwt_strategy,
)
