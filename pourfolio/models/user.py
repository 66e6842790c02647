"""User document model for authentication with fastapi-users integration."""

from datetime import datetime, timezone
from typing import Optional

from beanie import Document, Indexed
from pydantic import Field


class User(Document):
    """User document model for authentication.

    Compatible with fastapi-users BeanieUserDatabase. Besides the required
    fastapi-users fields (email, hashed_password, is_active, is_superuser,
    is_verified) it carries an optional display name and timestamps.
    """

    # Required fields for fastapi-users
    email: Indexed(str, unique=True)
    hashed_password: str
    is_active: bool = True
    is_superuser: bool = False
    is_verified: bool = False

    display_name: Optional[str] = None

    created_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
    updated_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
    last_login: Optional[datetime] = None

    class Settings:
        name = "users"
        email_collation = None  # Use default case-insensitive collation

    def __repr__(self) -> str:
        return f"<User(id={self.id}, email={self.email}, is_active={self.is_active})>"
