"""Custom Pydantic schemas for fastapi-users with MongoDB/Beanie."""

from datetime import datetime

from beanie import PydanticObjectId
from fastapi_users import schemas
from pydantic import ConfigDict, Field


class UserRead(schemas.BaseUser[PydanticObjectId]):
    """Schema for reading user data."""

    display_name: str | None = None
    created_at: datetime
    last_login: datetime | None = None

    model_config = ConfigDict(from_attributes=True)


class UserCreate(schemas.BaseUserCreate):
    """Schema for creating a new user."""

    display_name: str | None = Field(None, max_length=100)


class UserUpdate(schemas.BaseUserUpdate):
    """Schema for updating user data.

    All fields are optional for partial updates.
    """

    display_name: str | None = Field(None, max_length=100)
