"""FastAPI-Users authentication module for Pourfolio."""

from pourfolio.auth.backend import auth_backend
from pourfolio.auth.db import get_user_db
from pourfolio.auth.schemas import UserCreate, UserRead, UserUpdate
from pourfolio.auth.users import UserManager, fastapi_users, get_user_manager

__all__ = [
    "auth_backend",
    "get_user_db",
    "UserManager",
    "get_user_manager",
    "fastapi_users",
    "UserCreate",
    "UserRead",
    "UserUpdate",
]
