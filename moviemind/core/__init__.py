# moviemind/core/__init__.py

from .config import get_settings, Settings
from .auth import (
    verify_password,
    get_password_hash,
    create_session_token,
    verify_session_token,
)
from .exceptions import (
    AppError,
    ValidationError,
    NotFoundError,
    Unauthenticated,
    ConflictError,
)

__all__ = [
    "get_settings",
    "Settings",
    "verify_password",
    "get_password_hash",
    "create_session_token",
    "verify_session_token",
    "AppError",
    "ValidationError",
    "NotFoundError",
    "Unauthenticated",
    "ConflictError",
]
