# moviemind/schemas/__init__.py

from .movie import Movie, MovieCreate
from .user import User, UserInDB, UserCredentials
from .favorite import FavoriteStatus
from .error import ErrorMessage, ValidationErrorMessage

__all__ = [
    "Movie",
    "MovieCreate",
    "User",
    "UserInDB",
    "UserCredentials",
    "FavoriteStatus",
    "ErrorMessage",
    "ValidationErrorMessage",
]
