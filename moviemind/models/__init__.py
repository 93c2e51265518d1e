# moviemind/models/__init__.py

from .user import UserModel
from .movie import MovieModel
from .favorite import FavoriteModel


__all__ = [
    "UserModel",
    "MovieModel",
    "FavoriteModel",
]
