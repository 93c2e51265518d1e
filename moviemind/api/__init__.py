# moviemind/api/__init__.py

from fastapi import APIRouter
from . import auth, movies, favorites, system

api_router = APIRouter()

api_router.include_router(auth.router, tags=["인증"])
api_router.include_router(movies.router, tags=["영화"])
api_router.include_router(favorites.router, prefix="/favorites", tags=["즐겨찾기"])
api_router.include_router(system.router, tags=["시스템"])
