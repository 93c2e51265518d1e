# moviemind/api/favorites.py

from typing import List
from fastapi import APIRouter, Depends
from moviemind.core.dependencies import get_current_user, get_storage
from moviemind.core.exceptions import NotFoundError
from moviemind.schemas.error import ErrorMessage
from moviemind.schemas.favorite import FavoriteStatus
from moviemind.schemas.movie import Movie
from moviemind.schemas.user import UserInDB
from moviemind.services.storage import DatabaseStorage

router = APIRouter()


@router.get(
    "",
    response_model=List[Movie],
    summary="즐겨찾기 목록",
    responses={401: {"model": ErrorMessage}},
)
async def list_favorites(
    current_user: UserInDB = Depends(get_current_user),
    storage: DatabaseStorage = Depends(get_storage),
):
    return await storage.list_favorites(current_user.id)


@router.post(
    "/{movie_id}",
    response_model=FavoriteStatus,
    summary="즐겨찾기 토글",
    responses={401: {"model": ErrorMessage}, 404: {"model": ErrorMessage}},
)
async def toggle_favorite(
    movie_id: int,
    current_user: UserInDB = Depends(get_current_user),
    storage: DatabaseStorage = Depends(get_storage),
):
    if not await storage.get_movie(movie_id):
        raise NotFoundError("Movie not found")

    is_favorite = await storage.toggle_favorite(current_user.id, movie_id)
    return FavoriteStatus(is_favorite=is_favorite)
