# moviemind/api/movies.py

from typing import List
from fastapi import APIRouter, Depends
from moviemind.core.dependencies import get_recommendation_service, get_storage
from moviemind.core.exceptions import NotFoundError
from moviemind.schemas.error import ErrorMessage
from moviemind.schemas.movie import Movie
from moviemind.services.recommendation_service import RecommendationService
from moviemind.services.storage import DatabaseStorage

router = APIRouter()


@router.get("/movies", response_model=List[Movie], summary="영화 목록")
async def list_movies(storage: DatabaseStorage = Depends(get_storage)):
    return await storage.list_movies()


@router.get(
    "/movies/{movie_id}",
    response_model=Movie,
    summary="영화 상세",
    responses={404: {"model": ErrorMessage}},
)
async def get_movie(movie_id: int, storage: DatabaseStorage = Depends(get_storage)):
    movie = await storage.get_movie(movie_id)
    if not movie:
        raise NotFoundError("Movie not found")
    return movie


@router.get(
    "/recommendations",
    response_model=List[Movie],
    summary="추천 영화",
    description="카탈로그에서 무작위로 최대 3편을 고릅니다.",
)
async def get_recommendations(
    recommendation_service: RecommendationService = Depends(get_recommendation_service),
):
    return await recommendation_service.get_recommendations()
