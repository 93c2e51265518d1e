# moviemind/core/dependencies.py

from fastapi import Depends, Request
from moviemind.core.auth import verify_session_token
from moviemind.core.config import Settings
from moviemind.core.exceptions import Unauthenticated
from moviemind.schemas.user import UserInDB
from moviemind.services.auth_service import AuthService
from moviemind.services.recommendation_service import RecommendationService
from moviemind.services.storage import DatabaseStorage


def get_app_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_storage(request: Request) -> DatabaseStorage:
    return request.app.state.storage


def get_auth_service(storage: DatabaseStorage = Depends(get_storage)) -> AuthService:
    return AuthService(storage)


def get_recommendation_service(
    storage: DatabaseStorage = Depends(get_storage),
    settings: Settings = Depends(get_app_settings),
) -> RecommendationService:
    return RecommendationService(storage, count=settings.recommendation_count)


def get_current_user_id(
    request: Request, settings: Settings = Depends(get_app_settings)
) -> int:
    """세션 쿠키의 사용자 ID (DB 조회 없음)"""
    token = request.cookies.get(settings.session_cookie_name)
    if not token:
        raise Unauthenticated()

    user_id = verify_session_token(token, settings)
    if user_id is None:
        raise Unauthenticated("Invalid session")
    return user_id


async def get_current_user(
    user_id: int = Depends(get_current_user_id),
    storage: DatabaseStorage = Depends(get_storage),
) -> UserInDB:
    """현재 로그인한 사용자 조회"""
    user = await storage.get_user(user_id)
    if not user:
        raise Unauthenticated("User not found")
    return user
