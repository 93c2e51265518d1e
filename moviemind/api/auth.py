# moviemind/api/auth.py

from fastapi import APIRouter, Depends, Response, status
from moviemind.core.auth import create_session_token
from moviemind.core.config import Settings
from moviemind.core.dependencies import (
    get_app_settings,
    get_auth_service,
    get_current_user,
    get_current_user_id,
)
from moviemind.core.exceptions import Unauthenticated
from moviemind.schemas.error import ErrorMessage, ValidationErrorMessage
from moviemind.schemas.user import User, UserCredentials, UserInDB
from moviemind.services.auth_service import AuthService

router = APIRouter()


def _start_session(response: Response, user: UserInDB, settings: Settings) -> None:
    response.set_cookie(
        key=settings.session_cookie_name,
        value=create_session_token(user.id, settings),
        max_age=settings.access_token_expire_minutes * 60,
        httponly=True,
        secure=settings.session_cookie_secure,
        samesite="lax",
        path="/",
    )


# 회원가입
@router.post(
    "/register",
    response_model=User,
    status_code=status.HTTP_201_CREATED,
    summary="회원가입",
    description="사용자 이름과 비밀번호로 가입하고 세션을 시작합니다.",
    responses={400: {"model": ValidationErrorMessage}, 409: {"model": ErrorMessage}},
)
async def register(
    credentials: UserCredentials,
    response: Response,
    auth_service: AuthService = Depends(get_auth_service),
    settings: Settings = Depends(get_app_settings),
):
    user = await auth_service.register(credentials)
    _start_session(response, user, settings)
    return user


# 로그인
@router.post(
    "/login",
    response_model=User,
    summary="로그인",
    responses={401: {"model": ErrorMessage}},
)
async def login(
    credentials: UserCredentials,
    response: Response,
    auth_service: AuthService = Depends(get_auth_service),
    settings: Settings = Depends(get_app_settings),
):
    user = await auth_service.authenticate(credentials.username, credentials.password)
    if not user:
        raise Unauthenticated("Invalid username or password")

    _start_session(response, user, settings)
    return user


# 로그아웃
@router.post("/logout", summary="로그아웃", response_class=Response)
async def logout(
    user_id: int = Depends(get_current_user_id),
    settings: Settings = Depends(get_app_settings),
):
    response = Response(status_code=status.HTTP_200_OK)
    response.delete_cookie(settings.session_cookie_name, path="/")
    return response


@router.get(
    "/user",
    response_model=User,
    summary="현재 사용자",
    responses={401: {"model": ErrorMessage}},
)
async def read_current_user(current_user: UserInDB = Depends(get_current_user)):
    return current_user
