# moviemind/core/config.py

from functools import lru_cache
from typing import List
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """설정 클래스"""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore"
    )

    # 애플리케이션 설정
    app_name: str = Field(default="MovieMind", description="애플리케이션 이름")
    version: str = Field(default="1.0.0", description="버전")
    debug: bool = Field(default=False, description="디버그 모드 (SQL 로그 출력)")
    log_level: str = Field(default="INFO", description="로그 레벨")

    # 데이터베이스 설정
    database_url: str = Field(default="sqlite:///./moviemind.db", description="DB 접속 URL")
    seed_on_startup: bool = Field(default=True, description="시작 시 영화 카탈로그 시드")

    # 세션 인증 설정
    secret_key: str = Field(default="secret-session-key", description="세션 토큰 서명 키")
    algorithm: str = Field(default="HS256", description="세션 토큰 알고리즘")
    access_token_expire_minutes: int = Field(default=60 * 24 * 7, description="세션 만료 시간(분)")
    session_cookie_name: str = Field(default="session", description="세션 쿠키 이름")
    session_cookie_secure: bool = Field(default=False, description="HTTPS 전용 쿠키 여부")

    # CORS 설정
    allowed_origins: List[str] = Field(
        default=["http://localhost:5173"],
        description="허용 Origin 목록"
    )

    # 추천 설정
    recommendation_count: int = Field(default=3, description="추천 영화 수")


@lru_cache()
def get_settings() -> Settings:
    return Settings()
