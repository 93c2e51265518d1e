# moviemind/main.py

import logging
from contextlib import asynccontextmanager
from typing import Optional
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from moviemind.api import api_router
from moviemind.core.config import Settings, get_settings
from moviemind.core.exceptions import register_exception_handlers
from moviemind.core.logging import configure_logging, log_requests
from moviemind.database import create_db_engine, create_session_factory, init_db
from moviemind.services.storage import DatabaseStorage

logger = logging.getLogger("moviemind")


@asynccontextmanager
async def lifespan(app: FastAPI):
    # 시작 시
    init_db(app.state.engine)
    logger.info("데이터베이스 테이블 준비 완료")

    if app.state.settings.seed_on_startup:
        await app.state.storage.seed_catalog()

    yield

    # 종료 시
    app.state.engine.dispose()
    logger.info("데이터베이스 연결 종료")


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """FastAPI 앱 생성"""
    settings = settings or get_settings()
    configure_logging(settings.log_level)

    app = FastAPI(
        title=settings.app_name,
        description="Movie discovery service",
        version=settings.version,
        docs_url="/docs",
        openapi_url="/openapi.json",
        lifespan=lifespan,
    )

    # 저장소 구성
    engine = create_db_engine(settings.database_url, echo=settings.debug)
    app.state.settings = settings
    app.state.engine = engine
    app.state.storage = DatabaseStorage(create_session_factory(engine))

    # CORS 미들웨어
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.allowed_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.middleware("http")(log_requests)

    register_exception_handlers(app)

    # API 라우터 등록
    app.include_router(api_router, prefix="/api")

    @app.get("/")
    def read_root():
        """서비스 루트"""
        return {
            "service": settings.app_name,
            "description": "Movie discovery service",
            "version": settings.version,
            "docs": "/docs",
        }

    return app


app = create_app()

# uvicorn moviemind.main:app --reload
