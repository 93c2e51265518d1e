# moviemind/api/system.py

from fastapi import APIRouter, Depends
from moviemind.core.config import Settings
from moviemind.core.dependencies import get_app_settings

router = APIRouter()


@router.get("/health")
def health_check(settings: Settings = Depends(get_app_settings)):
    """서비스 헬스체크"""
    return {"status": "healthy", "service": settings.app_name}
