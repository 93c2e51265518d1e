# moviemind/services/__init__.py

from .storage import DatabaseStorage
from .auth_service import AuthService
from .recommendation_service import RecommendationService, recommend

__all__ = [
    "DatabaseStorage",
    "AuthService",
    "RecommendationService",
    "recommend",
]
